from __future__ import annotations
import logging
import os

# Argument failure policies for procedure calls.
PROPAGATE = 'propagate'
DROP = 'drop'
ARGUMENT_ERROR_POLICIES = (PROPAGATE, DROP)

# Defaults
_DEFAULT_PROMPT = 'scheme=> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_prompt() -> str:
    # The prompt keeps its trailing space, so it is not stripped.
    return os.environ.get('MINISCHEME_PROMPT') or _DEFAULT_PROMPT


def get_log_level() -> int:
    name = value_from_env('MINISCHEME_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level


def check_argument_errors(policy: str) -> str:
    policy = policy.strip().lower()
    if policy not in ARGUMENT_ERROR_POLICIES:
        raise ValueError(
            f"Unknown argument error policy {policy!r}, expected one of {ARGUMENT_ERROR_POLICIES}"
        )
    return policy


def get_argument_errors() -> str:
    return check_argument_errors(value_from_env('MINISCHEME_ARGUMENT_ERRORS', PROPAGATE))
