from __future__ import annotations

import logging
from argparse import ArgumentParser

from minischeme import config
from minischeme.interpreter import Interpreter
from minischeme.repl import run


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(prog="minischeme", description="A minimal Lisp read/eval/print loop.")
    parser.add_argument("--log-level", type=str, default=None,
                        help="logging level (default: $MINISCHEME_LOG_LEVEL or WARNING)")
    parser.add_argument("--argument-errors", choices=config.ARGUMENT_ERROR_POLICIES, default=None,
                        help="what a failing argument does to its call "
                             "(default: $MINISCHEME_ARGUMENT_ERRORS or propagate)")
    parser.add_argument("--no-banner", action="store_true", help="do not print the welcome banner")
    args = parser.parse_args(argv)

    if args.log_level is not None:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            parser.error(f"unknown log level {args.log_level!r}")
    else:
        level = config.get_log_level()
    logging.basicConfig()
    logging.getLogger("minischeme").setLevel(level)

    interp = Interpreter(argument_errors=args.argument_errors)
    logging.getLogger("minischeme.repl").debug("Env: %r", interp.env)
    run(interp, banner=not args.no_banner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
