import pytest

from minischeme.builtin.env_builtin import standard_environment
from minischeme.config import ARGUMENT_ERROR_POLICIES
from minischeme.interpreter import Interpreter

# Fixtures shared by the evaluator, builtin and REPL tests.
# `policy` runs a test once per argument error policy ("propagate", "drop");
# tests that must behave identically under both take it as a parameter.


@pytest.fixture
def env():
    """Fresh root environment with pi and the builtins loaded."""
    return standard_environment()


@pytest.fixture
def interp():
    return Interpreter(argument_errors="propagate")


@pytest.fixture(params=ARGUMENT_ERROR_POLICIES)
def policy(request):
    return request.param
