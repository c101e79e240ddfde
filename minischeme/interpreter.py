from __future__ import annotations

from typing import Iterator, Optional

from minischeme import LispValue
from minischeme.builtin.env_builtin import standard_environment
from minischeme.config import check_argument_errors, get_argument_errors
from minischeme.errors import SchemeRecursionError
from minischeme.evaluation.evaluator import evaluate
from minischeme.reader.parser import parse_all
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol


class Interpreter:
    """
    Orchestrates reading and evaluating minischeme code.
    Keeps one root Environment alive across calls so definitions persist.
    """

    def __init__(self, argument_errors: str | None = None):
        if argument_errors is None:
            argument_errors = get_argument_errors()
        self.argument_errors: str = check_argument_errors(argument_errors)
        self.env: Environment = standard_environment()

    def define(self, name: str, value: LispValue) -> None:
        self.env.define(Symbol(name), value)

    def eval_iter(self, code: str) -> Iterator[Optional[LispValue]]:
        """Read and evaluate the forms of `code` one at a time, yielding each result."""
        try:
            for expr in parse_all(code):
                yield evaluate(expr, self.env, self.argument_errors)
        except RecursionError:
            raise SchemeRecursionError("maximum nesting depth exceeded") from None

    def eval_all(self, code: str) -> list[Optional[LispValue]]:
        """Evaluate every top-level form in `code`; one result per form."""
        return list(self.eval_iter(code))

    def eval(self, code: str) -> Optional[LispValue]:
        results = self.eval_all(code)
        if not results:
            return None
        return results[-1]
