"""Core evaluator for the minischeme interpreter.

A recursive tree walk over the parsed forms. Special forms are dispatched
first; any other list whose head is a symbol is a procedure call.
"""

from __future__ import annotations

import logging
from typing import Optional

from minischeme import SExpression, LispValue
from minischeme.config import DROP, PROPAGATE
from minischeme.errors import SchemeError, SchemeNameError, SchemeSyntaxError
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol

_logger = logging.getLogger("minischeme.evaluator")


def evaluate(
    expr: SExpression, env: Environment, argument_errors: str = PROPAGATE
) -> Optional[LispValue]:
    """
    Evaluate one form in `env`. Returns the value, or None when the form
    produces no value (define, print).

    `argument_errors` decides what a failing argument evaluation does to the
    enclosing call: PROPAGATE aborts the call, DROP omits the argument.
    """
    _logger.debug("eval: %r", expr)

    match expr:
        case int() | float():
            return expr

        case Symbol():
            return env.lookup(expr)

        case ():
            raise SchemeSyntaxError("syntax error: cannot evaluate an empty list")

        case (Symbol() as head, *tail_args):
            if head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tuple(tail_args), env)

            proc = env.get(head)
            if not isinstance(proc, Procedure):
                raise SchemeNameError(f"symbol is not defined as a procedure: {head}")

            args = _evaluate_args(tail_args, env, argument_errors)
            return proc(args)

        case (_, *_):
            raise SchemeSyntaxError("syntax error: the head of a call must be a symbol")

    raise SchemeSyntaxError(f"syntax error: cannot evaluate {expr!r}")


def _evaluate_args(
    tail_args: list[SExpression], env: Environment, argument_errors: str
) -> list[LispValue]:
    """Evaluate call arguments left to right; valueless results are omitted."""
    args: list[LispValue] = []
    for arg in tail_args:
        try:
            val = evaluate(arg, env, argument_errors)
        except SchemeError as ex:
            if argument_errors != DROP:
                raise
            _logger.debug("dropping failed argument %r: %s", arg, ex)
            continue
        if val is not None:
            args.append(val)
    return args
