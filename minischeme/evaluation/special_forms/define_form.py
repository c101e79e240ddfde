from __future__ import annotations

from minischeme import SExpression, LispValue
from minischeme.errors import SchemeDefineArityError, SchemeSyntaxError
from minischeme.types.environment import Environment
from minischeme.types.number import is_number
from minischeme.types.symbol import Symbol


def define_form(tail: tuple[SExpression, ...], env: Environment) -> LispValue:
    """
    (define name value)
    The value form is bound unevaluated: a number literal becomes a Number and a
    symbol is stored as a Symbol value. Binds in the local frame and yields no value.
    """
    if len(tail) != 2:
        raise SchemeDefineArityError("wrong syntax for define expression: expected a name and a value")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SchemeSyntaxError("wrong syntax for define expression: name must be a symbol")
    if not (is_number(val_expr) or isinstance(val_expr, Symbol)):
        raise SchemeSyntaxError("wrong syntax for define expression: value must be a number or a symbol")

    env.define(name, val_expr)
    return None
