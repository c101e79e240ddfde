"""External representation of values, used by `print` and the REPL echo."""

from __future__ import annotations

from minischeme import LispValue
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol


def to_string(value: LispValue) -> str:
    # Integer -> digits, Float -> repr, Symbol -> raw text, List -> '(a b c)
    match value:
        case list():
            return "'(" + " ".join(to_string(v) for v in value) + ")"
        case Symbol():
            return value.id
        case Procedure():
            return repr(value)
        case int() | float():
            return repr(value)
    raise TypeError(f"not a minischeme value: {value!r}")
