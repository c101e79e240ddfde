# Core type aliases for the minischeme data model.
# Plain Python types carry both code and runtime values:
#
# - SExpression: a parsed form. int (Integer), float (Float), Symbol, or a
#   tuple of SExpression (Children). Tuples keep the tree immutable.
# - LispValue: an evaluated result. int / float (Number), Symbol, Procedure,
#   or a list of LispValue (List). "No value" is None.

from typing import Any

# Runtime value alias
LispValue = Any
# Parsed forms
SExpression = Any

__version__ = "0.1.0"

from minischeme.interpreter import Interpreter  # noqa: E402
from minischeme.errors import SchemeError  # noqa: E402

__all__ = ["Interpreter", "SchemeError", "LispValue", "SExpression"]
