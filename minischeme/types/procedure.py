"""Native procedure values."""

from __future__ import annotations

from typing import Callable, Optional

from minischeme import LispValue

NativeFn = Callable[[list[LispValue]], Optional[LispValue]]


class Procedure:
    """A named native callable taking the evaluated argument list.

    Procedures capture no environment; they see only their arguments.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> Optional[LispValue]:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<procedure {self.name} 0x{id(self):x}>"

    __str__ = __repr__
