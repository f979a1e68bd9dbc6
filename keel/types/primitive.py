from __future__ import annotations

from typing import Callable

from keel import LispValue


PrimitiveFn = Callable[[list[LispValue]], LispValue]


class Primitive:
    """A named host function taking the list of evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"
