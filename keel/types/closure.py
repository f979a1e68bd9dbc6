"""User-defined function values and argument binding."""

from __future__ import annotations

from keel import SExpression, LispValue
from keel.errors import KeelTypeError
from keel.types.environment import Environment
from keel.types.symbol import Symbol


class Closure:
    """A first-class lambda with formal parameters, body forms, and the defining frame."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        # Captured by reference: later definitions in this frame are visible
        self.env: Environment = env
        self.name = name

    def __repr__(self) -> str:
        if self.name:
            return f"#<closure {self.name}>"
        return "#<closure>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's formals in a fresh
        frame whose parent is the captured frame.
        """
        if len(args) != len(self.formals):
            raise KeelTypeError(
                f"{self.name or 'lambda'}: expected {len(self.formals)} "
                f"argument(s), got {len(args)}"
            )
        frame = Environment(outer=self.env)
        for formal, arg in zip(self.formals, args):
            frame.define(formal, arg)
        return frame
