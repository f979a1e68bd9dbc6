from __future__ import annotations

from keel import LispValue


class Cell:
    """A mutable binding slot shared by every frame holder and closure.

    ``value`` is None while the binding is declared but not yet initialised
    (letrec), which lets a closure be created before the cell it refers to
    is filled.
    """

    __slots__ = ("value",)

    def __init__(self, value: LispValue | None = None):
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"
