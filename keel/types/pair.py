"""Cons cells for Keel lists.

A proper list is a chain of Pairs whose last cdr is Nil; anything else in the
final cdr makes an improper (dotted) list.
"""

from __future__ import annotations

from typing import Iterable

from keel import LispValue
from keel.errors import KeelTypeError
from keel.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        # Walk iteratively so long lists do not recurse once per element
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"


def list_to_pair(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from `items`, ending in `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def pair_to_list(expr: LispValue, form: str = "list") -> list[LispValue]:
    """Flatten a proper list into a Python list.

    Raises KeelTypeError naming `form` if `expr` is not a proper list.
    """
    items: list[LispValue] = []
    while isinstance(expr, Pair):
        items.append(expr.car)
        expr = expr.cdr
    if expr is not Nil:
        raise KeelTypeError(f"{form}: expected a proper list")
    return items
