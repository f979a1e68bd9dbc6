"""Textual rendering of Keel values.

Integers and symbols render so that reading the text back yields an equal
value (the empty symbol renders as nothing).
"""

from __future__ import annotations

from io import StringIO

from keel import LispValue
from keel.types.closure import Closure
from keel.types.nil import NilType
from keel.types.pair import Pair
from keel.types.primitive import Primitive
from keel.types.symbol import Symbol


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, NilType):
        buffer.write("nil")
    elif isinstance(value, Pair):
        buffer.write("(")
        _write(value.car, buffer)
        rest = value.cdr
        while isinstance(rest, Pair):
            buffer.write(" ")
            _write(rest.car, buffer)
            rest = rest.cdr
        if not isinstance(rest, NilType):
            buffer.write(" . ")
            _write(rest, buffer)
        buffer.write(")")
    elif isinstance(value, (Primitive, Closure)):
        buffer.write(repr(value))
    else:
        buffer.write(f"#<python {value!r}>")


def render(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
