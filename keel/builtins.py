"""Primitive basis: the host functions bound in the root frame.

Every primitive takes the list of evaluated arguments and checks its own
shape, raising KeelTypeError with the expected call form on mismatch. The
I/O primitives close over the character source and output channel handed to
`register`; nothing here is global.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from keel import LispValue
from keel.errors import KeelTypeError
from keel.printer import render as default_render
from keel.reader.char_source import EOF, CharacterSource
from keel.types.environment import Environment
from keel.types.nil import Nil
from keel.types.pair import Pair, list_to_pair
from keel.types.primitive import Primitive, PrimitiveFn
from keel.types.symbol import Symbol

OK = Symbol("ok")
EMPTY_SYMBOL = Symbol("")


class OutputChannel(Protocol):
    def write(self, text: str) -> Any: ...


def is_integer(value: LispValue) -> bool:
    # bool is an int subclass but a separate Keel type
    return isinstance(value, int) and not isinstance(value, bool)


# -------------------------------
# I/O
# -------------------------------
def make_getchar(source: CharacterSource) -> PrimitiveFn:
    def getchar(args: list[LispValue]) -> LispValue:
        if args:
            raise KeelTypeError("(getchar)")
        ch = source.read_char()
        return -1 if ch == EOF else ord(ch)
    return getchar


def make_print(out: OutputChannel, render: Callable[[LispValue], str]) -> PrimitiveFn:
    def print_(args: list[LispValue]) -> LispValue:
        if len(args) != 1:
            raise KeelTypeError("(print value)")
        out.write(render(args[0]))
        return OK
    return print_


# -------------------------------
# Symbols
# -------------------------------
def itoc(args: list[LispValue]) -> LispValue:
    match args:
        case [int() as code] if is_integer(code):
            # Characters are bytes on the I/O channels
            if not 0 <= code <= 255:
                raise KeelTypeError(f"(itoc int): {code} is not a character code")
            return Symbol(chr(code))
    raise KeelTypeError("(itoc int)")


def cat(args: list[LispValue]) -> LispValue:
    match args:
        case [Symbol() as a, Symbol() as b]:
            return Symbol(a.id + b.id)
    raise KeelTypeError("(cat sym sym)")


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def _int_binop(name: str, op: Callable[[int, int], LispValue]) -> PrimitiveFn:
    def fn(args: list[LispValue]) -> LispValue:
        if len(args) != 2 or not all(is_integer(a) for a in args):
            raise KeelTypeError(f"({name} int int)")
        return op(args[0], args[1])
    return fn


def _divide(a: int, b: int) -> int:
    if b == 0:
        raise KeelTypeError("(/ int int): division by zero")
    return a // b


# -------------------------------
# Lists and predicates
# -------------------------------
def list_builtin(args: list[LispValue]) -> LispValue:
    return list_to_pair(args)


def pair(args: list[LispValue]) -> LispValue:
    if len(args) != 2:
        raise KeelTypeError("(pair a b)")
    return Pair(args[0], args[1])


def car(args: list[LispValue]) -> LispValue:
    match args:
        case [Pair() as p]:
            return p.car
    raise KeelTypeError("(car non-nil-pair)")


def cdr(args: list[LispValue]) -> LispValue:
    match args:
        case [Pair() as p]:
            return p.cdr
    raise KeelTypeError("(cdr non-nil-pair)")


def eq(args: list[LispValue]) -> LispValue:
    if len(args) != 2:
        raise KeelTypeError("(eq a b)")
    a, b = args
    if isinstance(a, Pair) or isinstance(b, Pair):
        return a is b
    return type(a) is type(b) and a == b


def _predicate(name: str, test: Callable[[LispValue], bool]) -> PrimitiveFn:
    def fn(args: list[LispValue]) -> LispValue:
        if len(args) != 1:
            raise KeelTypeError(f"({name} value)")
        return test(args[0])
    return fn


def basis(
    source: CharacterSource,
    out: OutputChannel,
    render: Callable[[LispValue], str] = default_render,
) -> list[tuple[str, PrimitiveFn]]:
    """The ordered (name, function) table installed by `register`."""
    return [
        ("getchar", make_getchar(source)),
        ("print", make_print(out, render)),
        ("itoc", itoc),
        ("cat", cat),
        ("+", _int_binop("+", lambda a, b: a + b)),
        ("-", _int_binop("-", lambda a, b: a - b)),
        ("*", _int_binop("*", lambda a, b: a * b)),
        ("/", _int_binop("/", _divide)),
        ("<", _int_binop("<", lambda a, b: a < b)),
        (">", _int_binop(">", lambda a, b: a > b)),
        ("=", _int_binop("=", lambda a, b: a == b)),
        ("list", list_builtin),
        ("pair", pair),
        ("car", car),
        ("cdr", cdr),
        ("eq", eq),
        ("atom?", _predicate("atom?", lambda v: not isinstance(v, Pair))),
        ("sym?", _predicate("sym?", lambda v: isinstance(v, Symbol))),
        ("int?", _predicate("int?", is_integer)),
        ("null?", _predicate("null?", lambda v: v is Nil)),
    ]


# -------------------------------
# Registration
# -------------------------------
def register(
    env: Environment,
    source: CharacterSource,
    out: OutputChannel,
    render: Callable[[LispValue], str] = default_render,
) -> Environment:
    """Install the primitive basis and built-in constants into `env`."""
    env.update({Symbol(name): Primitive(name, fn) for name, fn in basis(source, out, render)})
    env.define(Symbol("empty-symbol"), EMPTY_SYMBOL)
    return env
