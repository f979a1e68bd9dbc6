"""
  Lisp Reader

- Streaming: pulls one character at a time from a CharacterSource and stops
  exactly after the last character of the expression, so input following it
  (a trailing newline, say) stays unread for `getchar` or the next read.
- Emits Keel values directly; there is no separate AST:

    - integers -> int
    - #t / #f -> bool
    - nil -> Nil
    - symbols -> Symbol
    - lists -> chains of Pair ending in Nil
    - dotted lists -> chains of Pair ending in the dotted tail
    - 'x -> (quote x)
    - ; comment to end of line -> skipped
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from keel import SExpression
from keel.errors import EndOfInput, KeelParseError
from keel.reader.char_source import EOF, CharacterSource
from keel.types.nil import Nil
from keel.types.pair import list_to_pair
from keel.types.symbol import Symbol

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"-?[0-9]+\Z")
# Tokens that start like a number must be one
NUMERIC_START_RE = re.compile(r"-?[0-9]")

DELIMITERS = frozenset("()';")

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#f": False,
}

QUOTE = Symbol("quote")

# Returned by _read_datum for a bare "." so only the list reader accepts it
_DOT = object()


def _is_delimiter(ch: str) -> bool:
    return ch == EOF or ch.isspace() or ch in DELIMITERS


def _skip_whitespace(source: CharacterSource) -> str:
    """Consume whitespace and comments; return the first significant character."""
    while True:
        ch = source.read_char()
        if ch == EOF:
            return ch
        if ch == ";":
            source.skip_line()
        elif not ch.isspace():
            return ch


def _read_token(source: CharacterSource, first: str) -> str:
    chars = [first]
    while True:
        ch = source.read_char()
        if _is_delimiter(ch):
            source.unread_char(ch)
            return "".join(chars)
        chars.append(ch)


def _parse_atom(token: str, line: int) -> SExpression:
    if INTEGER_RE.match(token):
        return int(token)
    if NUMERIC_START_RE.match(token):
        raise KeelParseError(f"Malformed integer literal {token!r}", line)
    if token.startswith("#"):
        try:
            return BOOLEANS[token]
        except KeyError:
            raise KeelParseError(f"Unknown literal {token!r}", line) from None
    if token == "nil":
        return Nil
    if token == ".":
        return _DOT
    return Symbol(token)


def _read_list(source: CharacterSource) -> SExpression:
    start_line = source.line
    items: list[SExpression] = []
    while True:
        ch = _skip_whitespace(source)
        if ch == EOF:
            raise KeelParseError(
                f"Unexpected end of input in list opened on line {start_line}",
                source.line,
            )
        if ch == ")":
            return list_to_pair(items)
        item = _read_datum(source, ch)
        if item is _DOT:
            return _read_dotted_tail(source, items)
        items.append(item)


def _read_dotted_tail(source: CharacterSource, items: list[SExpression]) -> SExpression:
    if not items:
        raise KeelParseError("'.' must follow at least one list element", source.line)
    ch = _skip_whitespace(source)
    if ch in (EOF, ")"):
        raise KeelParseError("Missing expression after '.'", source.line)
    tail = _read_datum(source, ch)
    if tail is _DOT:
        raise KeelParseError("Unexpected '.'", source.line)
    if _skip_whitespace(source) != ")":
        raise KeelParseError("Expected ')' after dotted tail", source.line)
    return list_to_pair(items, tail)


def _read_datum(source: CharacterSource, ch: str) -> SExpression:
    """Read one datum whose first significant character `ch` is already consumed."""
    if ch == "(":
        return _read_list(source)
    if ch == ")":
        raise KeelParseError("Unmatched ')'", source.line)
    if ch == "'":
        nxt = _skip_whitespace(source)
        if nxt == EOF:
            raise KeelParseError("Unexpected end of input after quote", source.line)
        quoted = _read_datum(source, nxt)
        if quoted is _DOT:
            raise KeelParseError("Unexpected '.'", source.line)
        return list_to_pair([QUOTE, quoted])
    return _parse_atom(_read_token(source, ch), source.line)


def read_sexp(source: CharacterSource) -> SExpression:
    """Read exactly one s-expression from `source`.

    Raises EndOfInput if the source is exhausted before any token starts,
    and KeelParseError on malformed input. On error the source is left just
    past the offending character.
    """
    ch = _skip_whitespace(source)
    if ch == EOF:
        raise EndOfInput("No more input")
    datum = _read_datum(source, ch)
    if datum is _DOT:
        raise KeelParseError("Unexpected '.'", source.line)
    logger.debug("read %r (line %d)", datum, source.line)
    return datum


def read_all(source: CharacterSource) -> Iterator[SExpression]:
    while True:
        try:
            yield read_sexp(source)
        except EndOfInput:
            return


def read_string(text: str) -> SExpression:
    """Read the first s-expression in `text`."""
    return read_sexp(CharacterSource.from_string(text))
