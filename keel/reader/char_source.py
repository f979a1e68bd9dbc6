"""Character stream with one character of pushback.

Shared by the reader and the `getchar` primitive, so both see the same
position in the input.
"""

from __future__ import annotations

import io
from typing import Optional, Protocol

# read(1) returns "" once the channel is exhausted
EOF = ""

# Every byte decodes to exactly one character whose code is the byte value,
# so no input can fail to decode and `getchar` sees bytes
CHANNEL_ENCODING = "latin-1"


class TextChannel(Protocol):
    def read(self, size: int = -1) -> str: ...


def as_byte_channel(stream, errors: str = "strict"):
    """Switch a text stream to the byte-per-character encoding, if it can be.

    Streams without `reconfigure` (StringIO, test doubles) are returned as is.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding=CHANNEL_ENCODING, errors=errors)
    return stream


class CharacterSource:
    """Reads one character at a time from a text channel.

    The channel is borrowed: the source never closes it.
    """

    __slots__ = ("channel", "line", "_pushed")

    def __init__(self, channel: TextChannel):
        self.channel = channel
        self.line = 1
        self._pushed: Optional[str] = None

    @classmethod
    def from_string(cls, text: str) -> CharacterSource:
        return cls(io.StringIO(text))

    def read_char(self) -> str:
        """Return the next character, or EOF when the channel is exhausted."""
        if self._pushed is not None:
            ch, self._pushed = self._pushed, None
        else:
            ch = self.channel.read(1)
        if ch == "\n":
            self.line += 1
        return ch

    def unread_char(self, ch: str) -> None:
        """Put `ch` back so the next read_char returns it."""
        if ch == EOF:
            return
        if self._pushed is not None:
            raise RuntimeError(
                f"pushback slot already holds {self._pushed!r}; cannot push {ch!r}"
            )
        if ch == "\n":
            self.line -= 1
        self._pushed = ch

    def peek_char(self) -> str:
        ch = self.read_char()
        self.unread_char(ch)
        return ch

    def skip_line(self) -> None:
        """Discard input up to and including the next newline."""
        while True:
            ch = self.read_char()
            if ch in ("\n", EOF):
                return

    def __repr__(self) -> str:
        return f"<CharacterSource line={self.line} pushed={self._pushed!r}>"
