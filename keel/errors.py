class KeelError(Exception):
    """ Base class for all Keel errors"""
    pass

class KeelParseError(KeelError):
    """ Raised when the reader meets a malformed token or a mismatched delimiter"""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line

class KeelUnboundVariable(KeelError):
    """ Raised when a symbol is used before it is bound"""
    pass

class KeelTypeError(KeelError):
    """ Raised when a primitive or special form receives the wrong count or kind of arguments"""
    pass


class EndOfInput(EOFError):
    """ Raised when the character source is exhausted before another expression starts.

    Not a KeelError: it ends a read loop rather than reporting a fault, so
    ``except KeelError`` never swallows it.
    """
