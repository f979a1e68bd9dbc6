from keel.reader.char_source import EOF, CharacterSource
from keel.reader.parser import read_sexp, read_all, read_string

__all__ = ["EOF", "CharacterSource", "read_sexp", "read_all", "read_string"]
