import io

import pytest

from keel.interpreter import Interpreter
from keel.reader.char_source import CharacterSource


# Most tests need a session whose `getchar` reads from a known input and whose
# `print` writes to a buffer they can inspect. `make_interp` builds one; the
# `interp` fixture is the common case of an empty input.


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def err():
    return io.StringIO()


@pytest.fixture
def make_interp(out, err):
    def _make(stdin: str = "") -> Interpreter:
        return Interpreter(CharacterSource.from_string(stdin), out=out, err=err)
    return _make


@pytest.fixture
def interp(make_interp):
    return make_interp()
