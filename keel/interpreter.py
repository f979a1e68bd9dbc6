from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from keel import LispValue, __version__
from keel import config
from keel.builtins import OutputChannel, register
from keel.errors import EndOfInput, KeelError, KeelParseError
from keel.evaluation.evaluator import evaluate
from keel.printer import render as default_render
from keel.reader.char_source import CHANNEL_ENCODING, CharacterSource, as_byte_channel
from keel.reader.parser import read_all, read_sexp
from keel.types.environment import Environment
from keel.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A Keel session: one character source, one output channel, and the
    environment threaded through every top-level form.

    The basis is built once here; `getchar` and `print` read and write
    through the same source and channel the loop uses.
    """

    def __init__(
        self,
        source: CharacterSource | None = None,
        out: OutputChannel | None = None,
        err: OutputChannel | None = None,
        render: Callable[[LispValue], str] = default_render,
    ):
        self.source = source if source is not None else CharacterSource(sys.stdin)
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.render = render
        self.env: Environment = register(Environment(), self.source, self.out, render)

    def evaluate_one(self) -> tuple[LispValue, Environment]:
        """Read and evaluate exactly one s-expression from the source.

        Raises EndOfInput when no expression remains, otherwise propagates
        KeelParseError, KeelTypeError and KeelUnboundVariable unchanged.
        """
        expr = read_sexp(self.source)
        value, self.env = evaluate(expr, self.env)
        return value, self.env

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value (nil if none).

        The code is read from its own buffer; `getchar` still reads the
        session source.
        """
        result: LispValue = Nil
        for expr in read_all(CharacterSource.from_string(code)):
            result, self.env = evaluate(expr, self.env)
        return result

    def _report(self, ex: BaseException) -> None:
        logger.debug("recovered from %s", type(ex).__name__, exc_info=ex)
        self.err.write(f"Error: {ex}\n")

    def run(self, interactive: bool = False, prompt: Optional[str] = None) -> int:
        """Read-eval-print until the source is exhausted.

        Interactive sessions show a prompt and echo each value. Errors are
        reported and the loop carries on; after a parse error the rest of
        the offending line is discarded. Returns the number of errors.
        """
        if prompt is None:
            prompt = config.get_prompt()
        errors = 0
        while True:
            if interactive:
                self.out.write(prompt)
                self._flush()
            try:
                value, _ = self.evaluate_one()
                if interactive:
                    self.out.write(self.render(value) + "\n")
            except EndOfInput:
                if interactive:
                    self.out.write("\n")
                break
            except KeelParseError as ex:
                errors += 1
                self._report(ex)
                self.source.skip_line()
            except KeelError as ex:
                errors += 1
                self._report(ex)
            except RecursionError:
                errors += 1
                self._report(RecursionError("maximum recursion depth exceeded"))
            self._flush()
        return errors

    def _flush(self) -> None:
        flush = getattr(self.out, "flush", None)
        if flush is not None:
            flush()


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keel", description="Keel Lisp interpreter")
    parser.add_argument("file", nargs="?", help="source file to run (default: standard input)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))
    # Bytes in, bytes out: what getchar reads, itoc/print write back unchanged
    as_byte_channel(sys.stdout, errors="replace")

    if args.file is None:
        # Standard input belongs to the process; it is never closed here
        channel = as_byte_channel(stdin if stdin is not None else sys.stdin)
        interactive = channel.isatty()
        errors = Interpreter(CharacterSource(channel)).run(interactive=interactive)
        return 0 if interactive or not errors else 1

    try:
        fh = open(args.file, encoding=CHANNEL_ENCODING, newline="")
    except OSError as ex:
        print(f"keel: cannot open {args.file}: {ex.strerror}", file=sys.stderr)
        return 2
    with fh:
        errors = Interpreter(CharacterSource(fh)).run(interactive=False)
    return 1 if errors else 0
