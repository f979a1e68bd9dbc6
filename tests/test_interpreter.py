import io
import logging
import sys

import pytest

from keel.errors import EndOfInput, KeelParseError, KeelTypeError, KeelUnboundVariable
from keel.interpreter import main
from keel.types.nil import Nil
from keel.types.pair import Pair
from keel.types.symbol import Symbol


# ------------------ evaluate_one ------------------

def test_evaluate_one_consumes_one_expression(make_interp):
    interp = make_interp("(define x 2) (+ x 1)")
    value, env = interp.evaluate_one()
    assert value == Symbol("x")
    assert env is interp.env
    value, _ = interp.evaluate_one()
    assert value == 3
    with pytest.raises(EndOfInput):
        interp.evaluate_one()


def test_evaluate_one_propagates_errors(make_interp):
    interp = make_interp(") (car 1) nowhere")
    with pytest.raises(KeelParseError):
        interp.evaluate_one()
    with pytest.raises(KeelTypeError):
        interp.evaluate_one()
    with pytest.raises(KeelUnboundVariable):
        interp.evaluate_one()


def test_getchar_sees_text_after_expression(make_interp):
    # The reader stops right after ')', so getchar gets the newline next
    interp = make_interp("(getchar)\nz")
    value, _ = interp.evaluate_one()
    assert value == ord("\n")
    assert interp.source.read_char() == "z"


def test_getchar_reads_rest_of_program_text(make_interp):
    interp = make_interp("(itoc (getchar))Q")
    value, _ = interp.evaluate_one()
    assert value == Symbol("Q")
    with pytest.raises(EndOfInput):
        interp.evaluate_one()


def test_definitions_persist_across_forms(make_interp):
    interp = make_interp("(define (twice n) (* 2 n))\n(twice 21)\n")
    interp.evaluate_one()
    value, _ = interp.evaluate_one()
    assert value == 42


# ------------------ run ------------------

def test_batch_run_prints_only_explicit_output(make_interp, out, err):
    interp = make_interp("(print 'hi)\n(+ 1 2)\n")
    assert interp.run() == 0
    assert out.getvalue() == "hi"
    assert err.getvalue() == ""


def test_run_reports_errors_and_continues(make_interp, out, err):
    interp = make_interp("(car 1)\nmissing\n(print 'after)\n")
    assert interp.run() == 2
    assert out.getvalue() == "after"
    lines = err.getvalue().splitlines()
    assert len(lines) == 2
    assert all(line.startswith("Error: ") for line in lines)


def test_run_skips_rest_of_line_after_parse_error(make_interp, out, err):
    interp = make_interp("(print 1)) (print 2)\n(print 3)\n")
    assert interp.run() == 1
    assert out.getvalue() == "13"
    assert "Unmatched" in err.getvalue()


def test_interactive_run_prompts_and_echoes(make_interp, out):
    interp = make_interp("(+ 1 2)\n'(a b)\n")
    interp.run(interactive=True, prompt="> ")
    assert out.getvalue() == "> 3\n> (a b)\n> \n"


def test_run_reports_runaway_recursion(make_interp, out, err):
    interp = make_interp("(define (loop n) (+ 1 (loop n)))\n(loop 0)\n(print 'alive)")
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    try:
        assert interp.run() == 1
    finally:
        sys.setrecursionlimit(limit)
    assert "recursion" in err.getvalue()
    assert out.getvalue() == "alive"


def test_interactive_echo_reports_runaway_rendering(make_interp, err):
    interp = make_interp("deep\n(print 'alive)\n")
    nested = Nil
    for _ in range(5000):
        nested = Pair(nested, Nil)
    interp.env.define(Symbol("deep"), nested)
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(1000)
    try:
        assert interp.run(interactive=True, prompt="> ") == 1
    finally:
        sys.setrecursionlimit(limit)
    assert "recursion" in err.getvalue()


def test_eval_uses_own_buffer(make_interp):
    interp = make_interp("k")
    assert interp.eval("(define a 1) (+ a 1)") == 2
    assert interp.eval("(itoc (getchar))") == Symbol("k")


# ------------------ main ------------------

def test_main_runs_file(tmp_path, capsys):
    program = tmp_path / "hello.keel"
    program.write_text("; greet\n(print (cat 'hello (cat (itoc 32) 'world)))\n(print (itoc 10))\n")
    assert main([str(program)]) == 0
    assert capsys.readouterr().out == "hello world\n"


def test_main_file_with_errors(tmp_path, capsys):
    program = tmp_path / "bad.keel"
    program.write_text("(cat 1 2)\n")
    assert main([str(program)]) == 1
    assert "(cat sym sym)" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.keel")]) == 2
    assert "cannot open" in capsys.readouterr().err


def test_main_reads_stdin_without_closing_it(capsys):
    stdin = io.StringIO("(print 'piped)")
    assert main([], stdin=stdin) == 0
    assert capsys.readouterr().out == "piped"
    assert not stdin.closed


def test_main_verbose_enables_debug_logging(tmp_path, caplog):
    program = tmp_path / "quiet.keel"
    program.write_text("(+ 1 2)\n")
    with caplog.at_level(logging.DEBUG, logger="keel"):
        assert main(["-v", str(program)]) == 0
    assert any(rec.name == "keel.reader.parser" for rec in caplog.records)


def test_main_runs_file_with_non_utf8_bytes(tmp_path, capsysbinary):
    program = tmp_path / "bytes.keel"
    program.write_bytes(b"(print 'ok)\n(print (getchar))\xff\n(print (itoc 255))\n")
    assert main([str(program)]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b"ok255\xff"
    assert captured.err == b""


def test_main_reads_stdin_as_bytes(capsysbinary):
    stdin = io.TextIOWrapper(io.BytesIO(b"(print (getchar))\xe9"))
    assert main([], stdin=stdin) == 0
    assert capsysbinary.readouterr().out == b"233"
