import pytest

from keel.errors import KeelTypeError, KeelUnboundVariable
from keel.evaluation.evaluator import evaluate
from keel.reader.parser import read_string
from keel.types.closure import Closure
from keel.types.environment import Environment
from keel.types.nil import Nil
from keel.types.pair import list_to_pair
from keel.types.primitive import Primitive
from keel.types.symbol import Symbol

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------


@pytest.fixture
def calls():
    return []


@pytest.fixture
def env(calls):
    def record(args):
        calls.append(args[0])
        return args[0]

    env = Environment()
    env.define(Symbol("+"), Primitive("+", lambda args: sum(args)))
    env.define(Symbol("record"), Primitive("record", record))
    env.define(Symbol("x"), 42)
    return env


def run(source, env):
    value, _ = evaluate(read_string(source), env)
    return value


# -----------------------------------------------------
# Tests
# -----------------------------------------------------


def test_self_evaluating_literals(env):
    assert run("1", env) == 1
    assert run("#t", env) is True
    assert run("nil", env) is Nil


def test_evaluate_returns_environment(env):
    value, new_env = evaluate(read_string("(define y 1)"), env)
    assert new_env is env
    assert value == Symbol("y")


def test_symbol_lookup(env):
    assert run("x", env) == 42
    with pytest.raises(KeelUnboundVariable):
        run("z", env)


def test_quote(env):
    assert run("'(1 2 3)", env) == list_to_pair([1, 2, 3])
    assert run("'x", env) == Symbol("x")


def test_quote_shape(env):
    with pytest.raises(KeelTypeError):
        run("(quote)", env)
    with pytest.raises(KeelTypeError):
        run("(quote a b)", env)


def test_primitive_application(env):
    assert run("(+ 1 2)", env) == 3


def test_operands_evaluated_left_to_right(env, calls):
    run("(+ (record 1) (record 2) (record 3))", env)
    assert calls == [1, 2, 3]


def test_lambda_simple(env):
    assert run("((lambda (a b) (+ a b)) 2 3)", env) == 5


def test_lambda_captures_frame(env):
    run("(define make-adder (lambda (n) (lambda (m) (+ n m))))", env)
    run("(define add5 (make-adder 5))", env)
    assert run("(add5 10)", env) == 15


def test_closure_sees_later_definitions(env):
    run("(define f (lambda () later))", env)
    run("(define later 9)", env)
    assert run("(f)", env) == 9


def test_recursive_definition_resolves_through_cell(env):
    run("(define count (lambda (n) (if (eq0 n) 'done (count (dec n)))))", env)
    env.define(Symbol("eq0"), Primitive("eq0", lambda args: args[0] == 0))
    env.define(Symbol("dec"), Primitive("dec", lambda args: args[0] - 1))
    assert run("(count 5)", env) == Symbol("done")


def test_closure_arity_mismatch(env):
    with pytest.raises(KeelTypeError):
        run("((lambda (a) a))", env)
    with pytest.raises(KeelTypeError):
        run("((lambda (a) a) 1 2)", env)


def test_apply_non_function(env):
    with pytest.raises(KeelTypeError, match=r"^application: "):
        run("(1 2)", env)


def test_improper_application(env):
    with pytest.raises(KeelTypeError):
        run("(+ 1 . 2)", env)


def test_function_values_self_evaluate(env):
    lam = run("(lambda (a) a)", env)
    assert isinstance(lam, Closure)
    assert evaluate(lam, env)[0] is lam


def test_failed_definition_binds_nothing(env):
    with pytest.raises(KeelUnboundVariable):
        run("(define y (+ 1 missing))", env)
    assert Symbol("y") not in env.vars
