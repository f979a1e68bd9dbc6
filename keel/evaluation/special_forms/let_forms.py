"""Special forms: let, let* and letrec.

All three take (form ((name expr) ...) body...) and evaluate the body in a
new frame. They differ in where the initialisers are evaluated:

- let: every initialiser in the enclosing frame, then all names are bound.
- let*: each initialiser sees the names bound before it.
- letrec: every name is declared first (uninitialised), so initialisers can
  build closures that refer to any of the names, including themselves.
"""

from keel import SExpression, LispValue, EvaluatorFn
from keel.errors import KeelTypeError
from keel.types.closure import Closure
from keel.types.environment import Environment
from keel.types.pair import pair_to_list
from keel.types.symbol import Symbol
from keel.evaluation.special_forms.progn_form import eval_sequence


def _parse_bindings(tail: list[SExpression], form: str) -> tuple[list[tuple[Symbol, SExpression]], list[SExpression]]:
    if not tail:
        raise KeelTypeError(f"{form}: expected ({form} ((name expr) ...) body...)")
    bindings = []
    for binding in pair_to_list(tail[0], form):
        parts = pair_to_list(binding, form)
        if len(parts) != 2 or not isinstance(parts[0], Symbol):
            raise KeelTypeError(f"{form}: each binding must be (name expr)")
        bindings.append((parts[0], parts[1]))
    return bindings, tail[1:]


def _named(value: LispValue, name: Symbol) -> LispValue:
    if isinstance(value, Closure) and value.name is None:
        value.name = name.id
    return value


def let_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    bindings, body = _parse_bindings(tail, "let")
    values = [_named(evaluate_fn(expr, env), name) for name, expr in bindings]
    frame = Environment(outer=env)
    for (name, _), value in zip(bindings, values):
        frame.define(name, value)
    return eval_sequence(body, frame, evaluate_fn)


def let_star_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    bindings, body = _parse_bindings(tail, "let*")
    frame = env
    for name, expr in bindings:
        value = _named(evaluate_fn(expr, frame), name)
        frame = Environment(outer=frame)
        frame.define(name, value)
    return eval_sequence(body, Environment(outer=frame), evaluate_fn)


def letrec_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    bindings, body = _parse_bindings(tail, "letrec")
    frame = Environment(outer=env)
    cells = [frame.declare(name) for name, _ in bindings]
    for cell, (name, expr) in zip(cells, bindings):
        cell.value = _named(evaluate_fn(expr, frame), name)
    return eval_sequence(body, frame, evaluate_fn)
