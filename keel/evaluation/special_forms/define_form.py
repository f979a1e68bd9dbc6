from keel import EvaluatorFn
from keel import SExpression, LispValue
from keel.errors import KeelTypeError
from keel.types.closure import Closure
from keel.types.environment import Environment
from keel.types.pair import Pair
from keel.types.symbol import Symbol
from keel.evaluation.special_forms.lambda_form import parse_formals


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define name value) or (define (name params...) body...)

    The value is computed before anything is bound, so a failing definition
    leaves the frame untouched. Returns the defined name.
    """
    if not tail:
        raise KeelTypeError("define: expected (define name value)")

    target = tail[0]
    if isinstance(target, Pair):
        name = target.car
        if not isinstance(name, Symbol):
            raise KeelTypeError("define: function name must be a symbol")
        formals = parse_formals(target.cdr, "define")
        value: LispValue = Closure(formals, tail[1:], env, name.id)
    else:
        if len(tail) != 2:
            raise KeelTypeError("define: expected (define name value)")
        if not isinstance(target, Symbol):
            raise KeelTypeError(f"define: {target!r} is not a symbol")
        name = target
        value = evaluate_fn(tail[1], env)
        if isinstance(value, Closure) and value.name is None:
            value.name = name.id

    env.define(name, value)
    return name
