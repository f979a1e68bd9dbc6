from keel import EvaluatorFn
from keel import SExpression, LispValue
from keel.errors import KeelTypeError
from keel.types.symbol import Symbol
from keel.types.environment import Environment


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 2:
        raise KeelTypeError("set!: expected (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise KeelTypeError(f"set!: first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
