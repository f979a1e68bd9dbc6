from keel import EvaluatorFn
from keel import SExpression, LispValue
from keel.errors import KeelTypeError
from keel.types.closure import Closure
from keel.types.environment import Environment
from keel.types.pair import pair_to_list
from keel.types.symbol import Symbol


def parse_formals(params: SExpression, form: str) -> list[Symbol]:
    """Validate a parameter list: a proper list of distinct symbols."""
    formals = pair_to_list(params, form)
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise KeelTypeError(f"{form}: parameter {formal!r} is not a symbol")
    if len(set(formals)) != len(formals):
        raise KeelTypeError(f"{form}: duplicate parameter name")
    return formals


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (params) body...): the body is an implicit begin; an empty
    # body makes the function return nil.
    if not tail:
        raise KeelTypeError("lambda: expected (lambda (params...) body...)")
    formals = parse_formals(tail[0], "lambda")
    return Closure(formals, tail[1:], env)
