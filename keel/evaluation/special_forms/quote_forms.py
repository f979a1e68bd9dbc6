from keel import SExpression, LispValue, EvaluatorFn
from keel.errors import KeelTypeError
from keel.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise KeelTypeError("quote: expected (quote datum)")
    return tail[0]
