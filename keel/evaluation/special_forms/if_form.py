from keel import EvaluatorFn
from keel import SExpression, LispValue
from keel.errors import KeelTypeError
from keel.types.nil import Nil
from keel.types.environment import Environment


def is_true(value: LispValue) -> bool:
    # Only #f and nil are false
    return not (value is False or value is Nil)


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) not in (2, 3):
        raise KeelTypeError("if: expected (if test then [else])")

    if is_true(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    return Nil
