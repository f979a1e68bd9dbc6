from keel import EvaluatorFn
from keel import SExpression, LispValue
from keel.types.environment import Environment
from keel.types.nil import Nil


def eval_sequence(
    body: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate `body` in order and return the last value, or Nil when empty."""
    result: LispValue = Nil
    for expr in body:
        result = evaluate_fn(expr, env)
    return result


def begin_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    return eval_sequence(tail, env, evaluate_fn)
