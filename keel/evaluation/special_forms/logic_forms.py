from keel import SExpression, LispValue, EvaluatorFn
from keel.types.environment import Environment
from keel.evaluation.special_forms.if_form import is_true


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a false value
    (nil or #f) is found, which is returned immediately. Otherwise returns the
    value of the last operand; with zero operands, returns #t.
    """
    result: LispValue = True
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not is_true(result):
            return result
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns the first true operand value, or #f if there is none.
    """
    for expr in tail:
        value = evaluate_fn(expr, env)
        if is_true(value):
            return value
    return False
