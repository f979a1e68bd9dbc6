"""Special form: cond, the multi-branch conditional.

(cond (test body...) ...) evaluates each test in turn; the first true one
selects its clause. A clause with no body yields the test value. The symbol
`else` as a test always matches. With no matching clause the result is nil.
"""

from keel import SExpression, LispValue, EvaluatorFn
from keel.errors import KeelTypeError
from keel.types.environment import Environment
from keel.types.nil import Nil
from keel.types.pair import Pair, pair_to_list
from keel.types.symbol import Symbol
from keel.evaluation.special_forms.if_form import is_true
from keel.evaluation.special_forms.progn_form import eval_sequence

ELSE = Symbol("else")


def cond_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    for clause in tail:
        if not isinstance(clause, Pair):
            raise KeelTypeError("cond: expected (cond (test body...) ...)")
        test, *body = pair_to_list(clause, "cond")
        value = True if test == ELSE else evaluate_fn(test, env)
        if is_true(value):
            return eval_sequence(body, env, evaluate_fn) if body else value
    return Nil
