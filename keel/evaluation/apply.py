"""Application engine for Keel.

Centralizes function application for the evaluator: primitives receive the
evaluated argument list directly; closures get a fresh frame chained to the
frame they captured and evaluate their body there.
"""

from keel import LispValue, EvaluatorFn
from keel.errors import KeelTypeError
from keel.printer import render
from keel.types.closure import Closure
from keel.types.primitive import Primitive
from keel.evaluation.special_forms.progn_form import eval_sequence


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    Arity mismatches raise KeelTypeError (from Closure.extend_env).
    """
    frame = fn.extend_env(args)
    return eval_sequence(fn.body, frame, evaluate_fn)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Primitive or a Closure; anything else is a type error."""
    if isinstance(head, Primitive):
        return head(args)
    elif isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    else:
        raise KeelTypeError(f"application: cannot apply non-function {render(head)}")
