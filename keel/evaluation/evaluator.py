"""Core evaluator for the Keel interpreter.

Evaluates a datum straight from the reader: symbols are looked up, lists
whose head names a special form are dispatched to its handler, any other
list is a function application, and everything else evaluates to itself.
"""

from __future__ import annotations

import logging

from keel import SExpression, LispValue
from keel.types.environment import Environment
from keel.types.pair import Pair, pair_to_list
from keel.types.symbol import Symbol
from keel.evaluation.apply import apply
from keel.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> tuple[LispValue, Environment]:
    """
    Evaluate a top-level form.

    Returns the value together with the environment to use for the next
    form. Definitions mutate `env` in place, so the returned environment is
    `env` itself.
    """
    value = evaluate0(expr, env)
    logger.debug("evaluated %r -> %r", expr, value)
    return value, env


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """
    Single-step recursive evaluator used by special forms and application.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(car=head, cdr=rest):
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](pair_to_list(rest, head.id), env, evaluate0)

            # Application: shape check, then head and operands left to right
            operands = pair_to_list(rest, "application")
            fn = evaluate0(head, env)
            args = [evaluate0(arg, env) for arg in operands]
            return apply(fn, args, evaluate0)

    # --- Atoms return as-is ---
    return expr
