# Core type aliases for Keel's data model.
# Integers and booleans are plain Python values; symbols, pairs, nil,
# primitives and closures are the small classes under keel.types.
#
# Naming guidance:
# - SExpression: Use in reader code and special forms to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; a datum read from text is evaluated directly, so the
# two are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = LispValue

# Evaluator function type: the single-step evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
