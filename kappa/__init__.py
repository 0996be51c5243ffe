# Core type aliases for Kappa's data model.
# Atoms map onto plain Python types (int, float, bool, str) plus the Symbol,
# Nil and Void singletons from kappa.types; lists are Cons chains.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; parse trees and runtime values share one model.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
