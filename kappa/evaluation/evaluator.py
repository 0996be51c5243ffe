"""Core evaluator for the Kappa interpreter.

Implements special-form dispatch and ordinary procedure calls. Evaluation is
plainly recursive: every nested form and every procedure body is a Python
call, so deep Kappa recursion is bounded by Python's recursion limit.
"""

from __future__ import annotations

from kappa import SExpression, LispValue
from kappa.errors import KappaSyntaxError
from kappa.types.cons import Cons, to_list
from kappa.types.environment import Frame
from kappa.types.nil import NilType
from kappa.types.symbol import Symbol
from kappa.evaluation.apply import apply
from kappa.evaluation.special_forms import SPECIAL_FORMS, special_form_of


def evaluate(expr: SExpression, env: Frame) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Cons(car=head, cdr=rest):
            # --- Special forms handling ---
            if isinstance(head, Symbol):
                form = special_form_of(head)
                if form is not None:
                    tail_args = to_list(rest, f"{head} form")
                    return SPECIAL_FORMS[form](tail_args, env, evaluate)

            # --- Procedure call: operator, then operands left to right ---
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in to_list(rest, "procedure call")]
            return apply(fn, args, env, evaluate)

        case NilType():
            raise KappaSyntaxError("Missing procedure expression in ()")

    # --- Atoms return as-is ---
    return expr
