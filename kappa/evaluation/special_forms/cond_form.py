"""Special form: cond, the multi-branch conditional."""

from kappa import SExpression, LispValue, EvaluatorFn
from kappa.errors import KappaSyntaxError
from kappa.types.cons import Cons, to_list
from kappa.types.environment import Frame
from kappa.types.symbol import Symbol
from kappa.types.void import Void
from kappa.evaluation.special_forms.logic_forms import expect_bool
from kappa.evaluation.special_forms.progn_form import eval_sequence

ELSE = Symbol("else")


def cond_form(tail: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate a (cond (test expr...) ...).

    For each clause in order:
    - Evaluate test; if #t, evaluate the clause body sequentially and return
      the last value. If the clause has only the test, return the test's value.
    - The symbol `else` is accepted as a test only in the last clause, where
      it always matches.
    If no clause matches, return Void.
    """
    clauses: list[list[SExpression]] = []
    for idx, clause in enumerate(tail):
        if not isinstance(clause, Cons):
            raise KappaSyntaxError("cond clause must be a non-empty list")
        clauses.append(to_list(clause, "cond clause"))
        if clauses[-1][0] == ELSE:
            if idx != len(tail) - 1:
                raise KappaSyntaxError("else must be the last clause of cond")
            if len(clauses[-1]) == 1:
                raise KappaSyntaxError("else clause of cond requires a body")

    for test, *body in clauses:
        if test == ELSE:
            return eval_sequence(body, env, evaluate_fn)

        if expect_bool(evaluate_fn(test, env), "cond test"):
            if not body:
                return True
            return eval_sequence(body, env, evaluate_fn)

    return Void
