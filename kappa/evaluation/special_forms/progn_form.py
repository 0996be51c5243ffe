from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.types.environment import Frame
from kappa.types.void import Void


def eval_sequence(
    body: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate `body` left to right in `env`; the last value, or Void if empty."""
    result: LispValue = Void
    for expr in body:
        result = evaluate_fn(expr, env)
    return result


def begin_form(
    tail: list[SExpression],
    env: Frame,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return eval_sequence(tail, env, evaluate_fn)
