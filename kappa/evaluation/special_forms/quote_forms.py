from kappa import SExpression, LispValue, EvaluatorFn
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Frame


def quote_form(
    tail: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise KappaSyntaxError("quote expects exactly 1 argument")
    return tail[0]
