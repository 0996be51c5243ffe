from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Frame
from kappa.types.symbol import Symbol
from kappa.types.void import Void


def define_form(
    tail: list[SExpression],
    env: Frame,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame, even when an outer frame already binds `name`.
    """
    if len(tail) != 2:
        raise KappaSyntaxError("define requires exactly 2 arguments: (define name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise KappaSyntaxError("define first argument must be a symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Void
