from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaSyntaxError
from kappa.types.symbol import Symbol
from kappa.types.environment import Frame
from kappa.types.void import Void


def set_form(
    tail: list[SExpression],
    env: Frame,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise KappaSyntaxError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise KappaSyntaxError("set! first argument must be a symbol")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Void
