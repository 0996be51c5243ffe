from kappa.errors import KappaSyntaxError
from kappa.types.cons import to_list
from kappa.types.lambda_fn import Closure

from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.types.environment import Frame
from kappa.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Frame,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params ...) body): exactly one body expression
    if len(tail) != 2:
        raise KappaSyntaxError("lambda requires a parameter list and exactly 1 body expression")

    params, body = tail
    formals = to_list(params, "lambda parameter list")
    seen: set[Symbol] = set()
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise KappaSyntaxError("lambda parameters must be symbols")
        if formal in seen:
            raise KappaSyntaxError(f"Duplicate parameter {formal} in lambda")
        seen.add(formal)

    return Closure(formals, body, env)
