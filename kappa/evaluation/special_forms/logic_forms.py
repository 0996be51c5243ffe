from kappa import SExpression, LispValue, EvaluatorFn
from kappa.errors import KappaSyntaxError, KappaTypeError
from kappa.printer import to_string
from kappa.types.environment import Frame


def expect_bool(value: LispValue, what: str) -> bool:
    """Return `value` if it is a Bool, else raise KappaTypeError naming `what`."""
    if not isinstance(value, bool):
        raise KappaTypeError(f"{what} must be a boolean, got {to_string(value)}")
    return value


def and_form(tail: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns #f at the
    first operand that is #f, without evaluating the rest. If every operand is
    #t, returns #t. Operands must be booleans; zero operands is a syntax error.
    """
    if not tail:
        raise KappaSyntaxError("and requires at least 1 argument")
    for expr in tail:
        if not expect_bool(evaluate_fn(expr, env), "and operand"):
            return False
    return True


def or_form(tail: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn) -> bool:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns #t at the
    first operand that is #t. If every operand is #f, returns #f. Operands must
    be booleans; zero operands is a syntax error.
    """
    if not tail:
        raise KappaSyntaxError("or requires at least 1 argument")
    for expr in tail:
        if expect_bool(evaluate_fn(expr, env), "or operand"):
            return True
    return False
