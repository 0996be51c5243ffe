from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Frame
from kappa.evaluation.special_forms.logic_forms import expect_bool


def if_form(
    tail: list[SExpression],
    env: Frame,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise KappaSyntaxError(
            "if requires exactly 3 arguments: (if test consequent alternative)"
        )

    test, consequent, alternative = tail
    if expect_bool(evaluate_fn(test, env), "if condition"):
        return evaluate_fn(consequent, env)
    return evaluate_fn(alternative, env)
