"""Application engine for Kappa.

Closures run their body in a fresh frame whose parent is the frame they were
created in (lexical scoping); primitives are called directly with the
already-evaluated arguments and do their own arity and type checks.
"""

from kappa import LispValue, EvaluatorFn
from kappa.errors import KappaTypeError
from kappa.printer import to_string
from kappa.types.environment import Frame
from kappa.types.lambda_fn import Closure
from kappa.types.primitive import Primitive


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Frame,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive to evaluated `args`.

    `env` is the caller's frame; only primitives see it.
    Raises KappaTypeError for anything that is not a procedure.
    """
    if isinstance(head, Closure):
        return evaluate_fn(head.body, head.extend_env(args))
    elif isinstance(head, Primitive):
        return head(env, args)
    else:
        raise KappaTypeError(f"Not applicable: {to_string(head)}")
