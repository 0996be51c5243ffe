"""Binding special forms for Kappa: let, let*, letrec.

All three share the shape (form ((name init) ...) body ...) and differ only
in which frame each initializer is evaluated in:

- let:    every init sees the enclosing frame; names are bound afterwards.
- let*:   each init sees the bindings before it (one nested frame each).
- letrec: every init sees a single frame that already holds all names.
"""

from __future__ import annotations

from kappa import SExpression, LispValue, EvaluatorFn
from kappa.errors import KappaSyntaxError
from kappa.types.cons import to_list
from kappa.types.environment import Frame, Unassigned
from kappa.types.symbol import Symbol
from kappa.evaluation.special_forms.progn_form import eval_sequence


def _split_let(
    form_name: str, tail: list[SExpression], allow_duplicates: bool = False
) -> tuple[list[tuple[Symbol, SExpression]], list[SExpression]]:
    """Validate a binding form and return ([(name, init) ...], body)."""
    if not tail:
        raise KappaSyntaxError(f"{form_name} requires a binding list and a body")

    bindings: list[tuple[Symbol, SExpression]] = []
    seen: set[Symbol] = set()
    for entry in to_list(tail[0], f"{form_name} binding list"):
        parts = to_list(entry, f"{form_name} binding")
        if len(parts) != 2:
            raise KappaSyntaxError(f"{form_name} binding must be (name value)")
        name, init = parts
        if not isinstance(name, Symbol):
            raise KappaSyntaxError(f"{form_name} binding name must be a symbol")
        if not allow_duplicates and name in seen:
            raise KappaSyntaxError(f"Cannot bind {name} more than once in {form_name}")
        seen.add(name)
        bindings.append((name, init))

    body = tail[1:]
    if not body:
        raise KappaSyntaxError(f"{form_name} requires at least 1 body expression")
    return bindings, body


def let_form(
    tail: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn
) -> LispValue:
    bindings, body = _split_let("let", tail)
    # Evaluate every init before the new frame exists
    values = [evaluate_fn(init, env) for _, init in bindings]
    local_env = Frame(parent=env)
    for (name, _), value in zip(bindings, values):
        local_env.define(name, value)
    return eval_sequence(body, local_env, evaluate_fn)


def let_star_form(
    tail: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn
) -> LispValue:
    bindings, body = _split_let("let*", tail, allow_duplicates=True)
    local_env = Frame(parent=env)
    for i, (name, init) in enumerate(bindings):
        value = evaluate_fn(init, local_env)
        if i:
            local_env = Frame(parent=local_env)
        local_env.define(name, value)
    return eval_sequence(body, local_env, evaluate_fn)


def letrec_form(
    tail: list[SExpression], env: Frame, evaluate_fn: EvaluatorFn
) -> LispValue:
    bindings, body = _split_let("letrec", tail)
    local_env = Frame(parent=env)
    for name, _ in bindings:
        local_env.define(name, Unassigned)
    values = [evaluate_fn(init, local_env) for _, init in bindings]
    for (name, _), value in zip(bindings, values):
        local_env.vars[name] = value
    return eval_sequence(body, local_env, evaluate_fn)
