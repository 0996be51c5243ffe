"""Built-in procedures for the Kappa global frame.

This module defines the arithmetic, comparison and list primitives and the
`register` function that installs them. Every primitive takes the calling
frame and a list of already-evaluated arguments and checks its own arity and
argument types.
"""
from __future__ import annotations

import operator
from typing import Callable

from kappa import LispValue
from kappa.errors import KappaTypeError, KappaArityError, KappaZeroDivisionError
from kappa.printer import to_string
from kappa.types.cons import Cons
from kappa.types.environment import Frame
from kappa.types.nil import Nil
from kappa.types.primitive import Primitive
from kappa.types.symbol import Symbol

Number = int | float


def _is_number(value: LispValue) -> bool:
    # bool is an int subclass in Python but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_numbers(name: str, args: list[LispValue]) -> None:
    for arg in args:
        if not _is_number(arg):
            raise KappaTypeError(f"{name} expects numbers, got {to_string(arg)}")


def _check_arity(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise KappaArityError(
            f"{name} requires exactly {expected} argument(s), got {len(args)}"
        )


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(a: Number, b: Number) -> Number:
    """Exact when both are ints and b divides a; inexact otherwise."""
    if b == 0:
        raise KappaZeroDivisionError("Division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def _fold(
    name: str, op: Callable[[Number, Number], Number], start: Number, args: list[LispValue]
) -> Number:
    result = start
    try:
        for x in args:
            result = op(result, x)
    except OverflowError:
        # an Int too large to become a Double
        raise KappaTypeError(f"Numeric overflow in {name}") from None
    return result


def add(env: Frame, args: list[LispValue]) -> Number:
    _check_numbers("+", args)
    return _fold("+", operator.add, 0, args)


def mul(env: Frame, args: list[LispValue]) -> Number:
    _check_numbers("*", args)
    return _fold("*", operator.mul, 1, args)


def _left_fold(
    name: str, identity: Number, op: Callable[[Number, Number], Number], args: list[LispValue]
) -> Number:
    if not args:
        raise KappaArityError(f"{name} requires at least 1 argument")
    _check_numbers(name, args)
    if len(args) == 1:
        return _fold(name, op, identity, args)
    return _fold(name, op, args[0], args[1:])


def sub(env: Frame, args: list[LispValue]) -> Number:
    return _left_fold("-", 0, operator.sub, args)


def div(env: Frame, args: list[LispValue]) -> Number:
    return _left_fold("/", 1, _divide, args)


def modulo(env: Frame, args: list[LispValue]) -> int:
    """Truncating remainder: the result takes the sign of the dividend."""
    _check_arity("modulo", args, 2)
    a, b = args
    if not all(isinstance(x, int) and not isinstance(x, bool) for x in args):
        raise KappaTypeError("modulo expects two integers")
    if b == 0:
        raise KappaZeroDivisionError("modulo by zero")
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[float, float], bool]):
    def compare(env: Frame, args: list[LispValue]) -> bool:
        _check_arity(name, args, 2)
        _check_numbers(name, args)
        try:
            a, b = float(args[0]), float(args[1])
        except OverflowError:
            raise KappaTypeError(f"{name}: Int too large to compare as a Double") from None
        return op(a, b)
    return compare


num_eq = _comparison("=", operator.eq)
lt = _comparison("<", operator.lt)
gt = _comparison(">", operator.gt)


# -------------------------------
# List operations
# -------------------------------
def cons(env: Frame, args: list[LispValue]) -> Cons:
    _check_arity("cons", args, 2)
    return Cons(args[0], args[1])


def car(env: Frame, args: list[LispValue]) -> LispValue:
    _check_arity("car", args, 1)
    if not isinstance(args[0], Cons):
        raise KappaTypeError(f"car expects a pair, got {to_string(args[0])}")
    return args[0].car


def cdr(env: Frame, args: list[LispValue]) -> LispValue:
    _check_arity("cdr", args, 1)
    if not isinstance(args[0], Cons):
        raise KappaTypeError(f"cdr expects a pair, got {to_string(args[0])}")
    return args[0].cdr


def is_null(env: Frame, args: list[LispValue]) -> bool:
    _check_arity("null?", args, 1)
    return args[0] is Nil


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[str, Callable[[Frame, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "modulo": modulo,
    "=": num_eq,
    "<": lt,
    ">": gt,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "null?": is_null,
}


def register(env: Frame) -> None:
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})
