import pytest

from kappa.printer import render, to_string
from kappa.types.cons import Cons, from_iterable
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol
from kappa.types.void import Void


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "#t"),
        (False, "#f"),
        (42, "42"),
        (-3, "-3"),
        (3.5, "3.5"),
        (3.0, "3.0"),
        ("text", '"text"'),
        (Symbol("abc"), "abc"),
        (Nil, "()"),
        (from_iterable([1, 2, 3]), "(1 2 3)"),
        (from_iterable([1, from_iterable([2, Nil]), 3]), "(1 (2 ()) 3)"),
        (Cons(1, 2), "(1 . 2)"),
        (Cons(1, Cons(2, Symbol("x"))), "(1 2 . x)"),
        (from_iterable([Void]), "(#<void>)"),
    ],
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_cons_repr_uses_printer():
    assert repr(from_iterable([Symbol("a"), "b"])) == '(a "b")'


def test_procedures_print_opaquely(run):
    assert to_string(run("(lambda (x) x)")) == "#<procedure>"
    assert to_string(run("car")) == "#<procedure:car>"


def test_render_skips_void():
    assert render(Void) is None
    assert render(Nil) == "()"
    assert render(False) == "#f"


def test_quoted_list_prints_as_written(run):
    assert to_string(run("'(1 (2 \"s\" #t) . x)")) == '(1 (2 "s" #t) . x)'
    assert to_string(run("'(define (f) [g 1.5])")) == "(define (f) (g 1.5))"
