import pytest

from kappa.errors import KappaSyntaxError, KappaUnboundSymbol
from kappa.types.symbol import Symbol
from kappa.types.void import Void


def test_eval_returns_last_result(interp):
    assert interp.eval("(define x 2) (* x 21)") == 42


def test_eval_empty_program_is_void(interp):
    assert interp.eval("") is Void


def test_definitions_persist_across_calls(interp):
    interp.eval("(define square (lambda (n) (* n n)))")
    assert interp.eval("(square 12)") == 144


def test_run_yields_each_result(interp):
    results = list(interp.run("1 (define y 3) 'y (+ y 1)"))
    assert results == [1, Void, Symbol("y"), 4]


def test_syntax_error_prevents_any_evaluation(interp):
    with pytest.raises(KappaSyntaxError):
        list(interp.run("(define x 1) (+ x"))
    with pytest.raises(KappaUnboundSymbol):
        interp.eval("x")


def test_error_stops_remaining_forms(interp):
    results = []
    with pytest.raises(KappaUnboundSymbol):
        for value in interp.run("(define a 1) a nope (define b 2)"):
            results.append(value)
    assert results == [Void, 1]
    with pytest.raises(KappaUnboundSymbol):
        interp.eval("b")


def test_spec_examples(interp):
    assert interp.eval("(let* ((x 1) (y (+ x 1))) y)") == 2
    assert interp.eval("(letrec ((f (lambda (n) (if (= n 0) 1 (* n (f (- n 1))))))) (f 5))") == 120
    assert interp.eval("(define x 1) (set! x 2) x") == 2
    assert interp.eval("(define x 1) (define f (lambda () x)) (let ((x 2)) (f))") == 1
