import pytest

from kappa.errors import KappaArityError, KappaSyntaxError, KappaTypeError, KappaUnboundSymbol
from kappa.evaluation.evaluator import evaluate
from kappa.types.cons import Cons, from_iterable
from kappa.types.environment import Frame
from kappa.types.nil import Nil
from kappa.types.primitive import Primitive
from kappa.types.symbol import Symbol
from kappa.types.void import Void

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(Void, env) is Void


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(KappaUnboundSymbol):
        evaluate(Symbol("z"), env)


def test_simple_expression(env):
    expr = from_iterable([Symbol("+"), 1, 2])
    assert evaluate(expr, env) == 3


def test_primitives_are_installed(env):
    plus = env.lookup(Symbol("+"))
    assert isinstance(plus, Primitive)
    assert plus(env, [1, 2]) == 3


def test_empty_combination_is_error(env):
    with pytest.raises(KappaSyntaxError):
        evaluate(Nil, env)


def test_improper_call_is_error(env):
    with pytest.raises(KappaSyntaxError):
        evaluate(Cons(Symbol("+"), Cons(1, 2)), env)


def test_operator_expression_is_evaluated(run):
    assert run("((lambda (x) (* x x)) 7)") == 49
    assert run("((if #t + *) 3 4)") == 7


def test_arguments_evaluated_left_to_right(run):
    source = """
    (define trace '())
    (define note (lambda (x) (begin (set! trace (cons x trace)) x)))
    (+ (note 1) (note 2) (note 3))
    trace
    """
    assert run(source) == from_iterable([3, 2, 1])


def test_not_applicable(run):
    with pytest.raises(KappaTypeError):
        run("(1 2 3)")
    with pytest.raises(KappaTypeError):
        run("('(1) 2)")


def test_unbound_operator(run):
    with pytest.raises(KappaUnboundSymbol):
        run("(nope 1)")


def test_closures_capture_definition_environment(run):
    assert run("(define x 1) (define f (lambda () x)) (let ((x 2)) (f))") == 1


def test_closure_sees_later_mutation_of_captured_frame(run):
    assert run("(define x 1) (define f (lambda () x)) (set! x 5) (f)") == 5


def test_closure_frame_is_shared_across_calls(run):
    source = """
    (define make-adder (lambda (n) (lambda (m) (+ n m))))
    (define add2 (make-adder 2))
    (define add10 (make-adder 10))
    (+ (add2 1) (add10 1) (add2 0))
    """
    assert run(source) == 16


def test_parameters_shadow_globals(run):
    assert run("(define x 1) ((lambda (x) (* x 100)) 2)") == 200
    assert run("x") == 1


def test_recursive_define(run):
    source = """
    (define fact (lambda (n) (if (= n 0) 1 (* n (fact (- n 1))))))
    (fact 10)
    """
    assert run(source) == 3628800


def test_list_recursion(run):
    source = """
    (define len (lambda (xs) (if (null? xs) 0 (+ 1 (len (cdr xs))))))
    (len '(a b c d))
    """
    assert run(source) == 4


def test_higher_order_procedures(run):
    source = """
    (define map1 (lambda (f xs)
      (if (null? xs) '() (cons (f (car xs)) (map1 f (cdr xs))))))
    (map1 (lambda (x) (* x x)) '(1 2 3))
    """
    assert run(source) == from_iterable([1, 4, 9])


def test_closure_arity_error_from_call_site(run):
    run("(define f (lambda (a b) a))")
    with pytest.raises(KappaArityError):
        run("(f 1)")


def test_deep_recursion_exhausts_python_stack(run):
    run("(define down (lambda (n) (if (= n 0) 0 (down (- n 1)))))")
    with pytest.raises(RecursionError):
        run("(down 1000000)")


def test_evaluate_in_child_frame(env):
    child = Frame(parent=env)
    child.define(Symbol("y"), 4)
    expr = from_iterable([Symbol("*"), Symbol("y"), 2])
    assert evaluate(expr, child) == 8
