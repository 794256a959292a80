import pytest

from slisp.errors import SlispUnboundSymbol
from slisp.interpreter import evaluate
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


def test_let_returns_nil_and_binds(env):
    assert evaluate("(let x (+ 1 2))", env) is Nil
    assert env.vars[Symbol("x")] == 3.0


def test_let_rebinds(env):
    evaluate("(let x 1)", env)
    evaluate("(let x 2)", env)
    assert evaluate("x", env) == 2.0


def test_let_value_can_be_a_list(env):
    evaluate("(let xs (1 2 3))", env)
    assert evaluate("xs", env) == [1.0, 2.0, 3.0]


@pytest.mark.parametrize(
    "x,expected",
    [
        (5, "Positive"),
        (0, "Zero"),
        (-5, "Negative"),
    ]
)
def test_cond_first_match_wins(env, x, expected):
    evaluate("(let Positive 1) (let Zero 0) (let Negative -1)", env)
    evaluate(f"(let x {x})", env)
    source = """(cond
                  ((gt x 0) Positive)
                  ((eq x 0) Zero)
                  Negative)"""
    assert evaluate(source, env) == evaluate(expected, env)


def test_cond_default_only(env):
    assert evaluate("(cond 7)", env) == 7.0


def test_cond_default_is_evaluated(env):
    assert evaluate("(cond ((eq 1 2) 10) (+ 20 3))", env) == 23.0


def test_cond_short_circuits(env):
    # later tests and unselected results are never evaluated
    source = "(cond ((eq 1 1) 10) ((unbound-test) 20) (missing))"
    assert evaluate(source, env) == 10.0
    source = "(cond ((eq 1 0) (missing)) 3)"
    assert evaluate(source, env) == 3.0


def test_cond_non_number_test_does_not_match(env):
    evaluate("(let f (fn (x) (x)))", env)
    assert evaluate("(cond (f 1) ((1 2) 2) 3)", env) == 3.0


def test_cond_test_errors_propagate(env):
    with pytest.raises(SlispUnboundSymbol):
        evaluate("(cond ((gt nope 1) 1) 2)", env)


def test_cond_last_element_is_never_a_clause(env):
    # A trailing (test result) pair is evaluated as an ordinary expression.
    assert evaluate("(cond ((eq 1 0) 1) (2 3))", env) == [2.0, 3.0]


def test_special_forms_cannot_be_shadowed(env):
    evaluate("(let let 5)", env)
    assert evaluate("(+ let 1)", env) == 6.0
    assert evaluate("(let y 2)", env) is Nil


def test_lambda_body_is_re_walked_each_call(env):
    evaluate("(let k 1)", env)
    evaluate("(let addk (fn (n) (+ n k)))", env)
    assert evaluate("(addk 1)", env) == 2.0
    evaluate("(let k 10)", env)
    assert evaluate("(addk 1)", env) == 11.0


def test_higher_order_value_passing(env):
    evaluate("(let sq (fn (n) (* n n)))", env)
    evaluate("(let f sq)", env)
    assert evaluate("(f 4)", env) == 16.0


def test_mutual_recursion(env):
    evaluate("(let is-even (fn (n) (cond ((eq n 0) 1) (is-odd (- n 1)))))", env)
    evaluate("(let is-odd (fn (n) (cond ((eq n 0) 0) (is-even (- n 1)))))", env)
    assert evaluate("(is-even 10)", env) == 1.0
    assert evaluate("(is-odd 7)", env) == 1.0
    assert evaluate("(is-even 7)", env) == 0.0


def test_fibonacci(env):
    evaluate("(let fib (fn (n) (cond ((lt n 2) n) (+ (fib (- n 1)) (fib (- n 2))))))", env)
    assert evaluate("(fib 10)", env) == 55.0
