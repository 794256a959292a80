"""Call frames under dynamic (default) and lexical scoping.

By default a call frame's parent is the caller's environment, so a function
body resolves free names at its call site rather than where `fn` was
evaluated. The lexical mode parents the frame on the defining environment
instead. Both behaviours are pinned down here.
"""

import pytest

from slisp.errors import SlispUnboundSymbol
from slisp.interpreter import Interpreter, evaluate
from slisp.runtime_context import get_scoping, scoping, set_scoping

# make-adder returns a function whose body refers to make-adder's parameter.
MAKE_ADDER = "(let make-adder (fn (n) (fn (x) (+ x n))))"


def test_default_scoping_is_dynamic():
    assert get_scoping() == "dynamic"


def test_scoping_from_environment_variable(monkeypatch):
    monkeypatch.setenv("SLISP_SCOPING", "lexical")
    assert get_scoping() == "lexical"
    set_scoping("dynamic")
    assert get_scoping() == "dynamic"


def test_unknown_scoping_rejected():
    with pytest.raises(ValueError):
        set_scoping("static")


def test_dynamic_function_sees_caller_bindings(env):
    evaluate("(let show (fn () (+ secret 0)))", env)
    evaluate("(let outer (fn (secret) (show)))", env)
    assert evaluate("(outer 42)", env) == 42.0


def test_dynamic_returned_function_loses_definition_scope(env):
    evaluate(MAKE_ADDER, env)
    evaluate("(let add5 (make-adder 5))", env)
    with pytest.raises(SlispUnboundSymbol, match="Unbound symbol n"):
        evaluate("(add5 1)", env)


def test_dynamic_returned_function_picks_up_call_site_name(env):
    evaluate(MAKE_ADDER, env)
    evaluate("(let add5 (make-adder 5))", env)
    evaluate("(let n 100)", env)
    assert evaluate("(add5 1)", env) == 101.0


def test_lexical_returned_function_keeps_definition_scope(env, lexical):
    evaluate(MAKE_ADDER, env)
    evaluate("(let add5 (make-adder 5))", env)
    evaluate("(let n 100)", env)
    assert evaluate("(add5 1)", env) == 6.0


def test_lexical_function_does_not_see_caller_bindings(env, lexical):
    evaluate("(let show (fn () (+ secret 0)))", env)
    evaluate("(let outer (fn (secret) (show)))", env)
    with pytest.raises(SlispUnboundSymbol, match="Unbound symbol secret"):
        evaluate("(outer 42)", env)


def test_lexical_recursion_through_root_binding(env, lexical):
    evaluate("(let factorial (fn (n) (cond ((lt n 1) 1) (* n (factorial (- n 1))))))", env)
    assert evaluate("(factorial 5)", env) == 120.0


def test_interpreter_selects_scoping():
    interp = Interpreter(scoping="lexical")
    assert interp.scoping == "lexical"
    assert get_scoping() == "dynamic"
    interp.eval(MAKE_ADDER)
    interp.eval("(let add2 (make-adder 2))")
    assert interp.eval("(add2 3)") == 5.0


def test_interpreters_keep_separate_scoping():
    first = Interpreter(scoping="lexical")
    first.eval(MAKE_ADDER)
    first.eval("(let add2 (make-adder 2))")

    second = Interpreter()
    assert second.scoping == "dynamic"
    second.eval(MAKE_ADDER)
    second.eval("(let add2 (make-adder 2))")

    assert first.eval("(add2 3)") == 5.0
    with pytest.raises(SlispUnboundSymbol, match="Unbound symbol n"):
        second.eval("(add2 3)")
    assert first.eval("(add2 4)") == 6.0


def test_interpreter_default_follows_environment_variable(monkeypatch):
    monkeypatch.setenv("SLISP_SCOPING", "lexical")
    assert Interpreter().scoping == "lexical"


def test_scoping_block_restores_previous_mode():
    with scoping("lexical"):
        assert get_scoping() == "lexical"
        with scoping("dynamic"):
            assert get_scoping() == "dynamic"
        assert get_scoping() == "lexical"
    assert get_scoping() == "dynamic"
