import logging

import pytest

from tinylisp.errors import RecursionLimitExceeded, UnboundSymbol
from tinylisp.interpreter import Interpreter
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol


def test_eval_returns_last_value(interp):
    assert interp.eval("1 2 3") == 3.0


def test_eval_of_empty_source_is_nil(interp):
    assert interp.eval("") is Nil
    assert interp.eval("; just a comment") is Nil


def test_eval_all_returns_every_value(interp):
    assert interp.eval_all("(define a 1) (+ a 1) 'done") == [1.0, 2.0, Symbol("done")]


def test_definitions_persist_across_calls(interp):
    interp.eval("(define counter 1)")
    assert interp.eval("(+ counter 1)") == 2.0


def test_prelude_is_evaluated():
    interp = Interpreter(prelude="(define square (lambda (x) (* x x)))")
    assert interp.eval("(square 4)") == 16.0


def test_reset_discards_definitions(interp):
    interp.eval("(define gone 1)")
    interp.reset()
    with pytest.raises(UnboundSymbol):
        interp.eval("gone")
    assert interp.eval("(+ 1 1)") == 2.0


def test_interpreters_do_not_share_globals():
    first, second = Interpreter(), Interpreter()
    first.eval("(define only-here 1)")
    with pytest.raises(UnboundSymbol):
        second.eval("only-here")


def test_forms_logged_at_debug(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="tinylisp.interpreter"):
        interp.eval("(+ 1 2)")
    assert "evaluating (+ 1 2)" in caplog.text


def test_deeply_nested_input_reports_recursion_limit(interp):
    source = "(" * 100_000 + ")" * 100_000
    with pytest.raises(RecursionLimitExceeded):
        interp.eval(source)
