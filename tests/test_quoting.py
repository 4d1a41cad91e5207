import pytest

from tinylisp import errors
from tinylisp.types.cons import from_list
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("'a", Symbol("a")),
        ("'1", 1.0),
        ("'\"s\"", "s"),
        ("'()", Nil),
        ("'nil", Nil),
        ("'(1 2 3)", from_list([1.0, 2.0, 3.0])),
        ("'(+ 1 2)", from_list([Symbol("+"), 1.0, 2.0])),
        ("''a", from_list([Symbol("quote"), Symbol("a")])),
        ("(quote (a 'b))", from_list([Symbol("a"), from_list([Symbol("quote"), Symbol("b")])])),
        ("'(lambda (x) x)", from_list([Symbol("lambda"), from_list([Symbol("x")]), Symbol("x")])),
    ]
)
def test_quote_returns_form_unevaluated(run, source, expected):
    assert run(source) == expected


def test_quoted_unbound_symbol_is_fine(run):
    assert run("'never-defined") == Symbol("never-defined")


def test_quoted_list_is_data(run):
    assert run("(car (cdr '(a b c)))") == Symbol("b")
    assert run("(car ''x)") == Symbol("quote")


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_arity(run, source):
    with pytest.raises(errors.MalformedSpecialForm):
        run(source)
