import pytest
from hypothesis import given, strategies as st

from tinylisp.printer import to_string
from tinylisp.reader.parser import read_one
from tinylisp.types import Builtin, Closure, Cons, Environment, Nil, Symbol, from_list


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "nil"),
        (0.0, "0"),
        (-0.0, "0"),
        (42.0, "42"),
        (-7.0, "-7"),
        (1e20, "100000000000000000000"),
        (2.5, "2.5"),
        (-0.125, "-0.125"),
        (float("inf"), "inf"),
        ("hello", '"hello"'),
        ("", '""'),
        ('say "hi"', '"say "hi""'),
        ("line\nbreak", '"line\nbreak"'),
        (Symbol("foo"), "foo"),
        (Symbol("null?"), "null?"),
        (from_list([1.0, 2.0, 3.0]), "(1 2 3)"),
        (from_list([Symbol("a"), "b", from_list([3.0])]), '(a "b" (3))'),
        (from_list([Nil]), "(nil)"),
        (Cons(1.0, 2.0), "(1 . 2)"),
        (from_list([1.0, 2.0], tail=3.0), "(1 2 . 3)"),
        (Cons(Symbol("a"), Symbol("b")), "(a . b)"),
        (Cons(Cons(1.0, 2.0), Nil), "((1 . 2))"),
        (Builtin("+", lambda env, args: Nil), "#<builtin>"),
        (Closure([Symbol("x")], Symbol("x"), Environment()), "#<lambda>"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_long_list_renders_without_recursion():
    items = [float(i) for i in range(5000)]
    rendered = to_string(from_list(items))
    assert rendered.startswith("(0 1 2")
    assert rendered.endswith("4998 4999)")


# -------------------------------
# Round trip: render then read
# -------------------------------
symbols = st.text(
    st.characters(categories=("Ll", "Lu"), include_characters="-_?!*<>=/"),
    min_size=1, max_size=8,
).filter(lambda s: s != "nil").map(Symbol)

# Rendering does not re-escape, so only strings free of quotes and backslashes survive
strings = st.text(
    st.characters(exclude_characters='"\\', exclude_categories=("Cs",)),
    max_size=12,
)

numbers = st.floats(allow_nan=False, allow_infinity=False)

atoms = st.one_of(symbols, strings, numbers)

values = st.recursive(
    atoms,
    lambda children: st.lists(children, max_size=5).map(from_list),
    max_leaves=25,
)


@given(values)
def test_render_read_round_trip(value):
    assert read_one(to_string(value)) == value
