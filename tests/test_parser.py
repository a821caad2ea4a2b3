import pytest
from hypothesis import given, strategies as st

from postlisp.types.atoms import Boolean, Number, Symbol
from postlisp.types.expression import Expression
from postlisp.reader.parser import token_to_atom, parse, parse_tokens


def num(v):
    return Expression(Number(v))


def sym(name):
    return Expression(Symbol(name))


@pytest.mark.parametrize(
    "token,expected",
    [
        ("True", Boolean(True)),
        ("False", Boolean(False)),
        ("point", Symbol("point")),
        ("fill_rect", Symbol("fill_rect")),
        ("3.5", Number(3.5)),
        ("-2", Number(-2)),
        ("+7", Number(7)),
        ("1e3", Number(1000)),
        (".5", Number(0.5)),
        ("5.", Number(5)),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        ("<=", Symbol("<=")),
        ("inf", Symbol("inf")),
        ("true", Symbol("true")),
        ("x1", Symbol("x1")),
    ]
)
def test_token_to_atom(token, expected):
    assert token_to_atom(token) == expected


@pytest.mark.parametrize("token", ["3abc", "1_000", "12..3", "1e", "0x10"])
def test_token_to_atom_rejects_partial_numbers(token):
    assert token_to_atom(token) is None


@pytest.mark.parametrize(
    "source,expected",
    [
        ("5", num(5)),
        ("(5)", num(5)),
        ("((5))", num(5)),
        ("x", sym("x")),
        ("(1 2 +)", Expression(Symbol("+"), (num(1), num(2)))),
        ("(True False and)", Expression(Symbol("and"), (Expression(Boolean(True)), Expression(Boolean(False))))),
        ("((1 2 point) (3 4 point) line)",
         Expression(Symbol("line"), (
             Expression(Symbol("point"), (num(1), num(2))),
             Expression(Symbol("point"), (num(3), num(4))),
         ))),
        ("(1 (2) +)", Expression(Symbol("+"), (num(1), num(2)))),
        ("(1 2 (+))", Expression(Symbol("+"), (num(1), num(2)))),
        ("; leading comment\n(5 sqrt) ; trailing", Expression(Symbol("sqrt"), (num(5),))),
    ]
)
def test_parser(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "",
        "; nothing here",
        "()",
        "(1 2)",
        "(1 2 (3 4 +))",
        "((1 2 +) (3 4 +))",
        "(1",
        "1)",
        ")(",
        "1 2",
        "(1 2 +) (3 4 +)",
        "(3abc)",
        "(x 3abc define)",
        "(() 1 +)",
    ]
)
def test_parser_rejects(source):
    assert parse(source) is None


def test_unbalanced_tokens_rejected_before_parsing():
    assert parse_tokens(["(", "1", "2", "+", ")", ")"]) is None


def test_parser_survives_deep_nesting():
    # exhausting the host stack is a parse failure, never an exception
    depth = 5000
    result = parse("(" * depth + "1" + ")" * depth)
    assert result is None or result == num(1)


# -------------------------------
# Strategies
# -------------------------------
number_strat = st.floats(
    min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False
).map(repr)

symbol_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu"), whitelist_characters="_<>=*+"),
    min_size=1, max_size=8,
).filter(lambda s: s not in ("True", "False"))

atom_src = st.one_of(number_strat, symbol_strat, st.sampled_from(["True", "False"]))

expr_src = st.recursive(
    atom_src,
    lambda children: st.tuples(st.lists(children, min_size=1, max_size=4), symbol_strat).map(
        lambda t: "(" + " ".join(t[0]) + " " + t[1] + ")"
    ),
    max_leaves=12,
)


@given(expr_src)
def test_grouping_is_transparent(src):
    parsed = parse(src)
    assert parsed is not None
    assert parse("(" + src + ")") == parsed


@given(expr_src)
def test_unbalanced_programs_rejected(src):
    assert parse(src + ")") is None
    assert parse("(" + src) is None


def test_calls_and_literals_are_built_with_expression_helpers():
    expr = parse("((1 2 point) x line)")
    assert expr == Expression.call(
        Symbol("line"),
        [Expression.call(Symbol("point"), [Expression.of(Number(1)), Expression.of(Number(2))]),
         Expression.of(Symbol("x"))],
    )
    assert expr.is_call and expr.tail[1].is_literal
