import math

import pytest
from hypothesis import given, strategies as st

from yu.printer import render
from yu.reader.parser import lex, read, read_all, TokenStream
from yu.types.cons import List, Nil
from yu.types.errors import YuSyntaxError
from yu.types.symbol import Symbol


def L(*items):
    return List.from_iterable(items)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("(+ 1 2.5)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "2.5"), ("rparen", ")")]),
        ("()", [("lparen", "("), ("rparen", ")")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(a;tail\n)", [("lparen", "("), ("symbol", "a"), ("rparen", ")")]),
        ("   \n\t ", []),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("foo", Symbol("foo")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("1+", Symbol("1+")),
        ("()", Nil),
        ("(1 2 3)", L(1.0, 2.0, 3.0)),
        ("(define inc (function (x) (+ x 1)))",
         L(Symbol("define"), Symbol("inc"),
           L(Symbol("function"), L(Symbol("x")), L(Symbol("+"), Symbol("x"), 1.0)))),
        ("(() (()))", L(Nil, L(Nil))),
    ]
)
def test_read(source, expected):
    result = read(source)
    assert result == expected
    assert type(result) is type(expected)


def test_numbers_are_floats():
    assert isinstance(read("7"), float)
    assert read("inf") == math.inf


@pytest.mark.parametrize(
    "source,message",
    [
        ("", "Unexpected end of input"),
        ("  ; only a comment", "Unexpected end of input"),
        ("(1 2", "Unmatched '('"),
        ("((1)", "Unmatched '('"),
        (")", "Unexpected ')'"),
        ("1 2", "Unexpected trailing input: '2'"),
        ("(a))", "Unexpected trailing input: ')'"),
    ]
)
def test_read_errors(source, message):
    with pytest.raises(YuSyntaxError) as excinfo:
        read(source)
    assert str(excinfo.value) == message


def test_read_all():
    assert read_all("(define x 1) x ; trailing comment") == [
        L(Symbol("define"), Symbol("x"), 1.0),
        Symbol("x"),
    ]
    assert read_all("") == []


def test_token_stream_parse_expr_returns_none_at_end():
    stream = TokenStream(lex("a"))
    assert stream.parse_expr() == Symbol("a")
    assert stream.parse_expr() is None


def _is_symbol(token):
    try:
        float(token)
    except ValueError:
        return True
    return False


sexpr_strat = st.recursive(
    st.one_of(
        st.floats(allow_nan=False, allow_infinity=False),
        st.from_regex(r"[a-z+*/<>=!?-][a-z0-9+*/<>=!?-]{0,8}", fullmatch=True).filter(_is_symbol),
    ),
    lambda children: st.lists(children, max_size=5),
    max_leaves=20,
)


def _to_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_source(e) for e in expr)})"
    return repr(expr) if isinstance(expr, float) else expr


@given(sexpr_strat)
def test_parser_no_crash(sexpr):
    source = _to_source(sexpr)
    try:
        parsed = list(TokenStream(lex(source)).parse_all())
    except Exception as e:
        assert False, f"Parser crashed on {source!r}: {e}"
    assert len(parsed) == 1


@given(sexpr_strat)
def test_rendered_source_reads_back(sexpr):
    expr = read(_to_source(sexpr))
    assert read(render(expr)) == expr
