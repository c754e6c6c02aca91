import pytest
from hypothesis import given, strategies as st

from yocto.errors import YoctoSyntaxError
from yocto.reader.parser import lex, parse, parse_all, TokenStream
from yocto.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("`y", [("quote", "`"), ("symbol", "y")]),
        (",z", [("unquote", ","), ("symbol", "z")]),
        (",@w", [("unquote", ",@"), ("symbol", "w")]),
        ("(a ... rest)", [("lparen", "("), ("symbol", "a"), ("symbol", "..."), ("symbol", "rest"), ("rparen", ")")]),
        ("1.5 -2", [("symbol", "1.5"), ("symbol", "-2")]),
        ("", []),
    ]
)
def test_lexer(source, expected):
    assert list(lex(source)) == expected


Q = Symbol("quote")
QQ = Symbol("quasiquote")
UQ = Symbol("unquote")
UQS = Symbol("unquote-splicing")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42.0),
        ("-3.5", -3.5),
        ("+1", 1.0),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        ("set!", Symbol("set!")),
        ("true", Symbol("true")),
        ('"a\\nb"', "a\nb"),
        ('"tab\\there"', "tab\there"),
        ('"q\\"q"', 'q"q'),
        ("()", []),
        ("(a (b 1))", [Symbol("a"), [Symbol("b"), 1.0]]),
        ("'x", [Q, Symbol("x")]),
        ("'(1 2)", [Q, [1.0, 2.0]]),
        ("`(a ,b ,@c)", [QQ, [Symbol("a"), [UQ, Symbol("b")], [UQS, Symbol("c")]]]),
        ("(a ; trailing comment\n b)", [Symbol("a"), Symbol("b")]),
    ]
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_parse_all_reads_every_form():
    assert list(parse_all("(def x 1) x 'y")) == [
        [Symbol("def"), Symbol("x"), 1.0],
        Symbol("x"),
        [Q, Symbol("y")],
    ]


def test_blank_input_parses_to_nothing():
    assert parse("") is None
    assert parse("   ; only a comment") is None
    assert list(parse_all("")) == []


def test_token_stream_peek_does_not_consume():
    stream = TokenStream(lex("a b"))
    assert stream.peek() == ("symbol", "a")
    assert stream.peek() == ("symbol", "a")
    assert stream.advance() == ("symbol", "a")
    assert stream.advance() == ("symbol", "b")
    assert stream.advance() == (None, None)


@pytest.mark.parametrize(
    "source",
    ["(a b", ")", '"abc', "'", "(a ,)", "((a)"],
)
def test_syntax_errors(source):
    with pytest.raises(YoctoSyntaxError):
        list(parse_all(source))


# -------------------------------
# Helpers
# -------------------------------
def _escape_string(s: str) -> str:
    escaped = s.encode('unicode_escape').decode('ascii')
    escaped = escaped.replace('"', '\\"')
    return f'"{escaped}"'


def _get_src_from_sexpr(sexpr):
    if isinstance(sexpr, list):
        return "(" + " ".join(map(str, sexpr)) + ")"
    return str(sexpr)


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.from_regex(r"[a-z][a-z0-9\-!?*]{0,9}", fullmatch=True)

string_strat = st.text(min_size=0, max_size=20).map(_escape_string)

number_strat = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.floats(min_value=-1e6, max_value=1e6, allow_infinity=False, allow_nan=False)
)

list_strat = st.lists(st.one_of(symbol_strat, number_strat, string_strat), max_size=5)

sexpr_strat = st.one_of(symbol_strat, string_strat, number_strat, list_strat)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexpr_strat)
def test_parser_no_crash(sexpr):
    source = _get_src_from_sexpr(sexpr)
    parsed = list(parse_all(source))
    assert len(parsed) == 1


@given(symbol_strat)
def test_symbols_read_as_symbols(name):
    assert parse(name) == Symbol(name)


@given(number_strat)
def test_numbers_read_as_floats(number):
    result = parse(str(number))
    assert isinstance(result, float)
    assert result == float(number)


def test_symbols_are_interned():
    assert parse("abc") is Symbol("abc")
    assert parse("(f f)")[0] is parse("(f f)")[1]
