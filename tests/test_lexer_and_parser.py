import pytest
from hypothesis import given, strategies as st

from ember.errors import EmberSyntaxError
from ember.types.nil import Nil
from ember.types.symbol import Symbol
from ember.reader.parser import lex, parse, parse_all, ParseFailure, TokenStream


def _kinds(source):
    return [(kind, text) for kind, text, _ in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"say \\"hi\\""', [("string", '"say \\"hi\\""')]),
        ('"open', [("unterminated", '"open')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("`y", [("quote", "`"), ("symbol", "y")]),
        (",z", [("unquote", ","), ("symbol", "z")]),
        (",@w", [("unquote", ",@"), ("symbol", "w")]),
        ("(+ 1)(- 2)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("rparen", ")"),
                        ("lparen", "("), ("symbol", "-"), ("symbol", "2"), ("rparen", ")")]),
    ]
)
def test_lexer_basic(source, expected):
    assert _kinds(source) == expected


def test_lexer_offsets():
    assert [offset for _, _, offset in lex("(ab  c)")] == [0, 1, 5, 6]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("NIL", Nil),
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("3.14", 3.14),
        ("-.5", -0.5),
        ("1e3", 1000.0),
        ("-", Symbol("-")),
        ("1+", Symbol("1+")),
        ("#t", Symbol("#t")),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("`(a ,b ,@c)", [Symbol("quasiquote"),
                         [Symbol("a"), [Symbol("unquote"), Symbol("b")],
                          [Symbol("unquote-splicing"), Symbol("c")]]]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ('"hello"', "hello"),
        ('"tab\\there"', "tab\there"),
        ('"line\\nbreak"', "line\nbreak"),
        ('"back\\\\slash"', "back\\slash"),
        ('"odd \\q"', "odd \\q"),
    ]
)
def test_parser(source, expected):
    result = list(parse_all(source))
    assert result == [expected]


def test_nested_lists():
    source = "((a b) (c d))"
    expected = [[Symbol('a'), Symbol('b')], [Symbol('c'), Symbol('d')]]
    assert list(TokenStream(lex(source)).parse_all()) == [expected]


def test_parse_is_lazy():
    items = parse("(a) (b")
    assert next(items) == [Symbol("a")]
    failure = next(items)
    assert isinstance(failure, ParseFailure)
    with pytest.raises(StopIteration):
        next(items)


@pytest.mark.parametrize(
    "source,shape",
    [
        ("(+ 1 2) (oops", ["form", "failure"]),
        (") 5", ["failure", "form"]),
        ("(a)) (b)", ["form", "failure", "form"]),
        ('1 "never closed', ["form", "failure"]),
        ("1 '", ["form", "failure"]),
        ("", []),
        ("   ; only a comment", []),
    ]
)
def test_parse_recovers_after_failures(source, shape):
    got = ["failure" if isinstance(item, ParseFailure) else "form" for item in parse(source)]
    assert got == shape


def test_parse_failure_carries_error_and_offset():
    [form, failure] = list(parse("(a) )"))
    assert form == [Symbol("a")]
    assert isinstance(failure.error, EmberSyntaxError)
    assert failure.offset == 4
    assert "Unexpected ')'" in str(failure)


def test_parse_all_is_strict():
    with pytest.raises(EmberSyntaxError):
        list(parse_all("(a) (b"))


def test_deep_nesting_is_a_parse_failure():
    source = "(" * 5000 + ")" * 5000
    items = list(parse(source))
    assert isinstance(items[0], ParseFailure)
    assert "nested too deeply" in str(items[0])


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.text(max_size=60))
def test_parse_never_raises(source):
    for item in parse(source):
        assert not isinstance(item, BaseException)


@given(st.lists(st.integers(min_value=-10**6, max_value=10**6), max_size=10))
def test_integers_read_back_in_order(numbers):
    source = " ".join(str(n) for n in numbers)
    assert list(parse(source)) == numbers


def test_oversized_integer_literal_is_a_parse_failure():
    [failure, seven] = list(parse("1" * 5000 + " 7"))
    assert isinstance(failure, ParseFailure)
    assert str(failure) == "Number literal too large at 0"
    assert seven == 7
    with pytest.raises(EmberSyntaxError, match="too large"):
        list(parse_all("(+ 1 " + "9" * 5000 + ")"))
