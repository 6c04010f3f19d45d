from stylesnip.css.lexer import Lexer
from stylesnip.css.tokens import (
    Delim,
    Dimension,
    Function,
    Hash,
    Ident,
    Number,
    Percentage,
    String,
    TabStop,
    Whitespace,
)


def _tokens(source: str) -> list:
    return [t for t in Lexer(source).process() if not isinstance(t, Whitespace)]


def test_border_value():
    tokens = Lexer("1px solid #fc0").process()
    assert [type(t) for t in tokens] == [Dimension, Whitespace, Ident, Whitespace, Hash]
    assert tokens[0].value == 1.0
    assert tokens[0].unit == "px"
    assert tokens[2].raw == "solid"
    assert tokens[4].raw == "fc0"


def test_vendor_prefixed_ident():
    (token,) = _tokens("-webkit-box")
    assert isinstance(token, Ident)
    assert token.raw == "-webkit-box"


def test_signed_decimal_dimension():
    (token,) = _tokens("-1.5em")
    assert isinstance(token, Dimension)
    assert token.value == -1.5
    assert token.type == "number"
    assert token.unit == "em"


def test_percentage_and_exponent():
    percent, number = _tokens("50% 1e3")
    assert isinstance(percent, Percentage)
    assert percent.value == 50.0
    assert isinstance(number, Number)
    assert number.value == 1000.0
    assert number.type == "number"


def test_function_and_string():
    tokens = _tokens('attr("data-x")')
    assert isinstance(tokens[0], Function)
    assert tokens[0].raw == "attr"
    assert isinstance(tokens[1], String)
    assert tokens[1].raw == "data-x"


def test_tab_stops():
    first, second = _tokens("${1:auto} ${2}")
    assert isinstance(first, TabStop)
    assert (first.index, first.raw) == (1, "auto")
    assert isinstance(second, TabStop)
    assert (second.index, second.raw) == (2, "")


def test_lone_dollar_is_delim():
    (token,) = _tokens("$")
    assert isinstance(token, Delim)


def test_token_positions():
    tokens = Lexer("a  b").process()
    assert [t.pos for t in tokens] == [0, 1, 3]


def test_unclosed_string_is_reported():
    lexer = Lexer("'abc")
    lexer.process()
    assert len(lexer.errors) == 1
    assert lexer.errors[0].pos == 0


def test_unclosed_field_is_reported():
    lexer = Lexer("${1:auto")
    lexer.process()
    assert lexer.errors


def test_non_ascii_digits_are_not_numbers():
    (token,) = _tokens("²")
    assert isinstance(token, Ident)
    assert token.raw == "²"


def test_non_ascii_digit_after_field_marker():
    tokens = _tokens("${²}")
    assert not any(isinstance(t, TabStop) for t in tokens)
    assert isinstance(tokens[0], Delim)
