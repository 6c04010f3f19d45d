import pytest

from stylesnip.css import (
    ColorValue,
    CSSValue,
    Field,
    FunctionCall,
    Literal,
    NumberValue,
    Operator,
    ParseError,
    ParseOptions,
    StringValue,
    parse,
)

VALUE = ParseOptions(value=True)


def _value(source: str) -> list[CSSValue]:
    props = parse(source, VALUE)
    assert len(props) == 1
    assert props[0].name is None
    return props[0].value


def test_space_separated_nodes():
    assert _value("1px solid #000") == [
        CSSValue([NumberValue(1.0, "px", "1"), Literal("solid"), ColorValue("000")])
    ]


def test_comma_separated_groups():
    assert _value("Arial, 'Helvetica Neue' ,sans-serif") == [
        CSSValue([Literal("Arial")]),
        CSSValue([StringValue("Helvetica Neue", "'")]),
        CSSValue([Literal("sans-serif")]),
    ]


def test_function_arguments():
    (group,) = _value("rgba(0, 0, 0, .5)")
    (call,) = group.value
    assert isinstance(call, FunctionCall)
    assert call.name == "rgba"
    assert len(call.arguments) == 4
    assert call.arguments[3] == CSSValue([NumberValue(0.5, "", ".5")])


def test_nested_functions_and_operators():
    (group,) = _value("translate(calc(100% - 10px))")
    (outer,) = group.value
    (inner,) = outer.arguments[0].value
    assert inner.name == "calc"
    assert inner.arguments == [
        CSSValue([NumberValue(100.0, "%", "100"), Operator("-"), NumberValue(10.0, "px", "10")])
    ]


def test_empty_function():
    (group,) = _value("linear-gradient()")
    assert group.value == [FunctionCall("linear-gradient", [])]


def test_fields():
    (group,) = _value("${1:1px} ${2:solid}")
    assert group.value == [Field(1, "1px"), Field(2, "solid")]


def test_value_to_string():
    (group,) = _value("rgba(0, 0, 0, .5) ${1:auto}")
    assert str(group) == "rgba(0, 0, 0, .5) ${1:auto}"


@pytest.mark.parametrize(
    "source",
    ["", "   ", "a,,b", "a,", "rgba(0, 0", "a)", "(a)", "a; b", "'open"],
)
def test_malformed_values_raise(source):
    with pytest.raises(ParseError):
        parse(source, VALUE)


def test_parse_error_position():
    with pytest.raises(ParseError) as info:
        parse("a )", VALUE)
    assert info.value.pos == 2


def test_declaration_list():
    props = parse("color: red !important; margin: 0 auto;")
    assert [p.name for p in props] == ["color", "margin"]
    assert props[0].important
    assert props[0].value == [CSSValue([Literal("red")])]
    assert not props[1].important
    assert props[1].value == [CSSValue([NumberValue(0.0, "", "0"), Literal("auto")])]


def test_declaration_defaults_to_list_mode():
    assert parse("") == []


@pytest.mark.parametrize("source", ["color red", "1px: a", "color: !important"])
def test_malformed_declarations_raise(source):
    with pytest.raises(ParseError):
        parse(source)


def test_value_mode_important_flag():
    (prop,) = parse("red !important", VALUE)
    assert prop.important
    assert prop.value == [CSSValue([Literal("red")])]


def test_value_mode_important_alone_raises():
    with pytest.raises(ParseError):
        parse("!important", VALUE)
