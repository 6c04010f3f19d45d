"""
CSS value grammar used by snippet definitions.

References:
    - [syntax](https://www.w3.org/TR/css-syntax-3/)
    - [values and units](https://developer.mozilla.org/en-US/docs/Web/CSS/CSS_Values_and_Units)

<definition>
    <property/>: <alternative/> | <alternative/> | ...
</definition>

alternative => comma separated groups of value nodes,
value node => keyword, function, number, color, string, field,
field => `${1}` or `${1:placeholder}` tab-stop
"""
from stylesnip.css.lexer import Lexer, ParseError
from stylesnip.css.parser import (
    ColorValue,
    CSSProperty,
    CSSValue,
    Field,
    FunctionCall,
    Literal,
    NumberValue,
    Operator,
    ParseOptions,
    StringValue,
    ValueNode,
    parse,
)

__all__ = [
    "Lexer",
    "ParseError",
    "ColorValue",
    "CSSProperty",
    "CSSValue",
    "Field",
    "FunctionCall",
    "Literal",
    "NumberValue",
    "Operator",
    "ParseOptions",
    "StringValue",
    "ValueNode",
    "parse",
]
