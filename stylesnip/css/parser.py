""" CSS value parser
https://www.w3.org/TR/css-syntax-3/#parse-list-of-component-values

Turns a value string into comma-separated groups of value nodes. In
declaration mode a `;` separated list of `name: value` pairs is parsed instead.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from typing_extensions import TypeAliasType

from stylesnip.css.lexer import Lexer, ParseError
from stylesnip.css.tokens import *

__all__ = [
    "Literal",
    "FunctionCall",
    "NumberValue",
    "ColorValue",
    "StringValue",
    "Field",
    "Operator",
    "ValueNode",
    "CSSValue",
    "CSSProperty",
    "ParseOptions",
    "Parse",
    "Parser",
    "parse",
]


@dataclass
class Literal:
    value: str

    def __str__(self) -> str:
        return self.value

@dataclass
class FunctionCall:
    name: str
    arguments: list[CSSValue] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(arg) for arg in self.arguments)})"

@dataclass
class NumberValue:
    value: float
    unit: str
    raw: str

    def __str__(self) -> str:
        return f"{self.raw}{self.unit}"

@dataclass
class ColorValue:
    raw: str

    def __str__(self) -> str:
        return f"#{self.raw}"

@dataclass
class StringValue:
    value: str
    quote: str = '"'

    def __str__(self) -> str:
        return f"{self.quote}{self.value}{self.quote}"

@dataclass
class Field:
    index: int
    name: str = ""

    def __str__(self) -> str:
        if self.name:
            return f"${{{self.index}:{self.name}}}"
        return f"${{{self.index}}}"

@dataclass
class Operator:
    value: str

    def __str__(self) -> str:
        return self.value

ValueNode = TypeAliasType(
    "ValueNode",
    Literal | FunctionCall | NumberValue | ColorValue | StringValue | Field | Operator,
)

@dataclass
class CSSValue:
    """A single comma-separated group of value nodes."""

    value: list[ValueNode] = field(default_factory=list)

    def __str__(self) -> str:
        return " ".join(str(node) for node in self.value)

@dataclass
class CSSProperty:
    name: str | None
    value: list[CSSValue] = field(default_factory=list)
    important: bool = False

    def __repr__(self) -> str:
        return f"Prop({'!, ' if self.important else ''}{self.name!r}, {self.value})"

@dataclass(frozen=True)
class ParseOptions:
    """Options for `parse`.

    Args
        value (bool): Parse the whole source as a single property value instead of
            a list of declarations. Defaults to `False`.
    """

    value: bool = False


class Parse:
    @staticmethod
    def tokenize(source: str) -> list[Token]:
        lexer = Lexer(source)
        tokens = lexer.process()
        if lexer.errors:
            raise lexer.errors[0]
        return tokens

    @staticmethod
    def parse_value(source: str) -> CSSProperty:
        parser = Parser(Parse.tokenize(source))
        prop = CSSProperty(None, parser.consume_value())
        if not isinstance(parser.peek(), EOF):
            raise ParseError(f"Unexpected {parser.peek().raw!r}", parser.peek().pos)
        parser.strip_important(prop, 0)
        return prop

    @staticmethod
    def parse_decl_list(source: str) -> list[CSSProperty]:
        parser = Parser(Parse.tokenize(source))
        return parser.consume_decl_list()


class Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    def peek(self, amount: int = 1) -> Token:
        at = self.index + amount - 1
        if at < len(self.tokens):
            return self.tokens[at]
        end = self.tokens[-1].pos + len(self.tokens[-1].raw) if self.tokens else 0
        return EOF('', end)

    def next(self) -> Token:
        token = self.peek()
        if not isinstance(token, EOF):
            self.index += 1
        return token

    def skip_whitespace(self):
        while isinstance(self.peek(), Whitespace):
            self.next()

    def consume_node(self) -> ValueNode:
        next = self.next()
        if isinstance(next, Function):
            return self.consume_function(next)
        elif isinstance(next, Ident):
            return Literal(next.raw)
        elif isinstance(next, Dimension):
            return NumberValue(next.value, next.unit, next.raw[:len(next.raw) - len(next.unit)])
        elif isinstance(next, Percentage):
            return NumberValue(next.value, "%", next.raw)
        elif isinstance(next, Number):
            return NumberValue(next.value, "", next.raw)
        elif isinstance(next, Hash):
            return ColorValue(next.raw)
        elif isinstance(next, String):
            return StringValue(next.raw, next.quote)
        elif isinstance(next, TabStop):
            return Field(next.index, next.raw)
        elif isinstance(next, LParantheses):
            raise ParseError("Unexpected '('", next.pos)
        elif isinstance(next, RParantheses):
            raise ParseError("Unexpected ')'", next.pos)
        return Operator(next.raw)

    def consume_function(self, function: Function) -> FunctionCall:
        call = FunctionCall(function.raw)
        self.skip_whitespace()
        if isinstance(self.peek(), RParantheses):
            self.next()
            return call

        call.arguments = self.consume_value()
        closing = self.next()
        if not isinstance(closing, RParantheses):
            raise ParseError(f"Function {function.raw!r} was not closed", function.pos)
        return call

    def consume_value(self) -> list[CSSValue]:
        """Consume comma-separated value groups until `)`, `;`, or the end of input."""
        values = []
        current = CSSValue()
        self.skip_whitespace()
        while True:
            peek = self.peek()
            if isinstance(peek, (EOF, RParantheses, Semicolon)):
                break
            elif isinstance(peek, Comma):
                if not current.value:
                    raise ParseError("Expected value before ','", peek.pos)
                values.append(current)
                current = CSSValue()
                self.next()
            elif isinstance(peek, Whitespace):
                self.next()
                continue
            else:
                current.value.append(self.consume_node())

        if not current.value:
            raise ParseError("Expected value", self.peek().pos)
        values.append(current)
        return values

    def strip_important(self, prop: CSSProperty, pos: int):
        """Move a trailing `!important` from the value nodes onto the property flag."""
        last = prop.value[-1].value
        if (
            len(last) >= 2
            and isinstance(last[-2], Operator) and last[-2].value == "!"
            and isinstance(last[-1], Literal) and last[-1].value == "important"
        ):
            del last[-2:]
            prop.important = True
            if not last:
                raise ParseError("Expected value before '!important'", pos)

    def consume_decleration(self) -> CSSProperty:
        self.skip_whitespace()
        name = self.next()
        if not isinstance(name, Ident):
            raise ParseError("Missing ident for decleration", name.pos)

        self.skip_whitespace()
        colon = self.next()
        if not isinstance(colon, Colon):
            raise ParseError("Expected a colon", colon.pos)

        decl = CSSProperty(name.raw, self.consume_value())
        self.strip_important(decl, name.pos)
        return decl

    def consume_decl_list(self) -> list[CSSProperty]:
        decls = []
        while True:
            self.skip_whitespace()
            next = self.peek()
            if isinstance(next, EOF):
                return decls
            elif isinstance(next, Semicolon):
                self.next()
            elif isinstance(next, Ident):
                decls.append(self.consume_decleration())
            else:
                raise ParseError("Invalid decleration list", next.pos)


def parse(source: str, options: ParseOptions | None = None) -> list[CSSProperty]:
    """Parse a CSS value, or a list of declarations, into properties.

    In value mode the result holds exactly one property with no name.

    Raises:
        ParseError: When the source is empty or malformed.
    """
    options = options or ParseOptions()
    if options.value:
        return [Parse.parse_value(source)]
    return Parse.parse_decl_list(source)
