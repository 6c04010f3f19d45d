""" CSS value lexing
https://www.w3.org/TR/css-syntax-3/#tokenization

Only the subset of tokens that can appear in a property value is produced.
Snippet tab-stops (`${1}`, `${1:placeholder}`) are lexed as `TabStop` tokens.

value => ident, function, number, dimension, percentage, hash, string, field
separators => whitespace, `,`, `/` and other delimiters
"""

from __future__ import annotations
import re
from typing import Literal
from stylesnip.css.tokens import *
REPLACEMENT_CHAR = '\uFFFD'

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= ord('\u0080')

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and "0" <= current <= "9"

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and (Check.digit(current) or current in "abcdefABCDEF")

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (Check.ident_start(current) or Check.digit(current) or current == "-")

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next is not None and next != "\n"

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None, third: str | None) -> bool:
        if Check.ident_start(first):
            return True
        elif first == "-":
            return Check.ident_start(second) or second == "-" or Check.escape(second, third)
        elif first == "\\":
            return Check.escape(first, second)
        return False

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first is None:
            return False
        if first in "+-":
            if Check.digit(second):
                return True
            return second == "." and Check.digit(third)
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


RETURNS = re.compile("\r\n|\f|\r")
class Lexer:
    def __init__(self, source: str) -> None:
        self.source: str = RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR)
        self.index = 0
        self.errors: list[ParseError] = []

    def __iter__(self):
        return self

    def __next__(self):
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Tokenize the entire source at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead of the cursor."""
        at = self.index + amount - 1
        if at < len(self.source):
            return self.source[at]
        return None

    def next(self) -> str | None:
        if self.index < len(self.source):
            self.index += 1
            return self.source[self.index - 1]
        return None

    def reconsume(self):
        self.index -= 1

    def error(self, message: str, pos: int | None = None):
        self.errors.append(ParseError(message, self.index if pos is None else pos))

    def _consume_whitespace_(self, current: str, start: int) -> Whitespace:
        whitespace = Whitespace(current, start)
        while Check.whitespace(self.peek()):
            whitespace.raw += self.next()
        return whitespace

    def _consume_string_(self, ending: str, start: int) -> String:
        string = String('', start, ending)
        while True:
            next = self.next()
            if next is None:
                self.error("String was not closed", start)
                return string
            elif next == "\\":
                if self.peek() == "\n":
                    self.next()
                elif self.peek() is not None:
                    string.raw += self._consume_escape_()
            elif next == "\n":
                self.error("String literal not closed", start)
                return string
            elif next == ending:
                return string
            else:
                string.raw += next

    def _consume_escape_(self) -> str:
        """Consume the code points after a backslash and return the escaped character."""
        next = self.next()
        if next is None:
            return REPLACEMENT_CHAR
        if Check.hex(next):
            output = next
            while Check.hex(self.peek()) and len(output) < 6:
                output += self.next()
            if Check.whitespace(self.peek()):
                self.next()
            code = int(output, 16)
            if code == 0 or code > 0x10FFFF:
                return REPLACEMENT_CHAR
            return chr(code)
        return next

    def _consume_ident_(self) -> str:
        result = ''
        while (next := self.next()) is not None:
            if Check.ident(next):
                result += next
            elif Check.escape(next, self.peek()):
                result += self._consume_escape_()
            else:
                self.reconsume()
                break
        return result

    def _consume_hash_(self, current: str, start: int) -> Hash | Delim:
        if Check.ident(self.peek()) or Check.escape(self.peek(), self.peek(2)):
            hasht = Hash('', start)
            if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
                hasht.type = "id"
            hasht.raw = self._consume_ident_()
            return hasht
        return Delim(current, start)

    def _consume_field_(self, start: int) -> TabStop | Delim:
        """Consume `${index}` or `${index:placeholder}` after the `$`."""
        if self.peek() != "{" or not Check.digit(self.peek(2)):
            return Delim("$", start)

        self.next()
        index = ''
        while Check.digit(self.peek()):
            index += self.next()

        placeholder = ''
        if self.peek() == ":":
            self.next()
            depth = 0
            while (next := self.peek()) is not None and (next != "}" or depth > 0):
                if next == "{":
                    depth += 1
                elif next == "}":
                    depth -= 1
                placeholder += self.next()

        if self.next() != "}":
            self.error("Field was not closed", start)
        return TabStop(int(index), placeholder, start)

    def _consume_number_(self) -> tuple[float, Literal['integer', 'number'], str]:
        """Consume a number from the code points. Returning a numeric value and a type
        of either integer or number.
        """
        _type: Literal['integer', 'number'] = 'integer'
        raw = ''
        if (peek := self.peek()) is not None and peek in "-+":
            raw += self.next()

        while Check.digit(self.peek()):
            raw += self.next()

        if self.peek() == "." and Check.digit(self.peek(2)):
            raw += self.next() + self.next()
            _type = "number"
            while Check.digit(self.peek()):
                raw += self.next()

        if (peek := self.peek()) is not None and peek in "Ee":
            if (sign := self.peek(2)) is not None and sign in "-+" and Check.digit(self.peek(3)):
                raw += self.next() + self.next()
                _type = "number"
            elif Check.digit(self.peek(2)):
                raw += self.next()
                _type = "number"
            while _type == "number" and Check.digit(self.peek()):
                raw += self.next()

        return float(raw), _type, raw

    def _consume_numeric_(self, start: int) -> Number | Percentage | Dimension:
        """Consume code points and produce a Number, Percentage, or Dimension token."""
        value, _type, raw = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
            unit = self._consume_ident_()
            return Dimension(value, _type, unit, raw + unit, start)
        elif self.peek() == "%":
            self.next()
            return Percentage(value, _type, raw, start)
        return Number(value, _type, raw, start)

    def _consume_ident_like_(self, start: int) -> Ident | Function:
        ident = self._consume_ident_()
        if self.peek() == "(":
            self.next()
            return Function(ident, start)
        return Ident(ident, start)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        start = self.index
        next = self.next()
        if next is None:
            return EOF('', start)
        elif next in '"\'':
            return self._consume_string_(next, start)
        elif next == '#':
            return self._consume_hash_(next, start)
        elif next == '$':
            return self._consume_field_(start)
        elif next in "+-.":
            if Check.starts_with_number(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_(start)
            elif next == "-" and Check.starts_with_ident(next, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_ident_like_(start)
            return Delim(next, start)
        elif next == "\\":
            if Check.escape(next, self.peek()):
                self.reconsume()
                return self._consume_ident_like_(start)
            self.error("Invalid backslash", start)
            return Delim(next, start)
        elif Check.digit(next):
            self.reconsume()
            return self._consume_numeric_(start)
        elif Check.ident_start(next):
            self.reconsume()
            return self._consume_ident_like_(start)
        elif Check.whitespace(next):
            return self._consume_whitespace_(next, start)
        elif next == "(":
            return LParantheses(next, start)
        elif next == ")":
            return RParantheses(next, start)
        elif next == ",":
            return Comma(next, start)
        elif next == ":":
            return Colon(next, start)
        elif next == ";":
            return Semicolon(next, start)
        else:
            return Delim(next, start)

class ParseError(Exception):
    """Raised when a value or declaration cannot be parsed."""

    def __init__(self, message: str, pos: int = 0) -> None:
        self.message = message
        self.pos = pos
        super().__init__(f"{message} (at {pos})")
