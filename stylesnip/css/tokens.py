from typing import Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "Hash",
    "String",
    "TabStop",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",

    "LParantheses",
    "RParantheses",

    "Number",
    "Percentage",
    "Dimension",

    "Whitespace",
    "EOF"
]

class Token:
    raw: str
    pos: int
    def __init__(self, raw: str = '', pos: int = 0):
        self.raw = raw
        self.pos = pos

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

class Ident(Token): pass
class Function(Token):
    def __str__(self) -> str:
        return f"{self.raw}("
class Hash(Token):
    def __init__(self, raw: str = '', pos: int = 0, *, type: Literal['id', 'unrestricted'] = 'unrestricted'):
        self.type = type
        super().__init__(raw, pos)
    def __repr__(self) -> str:
        return f'Hash({"id, " if self.type == "id" else ""}{self.raw!r})'
    def __str__(self) -> str:
        return f"#{self.raw}"

class String(Token):
    quote: str
    def __init__(self, raw: str = '', pos: int = 0, quote: str = '"'):
        self.quote = quote
        super().__init__(raw, pos)
    def __str__(self) -> str:
        return f"{self.quote}{self.raw}{self.quote}"

class TabStop(Token):
    """Tab-stop field, `${1}` or `${1:placeholder}`."""
    index: int
    def __init__(self, index: int, raw: str = '', pos: int = 0):
        self.index = index
        super().__init__(raw, pos)
    def __repr__(self) -> str:
        return f"TabStop({self.index}, {self.raw!r})"
    def __str__(self) -> str:
        if self.raw:
            return f"${{{self.index}:{self.raw}}}"
        return f"${{{self.index}}}"

class Delim(Token):
    def __init__(self, raw: str, pos: int = 0):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw, pos)
    def __repr__(self) -> str:
        return f'Delim({self.raw!r})'

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass

class LParantheses(Token): pass
class RParantheses(Token): pass

class Number(Token):
    value: float
    type: Literal['integer', 'number']
    def __init__(self, value: float, type: Literal['integer', 'number'], raw: str, pos: int = 0):
        self.value = value
        self.type = type
        super().__init__(raw, pos)

    def __repr__(self) -> str:
        return f"Number({self.raw!r})"

class Percentage(Number):
    def __repr__(self) -> str:
        return f"Percentage({self.raw!r}%)"

    def __str__(self) -> str:
        return f"{self.raw}%"
class Dimension(Number):
    unit: str
    def __init__(self, value: float, type: Literal['integer', 'number'], unit: str, raw: str, pos: int = 0):
        self.unit = unit
        super().__init__(value, type, raw, pos)

    def __repr__(self) -> str:
        return f"Dimension({self.raw!r})"

class Whitespace(Token): pass
class EOF(Token): pass
