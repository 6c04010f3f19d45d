from __future__ import annotations
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
import logging
import re

from typing_extensions import TypeAliasType, TypeGuard

from stylesnip.css import CSSValue, FunctionCall, Literal, ParseOptions, parse

__all__ = [
    "CSSSnippet",
    "CSSSnippetType",
    "CSSSnippetRaw",
    "CSSSnippetProperty",
    "CSSKeywordRef",
    "create_snippet",
    "get_keywords",
    "nest",
    "is_property",
]

logger = logging.getLogger(__name__)

RE_PROPERTY = re.compile(r"([a-z-]+)(?:\s*:\s*([^\n\r]+))?")
VALUE_OPTIONS = ParseOptions(value=True)


class CSSSnippetType(str, Enum):
    Raw = "Raw"
    Property = "Property"


class CSSSnippetRaw:
    """An opaque text snippet."""

    __slots__ = ("key", "value")
    type = CSSSnippetType.Raw

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"Raw({self.key!r}, {self.value!r})"


class CSSSnippetProperty:
    """A CSS property with its possible values.

    Args
        key (str): Name the snippet is registered under.
        property (str): CSS property name.
        value (list[list[CSSValue]]): One parsed value per `|` alternative.
    """

    __slots__ = ("key", "property", "value", "_dependencies_")
    type = CSSSnippetType.Property

    def __init__(self, key: str, property: str, value: list[list[CSSValue]] | None = None) -> None:
        self.key = key
        self.property = property
        self.value = value or []
        self._dependencies_: list[CSSSnippetProperty] = []

    @property
    def dependencies(self) -> tuple[CSSSnippetProperty, ...]:
        """More specific properties nested into this one, in link order."""
        return tuple(self._dependencies_)

    def add_dependency(self, snippet: CSSSnippetProperty):
        self._dependencies_.append(snippet)

    def __repr__(self) -> str:
        deps = ", ".join(dep.key for dep in self._dependencies_)
        return f"Property({self.key!r}, {self.property!r}, deps=[{deps}])"


CSSSnippet = TypeAliasType("CSSSnippet", CSSSnippetRaw | CSSSnippetProperty)


@dataclass(frozen=True)
class CSSKeywordRef:
    keyword: str
    # Position of the snippet value alternative that holds the keyword
    index: int


def is_property(snippet: CSSSnippet) -> TypeGuard[CSSSnippetProperty]:
    return snippet.type is CSSSnippetType.Property


def create_snippet(key: str, value: str) -> CSSSnippet:
    """Create the structure holding a resolved CSS snippet.

    A definition shaped like `name` or `name: value1|value2` becomes a property
    snippet with every `|` alternative parsed as a CSS value. Anything else is
    kept as raw text.

    Raises:
        ParseError: When a property value alternative can not be parsed.
    """
    m = RE_PROPERTY.fullmatch(value)
    if m is None:
        logger.debug("Snippet %r is not a property, keeping raw text", key)
        return CSSSnippetRaw(key, value)

    values = []
    if m.group(2) is not None:
        values = [_parse_value_(alt) for alt in m.group(2).split("|")]
    return CSSSnippetProperty(key, m.group(1), values)


def get_keywords(snippet: CSSSnippet) -> list[CSSKeywordRef]:
    """Return the unique keywords of a CSS snippet and its dependencies.

    Dependencies are walked breadth first and every keyword keeps the index of
    the value alternative it was first found in.
    """
    if not is_property(snippet):
        return []

    # Items stay in the queue instead of being popped so a snippet reachable
    # through several parents, or through a cycle, is scanned only once
    queue: list[CSSSnippetProperty] = [snippet]
    queued = {id(snippet)}
    result: list[CSSKeywordRef] = []
    lookup: set[str] = set()
    i = 0

    while i < len(queue):
        item = queue[i]
        i += 1

        for index, alternative in enumerate(item.value):
            for keyword in _keywords_from_value_(alternative):
                if keyword not in lookup:
                    lookup.add(keyword)
                    result.append(CSSKeywordRef(keyword, index))

        for dep in item.dependencies:
            if id(dep) not in queued:
                queued.add(id(dep))
                queue.append(dep)

    return result


def nest(snippets: list[CSSSnippet]) -> list[CSSSnippet]:
    """Nest more specific CSS properties into shorthand ones, e.g.
    `background-position-x` -> `background-position` -> `background`.

    Returns the snippets sorted by key. Raw snippets are left as they are.
    """
    # `-` sorts after letters, so every shorthand lands right before the run
    # of its longhands: background < background-position < background-size
    snippets = sorted(snippets, key=_sort_key_)
    stack: list[CSSSnippetProperty] = []

    for cur in filter(is_property, snippets):
        while stack:
            prev = stack[-1]
            if cur.property.startswith(f"{prev.property}-"):
                logger.debug("Nesting %r into %r", cur.property, prev.property)
                prev.add_dependency(cur)
                stack.append(cur)
                break
            stack.pop()

        if not stack:
            logger.debug("%r has no shorthand, starting a new root", cur.property)
            stack.append(cur)

    return snippets


def _sort_key_(snippet: CSSSnippet) -> str:
    return snippet.key


def _parse_value_(value: str) -> list[CSSValue]:
    return parse(value.strip(), VALUE_OPTIONS)[0].value


def _keywords_from_value_(value: list[CSSValue]) -> Iterator[str]:
    for group in value:
        for node in group.value:
            if isinstance(node, Literal):
                yield node.value
            elif isinstance(node, FunctionCall):
                yield node.name
