from __future__ import annotations
from collections.abc import Mapping
import logging

from stylesnip.css import ParseError, ParseOptions, parse
from stylesnip.snippets import (
    CSSKeywordRef,
    CSSSnippet,
    CSSSnippetProperty,
    CSSSnippetRaw,
    CSSSnippetType,
    create_snippet,
    get_keywords,
    is_property,
    nest,
)

__version__ = "0.1.0"

__all__ = [
    "CSSKeywordRef",
    "CSSSnippet",
    "CSSSnippetProperty",
    "CSSSnippetRaw",
    "CSSSnippetType",
    "ParseError",
    "ParseOptions",
    "create_snippet",
    "create_snippets",
    "get_keywords",
    "is_property",
    "nest",
    "parse",
]

""" # Flow

+ Definitions (`key -> "property: a|b|c"` or free text)
    - create_snippet: Raw or Property snippet per definition
    - nest: link shorthands to longhands, sorted by key
    - get_keywords: keywords of a property and everything nested into it
"""

logger = logging.getLogger(__name__)


def create_snippets(snippets: Mapping[str, str]) -> list[CSSSnippet]:
    """Build and nest every snippet of a `key -> definition` table.

    Raises:
        ParseError: For the first definition whose value can not be parsed.
    """
    result = nest([create_snippet(key, value) for key, value in snippets.items()])
    logger.debug(
        "Resolved %d snippets (%d properties)",
        len(result),
        sum(1 for snippet in result if is_property(snippet)),
    )
    return result
