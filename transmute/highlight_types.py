"""Highlight data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class TokenKind(str, Enum):
    COMMENT = "comment"
    STRING = "string"
    NUMBER = "number"
    KEYWORD = "keyword"
    FUNCTION = "function"
    PROPERTY = "property"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    TEXT = "text"


@dataclass(frozen=True)
class HighlightRegion:
    """A styled span parked behind a placeholder until restoration.

    ``text`` is already HTML-escaped.
    """

    placeholder: str
    kind: TokenKind
    text: str


class HighlightToken(BaseModel):
    """Display-agnostic token: ``text`` is the original, unescaped source."""

    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.text!r}"
