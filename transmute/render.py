"""Map highlight tokens onto a display technology."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from .highlight_types import HighlightToken, TokenKind
from .highlighter import escape_html, wrap_span
from .themes import Theme

_BOLD_KINDS = frozenset({TokenKind.KEYWORD, TokenKind.FUNCTION, TokenKind.NUMBER})


def render_plain(tokens: list[HighlightToken]) -> str:
    return "".join(token.text for token in tokens)


def render_html(tokens: list[HighlightToken], theme: Theme) -> str:
    """HTML spans for *tokens*; plain text tokens are escaped but not wrapped."""
    parts: list[str] = []
    for token in tokens:
        escaped = escape_html(token.text)
        if token.kind == TokenKind.TEXT:
            parts.append(escaped)
        else:
            parts.append(wrap_span(token.kind, escaped, theme))
    return "".join(parts)


def _rich_style(theme: Theme, kind: TokenKind) -> Style:
    color = getattr(theme, kind.value, theme.text)
    return Style(
        color=color,
        bold=kind in _BOLD_KINDS,
        italic=kind == TokenKind.COMMENT,
    )


def render_rich(tokens: list[HighlightToken], theme: Theme) -> Text:
    """A ``rich`` Text for terminal output, coloured by *theme*."""
    text = Text(style=Style(color=theme.text, bgcolor=theme.background))
    for token in tokens:
        text.append(token.text, style=_rich_style(theme, token.kind))
    return text
