"""Highlight Pipeline — layered regex passes over escaped code text.

Pass order is fixed: escape, comments, strings, numbers, keywords, call
sites, property access, operators/punctuation, restore. Every pass parks its
matches behind a placeholder, so no pass can see markup or text claimed by an
earlier one.
"""

from __future__ import annotations

import html
import logging
import re
from typing import Callable, Optional, Union

from .highlight_types import HighlightRegion, HighlightToken, TokenKind
from .languages import BaseLanguage, is_supported, resolve_language
from .themes import Theme, get_theme
from . import constants

logger = logging.getLogger(__name__)

_DELIM = constants.PLACEHOLDER_DELIMITER
_DIGIT_BASE = constants.PLACEHOLDER_DIGIT_BASE
_RADIX = constants.PLACEHOLDER_RADIX

_PLACEHOLDER_RE = re.compile(
    f"{_DELIM}([{chr(_DIGIT_BASE)}-{chr(_DIGIT_BASE + _RADIX - 1)}]+){_DELIM}"
)

_STRING_SRC = r""""(?:[^"\\\n\x00]|\\.)*"|'(?:[^'\\\n\x00]|\\.)*'"""
_STRING_RE = re.compile(_STRING_SRC)
_NUMBER_RE = re.compile(r"(?<!\w)(?:0[xX][0-9A-Fa-f]+|\d+(?:\.\d+)?)(?!\w)")
_CALL_RE = re.compile(r"(?<![\w&])[A-Za-z_]\w*(?=\()")
_PROPERTY_RE = re.compile(r"(?<=\.)[A-Za-z_]\w*")
_OPERATOR_RE = re.compile(
    r"(?P<operator>(?:&(?:amp|lt|gt);|[+\-*/%=!|^~?:])+)|(?P<punctuation>[{}\[\]();,.])"
)

_STYLE_EXTRAS: dict[TokenKind, str] = {
    TokenKind.COMMENT: " font-style: italic;",
    TokenKind.STRING: " font-weight: 500;",
    TokenKind.NUMBER: " font-weight: 600;",
    TokenKind.KEYWORD: " font-weight: 700;",
    TokenKind.FUNCTION: " font-weight: 600;",
    TokenKind.PROPERTY: " font-weight: 500;",
}


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``; replace NUL with U+FFFD as an HTML parser would."""
    return html.escape(text, quote=False).replace("\x00", constants.NUL_REPLACEMENT)


def _encode_index(index: int) -> str:
    digits = ""
    while True:
        index, digit = divmod(index, _RADIX)
        digits = chr(_DIGIT_BASE + digit) + digits
        if index == 0:
            return digits


def _decode_index(digits: str) -> int:
    value = 0
    for ch in digits:
        value = value * _RADIX + (ord(ch) - _DIGIT_BASE)
    return value


class _RegionStore:
    """Collects protected regions for one highlight call."""

    def __init__(self):
        self.regions: list[HighlightRegion] = []

    def park(self, kind: TokenKind, text: str) -> str:
        placeholder = f"{_DELIM}{_encode_index(len(self.regions))}{_DELIM}"
        self.regions.append(HighlightRegion(placeholder=placeholder, kind=kind, text=text))
        return placeholder

    def mark(self, pattern: re.Pattern, text: str, kind: TokenKind) -> str:
        return pattern.sub(lambda m: self.park(kind, m.group(0)), text)

    def lookup(self, digits: str) -> HighlightRegion:
        return self.regions[_decode_index(digits)]


# ── passes ───────────────────────────────────────────────────────


def _comment_pattern(markers: tuple[str, ...]) -> re.Pattern:
    alternatives = "|".join(re.escape(m) for m in markers)
    return re.compile(f"(?P<string>{_STRING_SRC})|(?P<comment>(?:{alternatives}).*$)", re.M)


def _protect_comments(text: str, language: BaseLanguage, store: _RegionStore) -> str:
    """Park line comments; quoted spans are stepped over, not parked."""
    pattern = _comment_pattern(language.LINE_COMMENTS)

    def _replace(m: re.Match) -> str:
        if m.group("comment") is None:
            return m.group(0)
        return store.park(TokenKind.COMMENT, m.group(0))

    return pattern.sub(_replace, text)


def _keyword_pattern(keywords: frozenset[str]) -> Optional[re.Pattern]:
    if not keywords:
        return None
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(f"(?<![\\w&])(?:{alternatives})(?!\\w)")


def _mark_operators(text: str, store: _RegionStore) -> str:
    def _replace(m: re.Match) -> str:
        kind = TokenKind.OPERATOR if m.group("operator") else TokenKind.PUNCTUATION
        return store.park(kind, m.group(0))

    return _OPERATOR_RE.sub(_replace, text)


def _apply_passes(escaped: str, language: BaseLanguage, known: bool) -> tuple[str, _RegionStore]:
    store = _RegionStore()
    text = _protect_comments(escaped, language, store)
    text = store.mark(_STRING_RE, text, TokenKind.STRING)
    text = store.mark(_NUMBER_RE, text, TokenKind.NUMBER)
    keyword_re = _keyword_pattern(language.KEYWORDS) if known else None
    if keyword_re is not None:
        text = store.mark(keyword_re, text, TokenKind.KEYWORD)
        text = store.mark(_CALL_RE, text, TokenKind.FUNCTION)
        text = store.mark(_PROPERTY_RE, text, TokenKind.PROPERTY)
    text = _mark_operators(text, store)
    return text, store


def _restore(text: str, store: _RegionStore, wrap: Callable[[HighlightRegion], str]) -> str:
    return _PLACEHOLDER_RE.sub(lambda m: wrap(store.lookup(m.group(1))), text)


# ── markup ───────────────────────────────────────────────────────


def _color_for(theme: Theme, kind: TokenKind) -> str:
    return getattr(theme, kind.value, theme.text)


def wrap_span(kind: TokenKind, text: str, theme: Theme) -> str:
    """Markup for one styled span; *text* must already be escaped."""
    style = f"color: {_color_for(theme, kind)};{_STYLE_EXTRAS.get(kind, '')}"
    return f'<span class="tok-{kind.value}" style="{style}">{text}</span>'


def _resolve_theme(theme: Union[Theme, str, None]) -> Optional[Theme]:
    if isinstance(theme, Theme):
        return theme
    if theme is None:
        return None
    return get_theme(theme)


def highlight(code: str, language_id: str, theme: Union[Theme, str, None]) -> str:
    """Colour *code* for display as HTML.

    Args:
        code: Plain code text (typically synthesizer output).
        language_id: Language whose comment markers and keywords apply.
            Unknown ids get the generic markers and no keyword, call-site or
            property styling.
        theme: A :class:`Theme`, a registered theme id, or ``None``.

    Returns:
        HTML-safe markup. When the theme cannot be resolved the escaped
        text is returned unstyled. Empty *code* yields the language's
        neutral comment line, unstyled.
    """
    language = resolve_language(language_id)
    if not code:
        return escape_html(language.empty_placeholder())

    escaped = escape_html(code)
    resolved = _resolve_theme(theme)
    if resolved is None:
        logger.debug("Unknown theme %r, returning unstyled text", theme)
        return escaped

    text, store = _apply_passes(escaped, language, is_supported(language_id))
    return _restore(text, store, lambda region: wrap_span(region.kind, region.text, resolved))


def tokenize(code: str, language_id: str) -> list[HighlightToken]:
    """Run the pipeline and return ``{kind, text}`` tokens instead of markup.

    Token texts are unescaped and concatenate back to *code* (NUL aside).
    """
    if not code:
        return []
    language = resolve_language(language_id)
    text, store = _apply_passes(escape_html(code), language, is_supported(language_id))

    tokens: list[HighlightToken] = []
    position = 0
    for m in _PLACEHOLDER_RE.finditer(text):
        if m.start() > position:
            tokens.append(
                HighlightToken(kind=TokenKind.TEXT, text=html.unescape(text[position : m.start()]))
            )
        region = store.lookup(m.group(1))
        tokens.append(HighlightToken(kind=region.kind, text=html.unescape(region.text)))
        position = m.end()
    if position < len(text):
        tokens.append(HighlightToken(kind=TokenKind.TEXT, text=html.unescape(text[position:])))
    return tokens
