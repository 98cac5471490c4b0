"""Editor-side colouring of the author text.

Each word gets a weighted colour: rare yellow, frequent magenta, and one
of three cyan/teal shades otherwise. Whitespace is preserved with
``&nbsp;`` and ``<br/>``.
"""

from __future__ import annotations

import random
import re
from typing import Optional

from .draw import Draw
from .highlighter import escape_html

RARE_COLOR = "#FFFF00"
ACCENT_COLOR = "#FF00FF"
BASE_COLORS = ("#00FFAA", "#00DDCC", "#00CCDD")

RARE_PERCENT = 2
ACCENT_PERCENT = 30

_TRANSITION = "transition: color 0.3s ease-in-out;"
_WHITESPACE_SPLIT = re.compile(r"(\s+)")


def word_color(draw: Draw) -> str:
    roll = draw.below(100)
    if roll < RARE_PERCENT:
        return RARE_COLOR
    if roll < RARE_PERCENT + ACCENT_PERCENT:
        return ACCENT_COLOR
    return draw.choice(BASE_COLORS)


def _whitespace(run: str) -> str:
    return run.replace(" ", "&nbsp;").replace("\n", "<br/>")


def colorize_prose(text: str, rng: Optional[random.Random] = None) -> str:
    if not text:
        return ""
    draw = Draw(rng if rng is not None else random.Random())
    parts: list[str] = []
    for piece in _WHITESPACE_SPLIT.split(text):
        if not piece:
            continue
        if piece.isspace():
            parts.append(_whitespace(piece))
            continue
        parts.append(
            f'<span style="color: {word_color(draw)}; {_TRANSITION}">'
            f"{escape_html(piece)}</span>"
        )
    return "".join(parts)
