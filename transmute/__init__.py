"""Transmute — prose to syntax-highlighted pseudo-code."""

from .synthesizer import synthesize, synthesize_statements  # noqa: F401
from .highlighter import highlight, tokenize  # noqa: F401
from .themes import Theme, ThemeRegistry, get_theme, theme_css  # noqa: F401
from .naming import make_identifier  # noqa: F401
from .languages import detect_language, get_language  # noqa: F401
from .document import parse_blocks, transform_document  # noqa: F401
from .session import CodeHistory  # noqa: F401
from .prose import colorize_prose  # noqa: F401
from .render import render_rich  # noqa: F401
from .api import (  # noqa: F401
    generate_code,
    transmute_text,
    transmute_tokens,
    transmute_rich,
)
