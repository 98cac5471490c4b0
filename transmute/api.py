"""Composable API functions for the transmute pipelines.

Each function corresponds to a CLI workflow (html, plain, terminal,
--document) but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from rich.text import Text

from .document import parse_blocks, transform_document
from .highlight_types import HighlightToken
from .highlighter import highlight, tokenize
from .render import render_rich
from .synth_types import SynthesisConfig, SynthesisMode
from .synthesizer import synthesize
from .themes import Theme, default_theme, get_theme
from . import constants

logger = logging.getLogger(__name__)


def generate_code(
    text: str,
    language: str = constants.DEFAULT_LANGUAGE,
    mode: Union[str, SynthesisMode] = SynthesisMode.SEEDED,
    rng: Optional[random.Random] = None,
    document: bool = False,
    config: Optional[SynthesisConfig] = None,
) -> str:
    """Turn author text into plain code.

    Args:
        text: Author text.
        language: Target language id.
        mode: "seeded" or "random" line synthesis; ignored for documents.
        rng: Random source for random mode or document hex literals.
        document: Treat *text* as markdown-ish blocks and scaffold them
            instead of synthesizing line by line.
        config: Synthesis bounds.

    Returns:
        Code text without markup.
    """
    if document:
        blocks = parse_blocks(text)
        logger.info("Transforming document (%s, %d blocks)", language, len(blocks))
        return transform_document(blocks, language, rng=rng)
    logger.info("Synthesizing code (%s, mode=%s)", language, SynthesisMode(mode).value)
    return synthesize(text, language, mode, rng=rng, config=config)


def transmute_text(
    text: str,
    language: str = constants.DEFAULT_LANGUAGE,
    theme: Union[Theme, str, None] = constants.DEFAULT_THEME,
    mode: Union[str, SynthesisMode] = SynthesisMode.SEEDED,
    rng: Optional[random.Random] = None,
    document: bool = False,
) -> str:
    """Synthesize *text* and return highlighted HTML."""
    code = generate_code(text, language, mode, rng=rng, document=document)
    return highlight(code, language, theme)


def transmute_tokens(
    text: str,
    language: str = constants.DEFAULT_LANGUAGE,
    mode: Union[str, SynthesisMode] = SynthesisMode.SEEDED,
    rng: Optional[random.Random] = None,
    document: bool = False,
) -> list[HighlightToken]:
    """Synthesize *text* and return the highlight tokens of the result."""
    code = generate_code(text, language, mode, rng=rng, document=document)
    return tokenize(code, language)


def transmute_rich(
    text: str,
    language: str = constants.DEFAULT_LANGUAGE,
    theme: Union[Theme, str, None] = constants.DEFAULT_THEME,
    mode: Union[str, SynthesisMode] = SynthesisMode.SEEDED,
    rng: Optional[random.Random] = None,
    document: bool = False,
) -> Text:
    """Synthesize *text* and return a ``rich`` Text for terminal display.

    An unknown theme id falls back to the default theme.
    """
    resolved = theme if isinstance(theme, Theme) else get_theme(theme or "")
    if resolved is None:
        logger.info("Unknown theme %r, using %s", theme, constants.DEFAULT_THEME)
        resolved = default_theme()
    tokens = transmute_tokens(text, language, mode, rng=rng, document=document)
    return render_rich(tokens, resolved)
