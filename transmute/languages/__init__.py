"""Per-language pattern libraries, token pools and keyword sets."""

from __future__ import annotations

import importlib
import logging
import re

from ._base import (
    BLOCK_CLOSE_ID,
    BaseLanguage,
    BlockStyle,
    Pattern,
    PatternCategory,
    PatternContext,
)
from .. import constants

logger = logging.getLogger(__name__)

_WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*!?")

# Lazy imports to avoid loading every language at startup
_LANGUAGE_CLASSES: dict[str, str] = {
    "javascript": "javascript.JavaScriptLanguage",
    "python": "python.PythonLanguage",
    "rust": "rust.RustLanguage",
    "go": "go.GoLanguage",
    "cpp": "cpp.CppLanguage",
    "ruby": "ruby.RubyLanguage",
    "java": "java.JavaLanguage",
}


def get_language(language_id: str) -> BaseLanguage:
    """Instantiate the pattern library for *language_id*.

    Raises ``ValueError`` if *language_id* has no registered language.
    """
    target = _LANGUAGE_CLASSES.get(language_id)
    if target is None:
        raise ValueError(f"Unsupported language: {language_id}")
    module_name, class_name = target.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    return cls()


def resolve_language(language_id: str) -> BaseLanguage:
    """Like :func:`get_language`, but degrades to the generic language."""
    if language_id in _LANGUAGE_CLASSES:
        return get_language(language_id)
    logger.debug("Unknown language %r, using generic patterns", language_id)
    return BaseLanguage()


def is_supported(language_id: str) -> bool:
    return language_id in _LANGUAGE_CLASSES


def detect_language(text: str) -> str:
    """Guess a language id from keyword hits in *text*.

    The first registered language with at least
    ``DETECTION_KEYWORD_THRESHOLD`` distinct keywords present wins;
    otherwise ``"plaintext"``.
    """
    words = set(_WORD.findall(text))
    for language_id in SUPPORTED_LANGUAGES:
        language = get_language(language_id)
        hits = len(language.KEYWORDS & words)
        if hits >= constants.DETECTION_KEYWORD_THRESHOLD:
            logger.debug("Detected %s (%d keyword hits)", language_id, hits)
            return language_id
    return constants.PLAINTEXT_LANGUAGE


SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(_LANGUAGE_CLASSES.keys())

__all__ = [
    "BLOCK_CLOSE_ID",
    "BaseLanguage",
    "BlockStyle",
    "Pattern",
    "PatternCategory",
    "PatternContext",
    "get_language",
    "resolve_language",
    "is_supported",
    "detect_language",
    "SUPPORTED_LANGUAGES",
]
