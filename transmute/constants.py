"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

MODE_SEEDED = "seeded"
MODE_RANDOM = "random"

MAX_INDENT_DEPTH = 4
MIN_STATEMENTS_PER_LINE = 1
MAX_STATEMENTS_PER_LINE = 3
CLOSE_PROBABILITY_PERCENT = 30
MAX_OPEN_BLOCKS = 4

IDENTIFIER_MAX_LENGTH = 20
IDENTIFIER_SEPARATOR = "_"
DEFAULT_VAR_NAME = "var"
DEFAULT_FUNC_NAME = "func"
DEFAULT_KEY_NAME = "key"

SMALL_INT_LIMIT = 100
HEX_LITERAL_LIMIT = 0xFFFFFF
HEX_LITERAL_WIDTH = 6

EMPTY_INPUT_TEXT = "Start typing..."

# Highlight placeholders: NUL-delimited, index spelled in private-use code
# points. Escaped input never contains NUL (see highlighter.escape_html).
PLACEHOLDER_DELIMITER = "\x00"
PLACEHOLDER_DIGIT_BASE = 0xE000
PLACEHOLDER_RADIX = 16
NUL_REPLACEMENT = "\ufffd"

GENERIC_LANGUAGE = "generic"
PLAINTEXT_LANGUAGE = "plaintext"
DETECTION_KEYWORD_THRESHOLD = 3

DEFAULT_LANGUAGE = "javascript"
DEFAULT_THEME = "matrix-green"
