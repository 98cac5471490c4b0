"""JavaScriptLanguage — brace-delimited, ``const`` declarations."""

from __future__ import annotations

from ._base import BaseLanguage
from ..pools import FUNCTIONS, LITERALS, RECEIVERS, build_pools


class JavaScriptLanguage(BaseLanguage):
    LANGUAGE_ID = "javascript"
    DISPLAY_NAME = "JavaScript"
    EXTENSION = ".js"

    LINE_COMMENTS = ("//",)
    INDENT_UNIT = "  "

    DECLARE_KEYWORD = "const "
    PRINT_FUNCTION = "console.log"

    KEYWORDS = frozenset(
        {
            "const",
            "let",
            "var",
            "function",
            "class",
            "return",
            "if",
            "else",
            "for",
            "while",
            "new",
            "this",
            "constructor",
            "console",
            "log",
            "async",
            "await",
            "true",
            "false",
            "null",
            "undefined",
            "then",
        }
    )

    POOLS = build_pools(
        "javascript",
        {
            LITERALS: ("true", "false", "null", "undefined"),
            RECEIVERS: ("document", "window", "store", "api", "cache"),
            FUNCTIONS: (
                "process",
                "handle",
                "update",
                "fetch",
                "render",
                "validate",
                "transform",
                "dispatch",
                "subscribe",
                "resolve",
            ),
        },
    )
