"""PythonLanguage — indentation-delimited blocks, ``#`` comments."""

from __future__ import annotations

from ._base import BaseLanguage, BlockStyle
from ..pools import LITERALS, RECEIVERS, build_pools


class PythonLanguage(BaseLanguage):
    LANGUAGE_ID = "python"
    DISPLAY_NAME = "Python"
    EXTENSION = ".py"

    LINE_COMMENTS = ("#",)
    INDENT_UNIT = "    "

    BLOCK_STYLE = BlockStyle.INDENT
    BLOCK_OPEN = ":"
    BLOCK_CLOSE = ""

    STATEMENT_END = ""
    DECLARE_KEYWORD = ""
    SELF_NAME = "self"

    TRUE_LITERAL = "True"
    FALSE_LITERAL = "False"

    KEYWORDS = frozenset(
        {
            "def",
            "class",
            "return",
            "if",
            "else",
            "elif",
            "for",
            "in",
            "while",
            "import",
            "from",
            "self",
            "print",
            "range",
            "True",
            "False",
            "None",
            "async",
            "await",
        }
    )

    POOLS = build_pools(
        "python",
        {
            LITERALS: ("True", "False", "None"),
            RECEIVERS: ("app", "session", "queue", "logger", "registry"),
        },
    )

    def _format_if(self, condition: str) -> str:
        return f"if {condition}{self.BLOCK_OPEN}"

    def _format_loop(self, counter: str, limit: int) -> str:
        return f"for {counter} in range({limit}){self.BLOCK_OPEN}"

    def _format_object(self, key: str, value: str, count: int) -> str:
        return f'{{"{key}": {value}, "value": {count}}}'

    def class_skeleton(self, class_name: str) -> list[str]:
        unit = self.INDENT_UNIT
        return [
            f"class {class_name}:",
            f"{unit}def __init__(self):",
            f"{unit * 2}self.initialized = True",
        ]
