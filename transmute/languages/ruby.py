"""RubyLanguage — keyword-delimited blocks closed with ``end``."""

from __future__ import annotations

from ._base import BaseLanguage, BlockStyle
from ..pools import LITERALS, RECEIVERS, build_pools


class RubyLanguage(BaseLanguage):
    LANGUAGE_ID = "ruby"
    DISPLAY_NAME = "Ruby"
    EXTENSION = ".rb"

    LINE_COMMENTS = ("#",)
    INDENT_UNIT = "  "

    BLOCK_STYLE = BlockStyle.KEYWORD
    BLOCK_OPEN = ""
    BLOCK_CLOSE = "end"

    STATEMENT_END = ""
    DECLARE_KEYWORD = ""
    PRINT_FUNCTION = "puts"
    SELF_NAME = "self"

    KEYWORDS = frozenset(
        {
            "def",
            "class",
            "module",
            "end",
            "return",
            "if",
            "elsif",
            "else",
            "unless",
            "for",
            "while",
            "do",
            "times",
            "puts",
            "require",
            "self",
            "true",
            "false",
            "nil",
        }
    )

    POOLS = build_pools(
        "ruby",
        {
            LITERALS: ("true", "false", "nil"),
            RECEIVERS: ("app", "store", "worker", "mailer", "cache"),
        },
    )

    def _format_if(self, condition: str) -> str:
        return f"if {condition}"

    def _format_loop(self, counter: str, limit: int) -> str:
        return f"{limit}.times do |{counter}|"

    def _format_object(self, key: str, value: str, count: int) -> str:
        return f"{{ {key}: {value}, value: {count} }}"

    def _format_print(self, name: str) -> str:
        return f"{self.PRINT_FUNCTION} {name}"

    def class_skeleton(self, class_name: str) -> list[str]:
        unit = self.INDENT_UNIT
        return [
            f"class {class_name}",
            f"{unit}def initialize",
            f"{unit * 2}@initialized = true",
            f"{unit}end",
            "end",
        ]
