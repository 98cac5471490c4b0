"""GoLanguage — short variable declarations and composite literals."""

from __future__ import annotations

from ._base import BaseLanguage
from ..pools import LITERALS, RECEIVERS, build_pools


class GoLanguage(BaseLanguage):
    LANGUAGE_ID = "go"
    DISPLAY_NAME = "Go"
    EXTENSION = ".go"

    LINE_COMMENTS = ("//",)
    INDENT_UNIT = "\t"

    STATEMENT_END = ""
    DECLARE_KEYWORD = ""
    ASSIGN_OP = ":="
    PRINT_FUNCTION = "fmt.Println"
    SELF_NAME = "s"

    KEYWORDS = frozenset(
        {
            "func",
            "var",
            "const",
            "type",
            "struct",
            "interface",
            "map",
            "return",
            "if",
            "else",
            "for",
            "range",
            "package",
            "import",
            "fmt",
            "Println",
            "true",
            "false",
            "nil",
        }
    )

    POOLS = build_pools(
        "go",
        {
            LITERALS: ("true", "false", "nil"),
            RECEIVERS: ("srv", "db", "cache", "client", "router"),
        },
    )

    def _format_if(self, condition: str) -> str:
        return f"if {condition}{self.BLOCK_OPEN}"

    def _format_loop(self, counter: str, limit: int) -> str:
        return f"for {counter} := 0; {counter} < {limit}; {counter}++{self.BLOCK_OPEN}"

    def _format_collection(self, items: list[str]) -> str:
        return f"[]interface{{}}{{{', '.join(items)}}}"

    def _format_object(self, key: str, value: str, count: int) -> str:
        return f'map[string]interface{{}}{{"{key}": {value}, "value": {count}}}'

    def class_skeleton(self, class_name: str) -> list[str]:
        return [f"type {class_name} struct {{", f"{self.INDENT_UNIT}Initialized bool", "}"]
