"""JavaLanguage — ``var`` locals, ``List.of`` / ``Map.of`` literals."""

from __future__ import annotations

from ._base import BaseLanguage
from ..pools import LITERALS, RECEIVERS, build_pools


class JavaLanguage(BaseLanguage):
    LANGUAGE_ID = "java"
    DISPLAY_NAME = "Java"
    EXTENSION = ".java"

    LINE_COMMENTS = ("//",)
    INDENT_UNIT = "    "

    DECLARE_KEYWORD = "var "
    PRINT_FUNCTION = "System.out.println"

    KEYWORDS = frozenset(
        {
            "public",
            "private",
            "static",
            "final",
            "class",
            "void",
            "int",
            "var",
            "String",
            "return",
            "if",
            "else",
            "for",
            "while",
            "new",
            "this",
            "System",
            "println",
            "true",
            "false",
            "null",
        }
    )

    POOLS = build_pools(
        "java",
        {
            LITERALS: ("true", "false", "null"),
            RECEIVERS: ("service", "repository", "context", "executor", "builder"),
        },
    )

    def _format_loop(self, counter: str, limit: int) -> str:
        return (
            f"for (int {counter} = 0; {counter} < {limit}; {counter}++)"
            f"{self.BLOCK_OPEN}"
        )

    def _format_collection(self, items: list[str]) -> str:
        return f"List.of({', '.join(items)})"

    def _format_object(self, key: str, value: str, count: int) -> str:
        return f'Map.of("{key}", {value}, "value", {count})'

    def class_skeleton(self, class_name: str) -> list[str]:
        return [
            f"public class {class_name} {{",
            f"{self.INDENT_UNIT}private boolean initialized = true;",
            "}",
        ]
