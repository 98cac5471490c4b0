"""CppLanguage — ``auto`` declarations, brace initialisers, iostream output."""

from __future__ import annotations

from ._base import BaseLanguage, PatternContext
from ..pools import LITERALS, RECEIVERS, build_pools


class CppLanguage(BaseLanguage):
    LANGUAGE_ID = "cpp"
    DISPLAY_NAME = "C++"
    EXTENSION = ".cpp"

    LINE_COMMENTS = ("//",)
    INDENT_UNIT = "    "

    DECLARE_KEYWORD = "auto "

    KEYWORDS = frozenset(
        {
            "auto",
            "class",
            "struct",
            "public",
            "private",
            "return",
            "if",
            "else",
            "for",
            "while",
            "int",
            "std",
            "cout",
            "endl",
            "namespace",
            "using",
            "this",
            "true",
            "false",
            "nullptr",
        }
    )

    POOLS = build_pools(
        "cpp",
        {
            LITERALS: ("true", "false", "nullptr"),
            RECEIVERS: ("engine", "buffer", "registry", "pool", "scheduler"),
        },
    )

    def _format_loop(self, counter: str, limit: int) -> str:
        return (
            f"for (int {counter} = 0; {counter} < {limit}; ++{counter})"
            f"{self.BLOCK_OPEN}"
        )

    def _format_collection(self, items: list[str]) -> str:
        return f"std::make_tuple({', '.join(items)})"

    def _format_object(self, key: str, value: str, count: int) -> str:
        return f'std::map<std::string, std::string>{{{{"{key}", {value}}}, {{"value", "{count}"}}}}'

    def _format_print(self, name: str) -> str:
        return self._end(f"std::cout << {name} << std::endl")

    def _method_call(self, ctx: PatternContext) -> str:
        return super()._method_call(ctx).replace(".", "->", 1)

    def class_skeleton(self, class_name: str) -> list[str]:
        unit = self.INDENT_UNIT
        return [
            f"class {class_name} {{",
            "public:",
            f"{unit}{class_name}() : initialized(true) {{}}",
            "private:",
            f"{unit}bool initialized;",
            "};",
        ]
