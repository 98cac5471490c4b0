"""RustLanguage — ``let`` bindings, ``vec!`` literals, struct initialisers."""

from __future__ import annotations

from ._base import BaseLanguage
from ..pools import LITERALS, RECEIVERS, TYPES, VARIABLES, build_pools


class RustLanguage(BaseLanguage):
    LANGUAGE_ID = "rust"
    DISPLAY_NAME = "Rust"
    EXTENSION = ".rs"

    LINE_COMMENTS = ("//",)
    INDENT_UNIT = "    "

    DECLARE_KEYWORD = "let mut "
    SELF_NAME = "self"

    KEYWORDS = frozenset(
        {
            "let",
            "mut",
            "fn",
            "impl",
            "struct",
            "enum",
            "pub",
            "use",
            "return",
            "if",
            "else",
            "for",
            "in",
            "while",
            "loop",
            "match",
            "self",
            "true",
            "false",
            "None",
            "Some",
            "println!",
            "vec!",
        }
    )

    POOLS = build_pools(
        "rust",
        {
            LITERALS: ("true", "false", "None"),
            RECEIVERS: ("ctx", "registry", "buffer", "queue", "writer"),
            TYPES: ("Task", "Goal", "Session", "Entry", "Record", "Frame"),
            VARIABLES: (
                "data",
                "result",
                "value",
                "item",
                "config",
                "state",
                "handle",
                "count",
                "buf",
                "entry",
            ),
        },
    )

    def _format_if(self, condition: str) -> str:
        return f"if {condition}{self.BLOCK_OPEN}"

    def _format_loop(self, counter: str, limit: int) -> str:
        return f"for {counter} in 0..{limit}{self.BLOCK_OPEN}"

    def _format_collection(self, items: list[str]) -> str:
        return f"vec![{', '.join(items)}]"

    def _format_object(self, key: str, value: str, count: int) -> str:
        return f"Record {{ {key}: {value}, value: {count} }}"

    def _format_print(self, name: str) -> str:
        return self._end(f'println!("{{:?}}", {name})')

    def class_skeleton(self, class_name: str) -> list[str]:
        return [f"pub struct {class_name} {{", f"{self.INDENT_UNIT}initialized: bool,", "}"]
