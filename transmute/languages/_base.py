"""BaseLanguage — language-agnostic pattern library for line synthesis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from ..draw import Draw
from ..pools import (
    FUNCTIONS,
    GENERIC_POOLS,
    LITERALS,
    RECEIVERS,
    STRINGS,
    TYPES,
    VARIABLES,
    TokenPool,
)
from .. import constants

logger = logging.getLogger(__name__)


class PatternCategory(str, Enum):
    ASSIGN = "assign"
    CALL = "call"
    ACCESS = "access"
    INDEX = "index"
    CONTROL_OPEN = "control-open"
    CONTROL_CLOSE = "control-close"
    RETURN = "return"
    LITERAL = "literal"


class BlockStyle(str, Enum):
    """How a language delimits the end of a block."""

    BRACES = "braces"
    KEYWORD = "keyword"
    INDENT = "indent"


@dataclass(frozen=True)
class PatternContext:
    """Everything a pattern may read while rendering one statement."""

    draw: Draw
    pools: Mapping[str, TokenPool]
    subject: str
    phrase: str

    def pick(self, pool_name: str) -> str:
        pool = self.pools.get(pool_name)
        return self.draw.choice(pool.values if pool else ())

    def number(self, limit: int = constants.SMALL_INT_LIMIT) -> int:
        return self.draw.below(limit)

    def hex_literal(self) -> str:
        return self.draw.hex_literal()

    def name(self) -> str:
        """The line's own identifier half the time, a pooled variable otherwise."""
        return self.subject if self.draw.chance(50) else self.pick(VARIABLES)

    def word(self) -> str:
        """Short string payload: the subject or a fixed status token."""
        return self.subject if self.draw.chance(50) else self.pick(STRINGS)


@dataclass(frozen=True)
class Pattern:
    """A parameterised statement template.

    ``render`` is pure: all variation comes from the context's draw source.
    """

    pattern_id: str
    category: PatternCategory
    render: Callable[[PatternContext], str]


BLOCK_CLOSE_ID = "block_close"


class BaseLanguage:
    """Base class for per-language pattern libraries.

    Subclasses override the syntax constants below and, where the
    default C-like shape does not fit, the ``_format_*`` hooks.
    """

    # ── overridable constants ────────────────────────────────────

    LANGUAGE_ID: str = constants.GENERIC_LANGUAGE
    DISPLAY_NAME: str = "Generic"
    EXTENSION: str = ".txt"

    LINE_COMMENTS: tuple[str, ...] = ("//", "#")
    INDENT_UNIT: str = "  "

    BLOCK_STYLE: BlockStyle = BlockStyle.BRACES
    BLOCK_OPEN: str = " {"
    BLOCK_CLOSE: str = "}"

    STATEMENT_END: str = ";"
    DECLARE_KEYWORD: str = "let "
    ASSIGN_OP: str = "="
    RETURN_KEYWORD: str = "return"
    PRINT_FUNCTION: str = "print"
    SELF_NAME: str = "this"

    TRUE_LITERAL: str = "true"
    FALSE_LITERAL: str = "false"

    KEYWORDS: frozenset[str] = frozenset()

    POOLS: Mapping[str, TokenPool] = GENERIC_POOLS

    # ── init ─────────────────────────────────────────────────────

    def __init__(self):
        self._patterns: tuple[Pattern, ...] = (
            Pattern("assign", PatternCategory.ASSIGN, self._assign),
            Pattern("call", PatternCategory.CALL, self._call),
            Pattern("method_call", PatternCategory.ACCESS, self._method_call),
            Pattern("property_set", PatternCategory.ACCESS, self._property_set),
            Pattern("index_set", PatternCategory.INDEX, self._index_set),
            Pattern("if_open", PatternCategory.CONTROL_OPEN, self._if_open),
            Pattern("loop_open", PatternCategory.CONTROL_OPEN, self._loop_open),
            Pattern("return", PatternCategory.RETURN, self._return),
            Pattern("collection", PatternCategory.LITERAL, self._collection),
            Pattern("object", PatternCategory.LITERAL, self._object),
            Pattern("comment", PatternCategory.LITERAL, self._comment),
        )
        self._close = Pattern(
            BLOCK_CLOSE_ID, PatternCategory.CONTROL_CLOSE, lambda _ctx: self.BLOCK_CLOSE
        )

    # ── catalogue ────────────────────────────────────────────────

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        """Selectable patterns, in stable index order."""
        return self._patterns

    @property
    def close_pattern(self) -> Pattern:
        return self._close

    @property
    def line_comment(self) -> str:
        return self.LINE_COMMENTS[0]

    def empty_placeholder(self) -> str:
        return f"{self.line_comment} {constants.EMPTY_INPUT_TEXT}"

    # ── literal helpers ──────────────────────────────────────────

    def _quote(self, text: str) -> str:
        return f'"{text}"'

    def _value(self, ctx: PatternContext) -> str:
        roll = ctx.draw.below(4)
        if roll == 0:
            return str(ctx.number())
        if roll == 1:
            return ctx.hex_literal()
        if roll == 2:
            return self._quote(ctx.word())
        return ctx.pick(LITERALS)

    def _end(self, text: str) -> str:
        return f"{text}{self.STATEMENT_END}"

    # ── overridable formatting hooks ─────────────────────────────

    def _format_declare(self, name: str, value: str) -> str:
        return self._end(f"{self.DECLARE_KEYWORD}{name} {self.ASSIGN_OP} {value}")

    def _format_if(self, condition: str) -> str:
        return f"if ({condition}){self.BLOCK_OPEN}"

    def _format_loop(self, counter: str, limit: int) -> str:
        return (
            f"for (let {counter} = 0; {counter} < {limit}; {counter}++)"
            f"{self.BLOCK_OPEN}"
        )

    def _format_collection(self, items: list[str]) -> str:
        return f"[{', '.join(items)}]"

    def _format_object(self, key: str, value: str, count: int) -> str:
        return f"{{ {key}: {value}, value: {count} }}"

    def _format_print(self, name: str) -> str:
        return self._end(f"{self.PRINT_FUNCTION}({name})")

    # ── document scaffolding ─────────────────────────────────────

    def quote(self, text: str) -> str:
        return self._quote(text.replace("\\", "\\\\").replace('"', '\\"'))

    def declaration(self, name: str, value: str) -> str:
        return self._format_declare(name, value)

    def print_call(self, name: str) -> str:
        return self._format_print(name)

    def collection(self, items: list[str]) -> str:
        return self._format_collection(items)

    def comment(self, text: str) -> str:
        return f"{self.line_comment} {text}"

    def class_skeleton(self, class_name: str) -> list[str]:
        """Lines of an empty class with an ``initialized`` flag."""
        unit = self.INDENT_UNIT
        return [
            f"class {class_name} {{",
            f"{unit}constructor() {{",
            f"{unit * 2}this.initialized = true;",
            f"{unit}}}",
            "}",
        ]

    # ── patterns ─────────────────────────────────────────────────

    def _assign(self, ctx: PatternContext) -> str:
        return self._format_declare(ctx.name(), self._value(ctx))

    def _call(self, ctx: PatternContext) -> str:
        if ctx.draw.chance(25):
            return self._format_print(ctx.name())
        func = ctx.pick(FUNCTIONS)
        return self._end(f"{func}({self._quote(ctx.word())}, {ctx.number(50)})")

    def _method_call(self, ctx: PatternContext) -> str:
        receiver = ctx.pick(RECEIVERS)
        return self._end(f"{receiver}.{ctx.pick(FUNCTIONS)}({self._quote(ctx.word())})")

    def _property_set(self, ctx: PatternContext) -> str:
        return self._end(f"{self.SELF_NAME}.{ctx.name()} = {self._value(ctx)}")

    def _index_set(self, ctx: PatternContext) -> str:
        return self._end(f"{ctx.pick(VARIABLES)}[{ctx.number(10)}] = {self._value(ctx)}")

    def _if_open(self, ctx: PatternContext) -> str:
        op = ctx.draw.choice((">", "<", ">=", "<=", "!="))
        return self._format_if(f"{ctx.name()} {op} {ctx.number(20)}")

    def _loop_open(self, ctx: PatternContext) -> str:
        return self._format_loop(ctx.draw.choice(("i", "j", "k")), ctx.draw.between(2, 20))

    def _return(self, ctx: PatternContext) -> str:
        return self._end(f"{self.RETURN_KEYWORD} {ctx.name()} + {ctx.number(30)}")

    def _collection(self, ctx: PatternContext) -> str:
        flag = ctx.draw.choice((self.TRUE_LITERAL, self.FALSE_LITERAL))
        items = [self._quote(ctx.word()), str(ctx.number(50)), flag]
        return self._format_declare(ctx.name(), self._format_collection(items))

    def _object(self, ctx: PatternContext) -> str:
        value = self._format_object(ctx.pick(VARIABLES), self._quote(ctx.word()), ctx.number())
        return self._format_declare(ctx.subject, value)

    def _comment(self, ctx: PatternContext) -> str:
        return f"{self.line_comment} {ctx.phrase or ctx.pick(TYPES)}"
