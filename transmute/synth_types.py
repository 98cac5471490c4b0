"""Synthesis data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .languages import PatternCategory
from . import constants


class SynthesisMode(str, Enum):
    """Where per-line draws come from."""

    SEEDED = constants.MODE_SEEDED
    RANDOM = constants.MODE_RANDOM


@dataclass(frozen=True)
class SynthesisConfig:
    """Groups the bounds that shape synthesized output."""

    max_indent_depth: int = constants.MAX_INDENT_DEPTH
    min_statements_per_line: int = constants.MIN_STATEMENTS_PER_LINE
    max_statements_per_line: int = constants.MAX_STATEMENTS_PER_LINE
    close_probability_percent: int = constants.CLOSE_PROBABILITY_PERCENT
    max_open_blocks: int = constants.MAX_OPEN_BLOCKS


@dataclass(frozen=True)
class Statement:
    """One synthesized statement and the pattern that produced it.

    ``forced`` marks block terminators emitted by the end-of-buffer flush
    rather than drawn from the pattern pool.
    """

    pattern_id: str
    category: PatternCategory
    text: str
    depth: int
    line_index: int
    forced: bool = False


@dataclass
class SynthesisState:
    """Transient per-call state; created by one synthesize call and dropped after."""

    depth: int = 0
    last_pattern_id: str = ""
    # Pattern behind the last statement that produced output text.
    last_visible_id: str = ""
    open_blocks: int = 0

    def open_block(self) -> None:
        self.open_blocks += 1

    def close_block(self) -> None:
        if self.open_blocks > 0:
            self.open_blocks -= 1
