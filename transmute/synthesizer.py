"""Line Synthesizer — turns prose into plausible statements in a target language.

Each non-blank input line becomes one to three statements drawn from the
language's pattern library. Block openers are tracked so every block is
closed again by the end of the buffer.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from .draw import Draw, line_seed
from .languages import (
    BaseLanguage,
    Pattern,
    PatternCategory,
    PatternContext,
    resolve_language,
)
from .naming import NamingRules, make_identifier, subject_words
from .synth_types import Statement, SynthesisConfig, SynthesisMode, SynthesisState

logger = logging.getLogger(__name__)

_PHRASE_RULES = NamingRules(max_length=60)

# None marks a blank output line.
_Entry = Optional[Statement]


def _split_lines(text: str) -> list[str]:
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _pick_pattern(
    draw: Draw, patterns: tuple[Pattern, ...], last_id: str, allow_open: bool
) -> Pattern:
    """Draw a pattern, advancing past the previous one instead of re-rolling."""
    count = len(patterns)
    start = draw.below(count)
    for offset in range(count):
        candidate = patterns[(start + offset) % count]
        if count > 1 and candidate.pattern_id == last_id:
            continue
        if not allow_open and candidate.category == PatternCategory.CONTROL_OPEN:
            continue
        return candidate
    return patterns[start]


def _close_statement(
    language: BaseLanguage,
    state: SynthesisState,
    config: SynthesisConfig,
    line_index: int,
    forced: bool,
) -> Statement:
    state.close_block()
    state.depth = min(state.open_blocks, config.max_indent_depth)
    state.last_pattern_id = language.close_pattern.pattern_id
    if language.BLOCK_CLOSE:
        state.last_visible_id = state.last_pattern_id
    return Statement(
        pattern_id=language.close_pattern.pattern_id,
        category=PatternCategory.CONTROL_CLOSE,
        text=language.BLOCK_CLOSE,
        depth=state.depth,
        line_index=line_index,
        forced=forced,
    )


def _synthesize_line(
    line: str,
    line_index: int,
    language: BaseLanguage,
    draw: Draw,
    state: SynthesisState,
    config: SynthesisConfig,
) -> list[Statement]:
    ctx = PatternContext(
        draw=draw,
        pools=language.POOLS,
        subject=make_identifier(subject_words(line)),
        phrase=make_identifier(line, rules=_PHRASE_RULES).replace("_", " "),
    )
    jitter = draw.below(config.max_indent_depth + 1)
    count = draw.between(config.min_statements_per_line, config.max_statements_per_line)

    statements: list[Statement] = []
    for _ in range(count):
        close_allowed = (
            state.open_blocks > 0
            and state.last_pattern_id != language.close_pattern.pattern_id
        )
        if close_allowed and draw.chance(config.close_probability_percent):
            statements.append(
                _close_statement(language, state, config, line_index, forced=False)
            )
            continue

        pattern = _pick_pattern(
            draw,
            language.patterns,
            state.last_visible_id,
            allow_open=state.open_blocks < config.max_open_blocks,
        )
        state.depth = min(config.max_indent_depth, max(state.open_blocks, jitter))
        statements.append(
            Statement(
                pattern_id=pattern.pattern_id,
                category=pattern.category,
                text=pattern.render(ctx),
                depth=state.depth,
                line_index=line_index,
            )
        )
        state.last_pattern_id = pattern.pattern_id
        state.last_visible_id = pattern.pattern_id
        if pattern.category == PatternCategory.CONTROL_OPEN:
            state.open_block()
    return statements


def _flush(
    language: BaseLanguage, state: SynthesisState, config: SynthesisConfig, line_index: int
) -> list[Statement]:
    """Close every block still open at the end of the buffer."""
    flushed: list[Statement] = []
    while state.open_blocks > 0:
        flushed.append(_close_statement(language, state, config, line_index, forced=True))
    return flushed


def _run(
    text: str,
    language: BaseLanguage,
    mode: SynthesisMode,
    rng: Optional[random.Random],
    config: SynthesisConfig,
) -> list[_Entry]:
    lines = _split_lines(text)
    state = SynthesisState()
    shared_draw = Draw(rng or random.Random()) if mode == SynthesisMode.RANDOM else None

    entries: list[_Entry] = []
    for index, line in enumerate(lines):
        if not line.strip():
            entries.append(None)
            continue
        draw = shared_draw or Draw.seeded(line_seed(line, index))
        entries.extend(_synthesize_line(line, index, language, draw, state, config))
    entries.extend(_flush(language, state, config, len(lines) - 1))
    logger.debug(
        "Synthesized %d lines into %d statements (%s, %s)",
        len(lines),
        sum(1 for e in entries if e is not None),
        language.LANGUAGE_ID,
        mode.value,
    )
    return entries


def _placeholder_statement(language: BaseLanguage) -> Statement:
    return Statement(
        pattern_id="comment",
        category=PatternCategory.LITERAL,
        text=language.empty_placeholder(),
        depth=0,
        line_index=0,
    )


def synthesize_statements(
    text: str,
    language_id: str,
    mode: Union[str, SynthesisMode] = SynthesisMode.SEEDED,
    rng: Optional[random.Random] = None,
    config: Optional[SynthesisConfig] = None,
) -> list[Statement]:
    """Synthesize *text* and return the statements behind the output.

    Blank lines are not represented; see :func:`synthesize` for the text form.

    Raises:
        ValueError: If *mode* is not ``"seeded"`` or ``"random"``.
    """
    synthesis_mode = SynthesisMode(mode)
    language = resolve_language(language_id)
    if not text.strip():
        return [_placeholder_statement(language)]
    entries = _run(text, language, synthesis_mode, rng, config or SynthesisConfig())
    return [entry for entry in entries if entry is not None]


def synthesize(
    text: str,
    language_id: str,
    mode: Union[str, SynthesisMode] = SynthesisMode.SEEDED,
    rng: Optional[random.Random] = None,
    config: Optional[SynthesisConfig] = None,
) -> str:
    """Turn arbitrary prose into plain, newline-joined pseudo-code.

    Args:
        text: Author text; may be empty or contain any characters.
        language_id: Target language id (e.g. ``"javascript"``). Unknown ids
            fall back to the generic pattern set.
        mode: ``"seeded"`` derives every draw from a hash of the line and its
            index, so identical input gives identical output. ``"random"``
            draws from *rng*.
        rng: Random source for ``"random"`` mode; a fresh one when omitted.
        config: Bounds on depth, density and block closing.

    Returns:
        Code text without markup. Blank input lines become blank output
        lines; empty input becomes a single comment line.

    Raises:
        ValueError: If *mode* is not ``"seeded"`` or ``"random"``.
    """
    synthesis_mode = SynthesisMode(mode)
    language = resolve_language(language_id)
    if not text.strip():
        return language.empty_placeholder()

    entries = _run(text, language, synthesis_mode, rng, config or SynthesisConfig())
    out: list[str] = []
    for entry in entries:
        if entry is None:
            out.append("")
        elif entry.text:
            out.append(f"{language.INDENT_UNIT * entry.depth}{entry.text}")
    return "\n".join(out)
