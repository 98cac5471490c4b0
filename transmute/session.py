"""Incremental synthesis of text as it is written.

Only text appended since the previous transformation is synthesized; each
transformation appends one code block. Timing (the quiet-period debounce)
stays with the caller, which calls :meth:`CodeHistory.flush` when it fires.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from .synth_types import SynthesisConfig, SynthesisMode
from .synthesizer import synthesize

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = "\n\n"


class CodeHistory:
    """Accumulates synthesized code blocks for one editing session."""

    def __init__(
        self,
        language_id: str,
        mode: Union[str, SynthesisMode] = SynthesisMode.SEEDED,
        rng: Optional[random.Random] = None,
        config: Optional[SynthesisConfig] = None,
    ):
        self.language_id = language_id
        self._mode = SynthesisMode(mode)
        self._rng = rng
        self._config = config
        self._blocks: list[str] = []
        self._transformed_length = 0
        self._last_tail = ""

    @property
    def blocks(self) -> tuple[str, ...]:
        return tuple(self._blocks)

    @property
    def code(self) -> str:
        return "\n".join(self._blocks)

    def update(self, text: str) -> bool:
        """Record the latest editor text; transform on a fresh paragraph break.

        Returns True when a new block was appended.
        """
        tail = text[-2:]
        triggered = tail == PARAGRAPH_BREAK and self._last_tail != PARAGRAPH_BREAK
        self._last_tail = tail
        if triggered:
            return self.flush(text)
        return False

    def flush(self, text: str) -> bool:
        """Synthesize whatever was appended since the last transformation."""
        if len(text) <= self._transformed_length:
            return False
        fresh = text[self._transformed_length :]
        self._transformed_length = len(text)
        if not fresh.strip():
            return False
        self._blocks.append(
            synthesize(fresh, self.language_id, self._mode, rng=self._rng, config=self._config)
        )
        logger.debug("Appended block %d (%d new chars)", len(self._blocks), len(fresh))
        return True

    def reset(self) -> None:
        self._blocks.clear()
        self._transformed_length = 0
        self._last_tail = ""
