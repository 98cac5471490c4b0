"""Draw sources — the only place randomness enters synthesis."""

from __future__ import annotations

import hashlib
import random
from typing import Sequence

from . import constants


def line_seed(line: str, line_index: int) -> int:
    """Stable seed for one input line.

    SHA-1 based; independent of ``PYTHONHASHSEED``.
    """
    digest = hashlib.sha1(f"{line_index}:{line}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class Draw:
    """Integer draws backed by an explicit ``random.Random`` instance."""

    def __init__(self, rng: random.Random):
        self._rng = rng

    @classmethod
    def seeded(cls, seed: int) -> Draw:
        return cls(random.Random(seed))

    def below(self, limit: int) -> int:
        """Integer in ``[0, limit)``; 0 when *limit* is not positive."""
        if limit <= 0:
            return 0
        return self._rng.randrange(limit)

    def between(self, low: int, high: int) -> int:
        """Integer in ``[low, high]``."""
        return low + self.below(high - low + 1)

    def chance(self, percent: int) -> bool:
        return self.below(100) < percent

    def choice(self, values: Sequence[str]) -> str:
        if not values:
            return ""
        return values[self.below(len(values))]

    def hex_literal(self) -> str:
        """Fixed-width uppercase hex literal such as ``0x00FFA3``."""
        value = self.below(constants.HEX_LITERAL_LIMIT)
        return "0x" + format(value, "X").zfill(constants.HEX_LITERAL_WIDTH)
