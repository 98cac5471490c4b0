"""Token pools: immutable candidate names and literals per language."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from . import constants

VARIABLES = "variables"
FUNCTIONS = "functions"
TYPES = "types"
RECEIVERS = "receivers"
LITERALS = "literals"
STRINGS = "strings"

POOL_NAMES: tuple[str, ...] = (VARIABLES, FUNCTIONS, TYPES, RECEIVERS, LITERALS, STRINGS)


class TokenPool(BaseModel):
    """Named, read-only list of candidate strings scoped to a language."""

    model_config = ConfigDict(frozen=True)

    name: str
    language: str
    values: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.values)


BASE_VALUES: dict[str, tuple[str, ...]] = {
    VARIABLES: (
        "data",
        "result",
        "value",
        "item",
        "config",
        "options",
        "state",
        "content",
        "element",
        "response",
    ),
    FUNCTIONS: (
        "process",
        "handle",
        "update",
        "fetch",
        "render",
        "validate",
        "transform",
        "calculate",
        "initialize",
        "execute",
    ),
    TYPES: ("Task", "Goal", "Session", "Entry", "Record", "Buffer"),
    RECEIVERS: ("app", "store", "queue", "cache", "engine"),
    LITERALS: ("true", "false", "null"),
    STRINGS: ("ok", "done", "pending", "ready", "draft"),
}


def build_pools(
    language: str, overrides: dict[str, tuple[str, ...]] | None = None
) -> dict[str, TokenPool]:
    """Build the pool table for *language*, layering *overrides* on the base values."""
    values = {**BASE_VALUES, **(overrides or {})}
    return {
        name: TokenPool(name=name, language=language, values=values[name])
        for name in POOL_NAMES
    }


GENERIC_POOLS = build_pools(constants.GENERIC_LANGUAGE)
