"""Theme Registry — named colour profiles for highlighted output."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from . import constants

logger = logging.getLogger(__name__)

# Colours land inside HTML style attributes and CSS rules.
HexColor = Annotated[str, Field(pattern=r"^#[0-9A-Fa-f]{3,8}$")]


class Theme(BaseModel):
    """Immutable set of colour roles, one per token kind plus page colours."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str = ""
    background: HexColor
    text: HexColor
    keyword: HexColor
    string: HexColor
    number: HexColor
    comment: HexColor
    function: HexColor
    property: HexColor
    operator: HexColor
    punctuation: HexColor
    accent: HexColor


_BUILTIN_THEMES: tuple[Theme, ...] = (
    Theme(
        name="matrix-green",
        display_name="Matrix Green",
        background="#000000",
        text="#00FFAA",
        keyword="#00FF00",
        string="#FF00FF",
        number="#FFFF00",
        comment="#666666",
        function="#00FFFF",
        property="#FF69B4",
        operator="#FF4444",
        punctuation="#AA88FF",
        accent="#FF8800",
    ),
    Theme(
        name="neon-purple",
        display_name="Neon Purple",
        background="#0a0a0f",
        text="#E040FB",
        keyword="#FF00FF",
        string="#BA68C8",
        number="#F48FB1",
        comment="#7B1FA2",
        function="#FF00FF",
        property="#FF80FF",
        operator="#E040FB",
        punctuation="#CE93D8",
        accent="#FF80FF",
    ),
    Theme(
        name="tokyo-nights",
        display_name="Tokyo Nights",
        background="#1a1b26",
        text="#c0caf5",
        keyword="#bb9af7",
        string="#9ece6a",
        number="#ff9e64",
        comment="#565f89",
        function="#7aa2f7",
        property="#2ac3de",
        operator="#89ddff",
        punctuation="#7dcfff",
        accent="#2ac3de",
    ),
    Theme(
        name="synthwave",
        display_name="Synthwave",
        background="#2b213a",
        text="#f92aad",
        keyword="#fede5d",
        string="#72f1b8",
        number="#ff8b39",
        comment="#848bbd",
        function="#f97e72",
        property="#fede5d",
        operator="#ff8b39",
        punctuation="#b893ce",
        accent="#fede5d",
    ),
    Theme(
        name="hacker-terminal",
        display_name="Hacker Terminal",
        background="#1c1c1c",
        text="#FFB86C",
        keyword="#FF5555",
        string="#F1FA8C",
        number="#BD93F9",
        comment="#6272A4",
        function="#50FA7B",
        property="#8BE9FD",
        operator="#FF79C6",
        punctuation="#F8F8F2",
        accent="#8BE9FD",
    ),
)


class ThemeRegistry:
    """Read-only lookup of themes by name."""

    def __init__(self, themes: Iterable[Theme]):
        table: dict[str, Theme] = {}
        for theme in themes:
            if theme.name in table:
                raise ValueError(f"Duplicate theme name: {theme.name}")
            table[theme.name] = theme
        self._themes: Mapping[str, Theme] = MappingProxyType(table)

    @classmethod
    def from_json(cls, path: Path, include_builtin: bool = True) -> ThemeRegistry:
        """Load a JSON list of theme objects, optionally after the built-ins.

        Raises:
            pydantic.ValidationError: If an entry is missing a colour role.
            ValueError: If two themes share a name.
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        loaded = [Theme.model_validate(entry) for entry in raw]
        logger.info("Loaded %d themes from %s", len(loaded), path)
        base = list(_BUILTIN_THEMES) if include_builtin else []
        return cls(base + loaded)

    def get(self, theme_id: str) -> Optional[Theme]:
        return self._themes.get(theme_id)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._themes.keys())

    def __contains__(self, theme_id: object) -> bool:
        return theme_id in self._themes

    def __len__(self) -> int:
        return len(self._themes)


DEFAULT_REGISTRY = ThemeRegistry(_BUILTIN_THEMES)


def get_theme(theme_id: str) -> Optional[Theme]:
    """Look up a built-in theme; ``None`` when *theme_id* is not registered."""
    return DEFAULT_REGISTRY.get(theme_id)


def default_theme() -> Theme:
    return DEFAULT_REGISTRY.get(constants.DEFAULT_THEME)


def theme_css(theme: Theme, scope: str = ".transmute-preview") -> str:
    """Stylesheet for a preview container and its ``tok-*`` spans."""
    roles = (
        "comment",
        "string",
        "number",
        "keyword",
        "function",
        "property",
        "operator",
        "punctuation",
    )
    rules = [
        f"{scope} {{\n"
        f"  background-color: {theme.background};\n"
        f"  color: {theme.text};\n"
        f"  border: 2px solid {theme.accent};\n"
        f"  border-radius: 8px;\n"
        f"  padding: 1.5rem;\n"
        f"  overflow: auto;\n"
        f"}}",
        f"{scope} pre {{\n  margin: 0;\n  white-space: pre-wrap;\n  line-height: 1.6;\n}}",
    ]
    rules.extend(
        f"{scope} .tok-{role} {{ color: {getattr(theme, role)}; }}" for role in roles
    )
    return "\n".join(rules) + "\n"
