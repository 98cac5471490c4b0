"""Tests for the theme registry, JSON loading and stylesheet generation."""

import json

import pytest
from pydantic import ValidationError

from transmute.themes import DEFAULT_REGISTRY, Theme, ThemeRegistry, default_theme, get_theme, theme_css

BUILTIN_IDS = ("matrix-green", "neon-purple", "tokyo-nights", "synthwave", "hacker-terminal")


def _theme_dict(name: str) -> dict:
    data = get_theme("matrix-green").model_dump()
    data["name"] = name
    data["display_name"] = name.title()
    return data


class TestBuiltinThemes:
    def test_all_builtins_registered(self):
        assert DEFAULT_REGISTRY.ids() == BUILTIN_IDS

    @pytest.mark.parametrize("theme_id", BUILTIN_IDS)
    def test_get_theme(self, theme_id):
        theme = get_theme(theme_id)
        assert theme is not None
        assert theme.name == theme_id

    def test_unknown_theme_is_none(self):
        assert get_theme("does-not-exist") is None

    def test_default_theme(self):
        assert default_theme().name == "matrix-green"

    def test_theme_is_frozen(self):
        with pytest.raises(ValidationError):
            default_theme().keyword = "#000000"

    def test_colour_must_be_hex(self):
        data = _theme_dict("sneaky")
        data["keyword"] = '#fff" onmouseover="alert(1)'
        with pytest.raises(ValidationError):
            Theme.model_validate(data)

    def test_short_hex_accepted(self):
        data = _theme_dict("short")
        data["keyword"] = "#0f0"
        assert Theme.model_validate(data).keyword == "#0f0"

    def test_missing_role_rejected(self):
        data = _theme_dict("broken")
        del data["keyword"]
        with pytest.raises(ValidationError):
            Theme.model_validate(data)


class TestThemeRegistry:
    def test_duplicate_names_rejected(self):
        theme = default_theme()
        with pytest.raises(ValueError, match="Duplicate theme name"):
            ThemeRegistry([theme, theme])

    def test_contains_and_len(self):
        assert "synthwave" in DEFAULT_REGISTRY
        assert "nope" not in DEFAULT_REGISTRY
        assert len(DEFAULT_REGISTRY) == len(BUILTIN_IDS)

    def test_from_json_adds_to_builtins(self, tmp_path):
        path = tmp_path / "themes.json"
        path.write_text(json.dumps([_theme_dict("ocean")]), encoding="utf-8")
        registry = ThemeRegistry.from_json(path)
        assert "ocean" in registry
        assert "matrix-green" in registry
        assert len(registry) == len(BUILTIN_IDS) + 1

    def test_from_json_without_builtins(self, tmp_path):
        path = tmp_path / "themes.json"
        path.write_text(json.dumps([_theme_dict("ocean")]), encoding="utf-8")
        registry = ThemeRegistry.from_json(path, include_builtin=False)
        assert registry.ids() == ("ocean",)

    def test_from_json_duplicate_of_builtin(self, tmp_path):
        path = tmp_path / "themes.json"
        path.write_text(json.dumps([_theme_dict("synthwave")]), encoding="utf-8")
        with pytest.raises(ValueError):
            ThemeRegistry.from_json(path)


    def test_from_json_rejects_non_hex_colour(self, tmp_path):
        data = _theme_dict("ocean")
        data["comment"] = "red; background: url(x)"
        path = tmp_path / "themes.json"
        path.write_text(json.dumps([data]), encoding="utf-8")
        with pytest.raises(ValidationError):
            ThemeRegistry.from_json(path)


class TestThemeCss:
    def test_rules_for_every_role(self):
        css = theme_css(default_theme())
        for role in ("comment", "string", "number", "keyword", "function", "property", "operator"):
            assert f".transmute-preview .tok-{role} {{" in css

    def test_uses_theme_colours(self):
        theme = get_theme("tokyo-nights")
        css = theme_css(theme, scope="#preview")
        assert f"background-color: {theme.background};" in css
        assert f"#preview .tok-keyword {{ color: {theme.keyword}; }}" in css
