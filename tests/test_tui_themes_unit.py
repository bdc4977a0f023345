#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from interface.tui_themes import (
    THEMES,
    DEFAULT_THEME,
    get_theme_palette,
    build_style,
)


class TestThemes:
    """Tests for THEMES constant."""

    def test_themes_has_default_theme(self):
        assert DEFAULT_THEME in THEMES

    def test_themes_has_expected_themes(self):
        assert "dark-olive" in THEMES
        assert "dark-contrast" in THEMES

    def test_theme_structure(self):
        """Every theme styles every class the renderers emit."""
        required_keys = {
            "",
            "text",
            "text.dim",
            "text.dimmer",
            "selected",
            "selected.unfocused",
            "header",
            "border",
            "border.focus",
            "prompt",
            "prompt.value",
            "prompt.counter",
            "prompt.counter.full",
            "bindings",
            "error",
        }
        for theme_name, theme_dict in THEMES.items():
            missing = required_keys - set(theme_dict.keys())
            assert not missing, f"Theme {theme_name} missing keys: {missing}"


class TestGetThemePalette:
    """Tests for get_theme_palette function."""

    def test_get_theme_palette_existing_theme(self):
        palette = get_theme_palette("dark-contrast")
        assert palette == THEMES["dark-contrast"]

    def test_get_theme_palette_returns_copy(self):
        palette1 = get_theme_palette("dark-olive")
        palette2 = get_theme_palette("dark-olive")
        assert palette1 == palette2
        assert palette1 is not palette2
        assert palette1 is not THEMES["dark-olive"]

    def test_get_theme_palette_unknown_theme_falls_back(self):
        default_palette = get_theme_palette(DEFAULT_THEME)
        unknown_palette = get_theme_palette("non-existent-theme")
        assert unknown_palette == default_palette
        assert unknown_palette is not default_palette


class TestBuildStyle:
    """Tests for build_style function."""

    def test_build_style_all_themes(self):
        for theme_name in THEMES.keys():
            style = build_style(theme_name)
            assert style.style_rules

    def test_build_style_unknown_theme_falls_back(self):
        assert build_style("non-existent-theme").style_rules == build_style(DEFAULT_THEME).style_rules
