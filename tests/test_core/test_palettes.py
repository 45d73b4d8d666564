"""Tests for the palette registry."""

import pytest

from link_colors.core.palettes import (
    DEFAULT_PALETTE,
    PALETTES,
    get_palette_colors,
    mode_name,
    palette_names,
    resolve_palette_name,
    validate_palettes,
)


class TestRegistry:
    """Tests for the registered palettes."""

    def test_default_palette_registered(self):
        assert DEFAULT_PALETTE == 'vibrant'
        assert DEFAULT_PALETTE in PALETTES

    def test_all_palettes_have_equal_mode_lists(self):
        """Every palette has non-empty, equal-length dark and light lists."""
        for name, modes in PALETTES.items():
            assert len(modes['dark']) > 0, name
            assert len(modes['dark']) == len(modes['light']), name

    def test_colors_are_hex(self):
        for modes in PALETTES.values():
            for color in modes['dark'] + modes['light']:
                assert color.startswith('#')
                assert len(color) == 7

    def test_palette_names_order(self):
        names = palette_names()
        assert names[0] == 'vibrant'
        assert 'extended' in names
        assert len(names) == 15

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            PALETTES['custom'] = {'dark': ("#000000",), 'light': ("#ffffff",)}


class TestLookup:
    """Tests for palette lookup and fallback."""

    def test_mode_selection(self):
        assert get_palette_colors('vibrant', True)[0] == "#FF5252"
        assert get_palette_colors('vibrant', False)[0] == "#D50000"

    def test_unknown_palette_falls_back(self):
        assert resolve_palette_name('no-such-palette') == DEFAULT_PALETTE
        assert get_palette_colors('no-such-palette', True) == PALETTES[DEFAULT_PALETTE]['dark']

    def test_mode_name(self):
        assert mode_name(True) == 'dark'
        assert mode_name(False) == 'light'


class TestValidation:
    """Tests for validate_palettes."""

    def test_empty_mode_rejected(self):
        table = {'vibrant': {'dark': (), 'light': ()}}
        with pytest.raises(ValueError, match="has no 'dark' colors"):
            validate_palettes(table)

    def test_missing_mode_rejected(self):
        table = {'vibrant': {'dark': ("#000000",)}}
        with pytest.raises(ValueError, match="must define 'light'"):
            validate_palettes(table)

    def test_uneven_lists_rejected(self):
        table = {'vibrant': {'dark': ("#000000", "#111111"), 'light': ("#ffffff",)}}
        with pytest.raises(ValueError, match="2 dark colors but 1 light"):
            validate_palettes(table)

    def test_missing_default_rejected(self):
        table = {'other': {'dark': ("#000000",), 'light': ("#ffffff",)}}
        with pytest.raises(ValueError, match="Default palette"):
            validate_palettes(table)
