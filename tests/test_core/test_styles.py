"""Tests for underline variants and style strings."""

from link_colors.core.styles import (
    UNDERLINE_OFFSET_PX,
    UNDERLINE_STYLES,
    UNDERLINE_THICKNESS_PX,
    UnderlineStyle,
    style_string,
    underline_for_color,
)


class TestUnderlineForColor:
    """Tests for underline_for_color function."""

    def test_values_in_range(self):
        for color in ("#ff5252", "#448aff", "#69f0ae", "#000000"):
            underline = underline_for_color(color)
            assert underline.style in UNDERLINE_STYLES
            assert underline.thickness in UNDERLINE_THICKNESS_PX
            assert underline.offset in UNDERLINE_OFFSET_PX

    def test_deterministic_and_case_insensitive(self):
        assert underline_for_color("#FF5252") == underline_for_color("#ff5252")

    def test_varies_across_colors(self):
        colors = [f"#{i:02x}{i:02x}80" for i in range(0, 256, 8)]
        styles = {underline_for_color(c).style for c in colors}
        assert len(styles) > 1


class TestStyleString:
    """Tests for style_string function."""

    def test_forces_color(self):
        css = style_string("#ff5252")
        assert "color: #ff5252 !important;" in css
        assert "-webkit-text-fill-color: #ff5252 !important;" in css
        assert "--link-color: #ff5252 !important;" in css
        assert "--link-external-color: #ff5252 !important;" in css
        assert "font-weight: bold;" in css
        assert "text-decoration" not in css

    def test_with_underline(self):
        css = style_string("#ff5252", UnderlineStyle("dotted", 2, 3))
        assert "text-decoration-style: dotted !important;" in css
        assert "text-decoration-thickness: 2px !important;" in css
        assert "text-underline-offset: 3px !important;" in css
        assert "text-decoration-color: #ff5252 !important;" in css
