"""Core functionality for link coloring."""

from link_colors.core.palettes import PALETTES, DEFAULT_PALETTE, get_palette_colors, palette_names
from link_colors.core.normalize import normalize_text
from link_colors.core.hashing import HashMode, compute_hash, djb2
from link_colors.core.colors import ColorSession, assign_color
from link_colors.core.styles import UnderlineStyle, style_string, underline_for_color

__all__ = [
    "PALETTES",
    "DEFAULT_PALETTE",
    "get_palette_colors",
    "palette_names",
    "normalize_text",
    "HashMode",
    "compute_hash",
    "djb2",
    "ColorSession",
    "assign_color",
    "UnderlineStyle",
    "style_string",
    "underline_for_color",
]
