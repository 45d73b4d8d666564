"""Palette registry: named base-color lists for dark and light display modes.

Each palette holds two equal-length ordered lists of ``#rrggbb`` colors. The
lists are ordered so neighbouring slots alternate hue families (red, blue,
orange, ...). Adding a palette only needs a new entry in ``PALETTES``.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

DEFAULT_PALETTE = "vibrant"

DARK = "dark"
LIGHT = "light"

_PALETTE_TABLE: Dict[str, Dict[str, Tuple[str, ...]]] = {
    'vibrant': {
        # Red -> Blue -> Orange -> Cyan -> Yellow -> Purple -> Pink -> Green
        DARK: ("#FF5252", "#448AFF", "#FFAB40", "#18FFFF", "#FFD740", "#E040FB", "#FF4081", "#69F0AE"),
        LIGHT: ("#D50000", "#2962FF", "#EF6C00", "#00B8D4", "#FFAB00", "#AA00FF", "#C51162", "#00C853"),
    },
    'dracula': {
        # Red -> Cyan -> Orange -> Purple -> Yellow -> Green -> Pink
        DARK: ("#FF5555", "#8BE9FD", "#FFB86C", "#BD93F9", "#F1FA8C", "#50FA7B", "#FF79C6"),
        LIGHT: ("#D92626", "#2692B8", "#CC7A00", "#7B53C9", "#B1BA5C", "#20AA4B", "#C04996"),
    },
    'gruvbox': {
        # Red -> Aqua -> Orange -> Blue -> Yellow -> Purple -> Green
        DARK: ("#cc241d", "#689d6a", "#d65d0e", "#458588", "#d79921", "#b16286", "#98971a"),
        LIGHT: ("#9d0006", "#427b58", "#af3a03", "#076678", "#b57614", "#8f3f71", "#79740e"),
    },
    'tokyonight': {
        # Red -> Blue -> Orange -> Teal -> Yellow -> Cyan -> Purple -> Green
        DARK: ("#f7768e", "#7aa2f7", "#ff9e64", "#1abc9c", "#e0af68", "#7dcfff", "#bb9af7", "#9ece6a"),
        LIGHT: ("#8c4351", "#34548a", "#965027", "#33635c", "#8f5e15", "#0f4b6e", "#5a4a78", "#485e30"),
    },
    'onedark': {
        # Red -> Blue -> Yellow -> Purple -> Green -> Cyan
        DARK: ("#e06c75", "#61afef", "#e5c07b", "#c678dd", "#98c379", "#56b6c2"),
        LIGHT: ("#e45649", "#4078f2", "#986801", "#a626a4", "#50a14f", "#0184bc"),
    },
    'synthwave': {
        # Red -> Cyan -> Yellow -> Purple -> Pink -> Green
        DARK: ("#fe4450", "#36f9f6", "#f7f230", "#b893ce", "#ff7edb", "#72f1b8"),
        LIGHT: ("#d60010", "#00a19d", "#bfba00", "#7d36a8", "#e4009e", "#199e63"),
    },
    'solarized': {
        # Red -> Blue -> Orange -> Cyan -> Magenta -> Green -> Yellow -> Violet
        DARK: ("#dc322f", "#268bd2", "#cb4b16", "#2aa198", "#d33682", "#859900", "#b58900", "#6c71c4"),
        LIGHT: ("#dc322f", "#268bd2", "#cb4b16", "#2aa198", "#d33682", "#859900", "#b58900", "#6c71c4"),
    },
    'nord': {
        # Red -> Dark Blue -> Orange -> Cyan -> Yellow -> Glacial Blue -> Green -> Teal
        DARK: ("#BF616A", "#5E81AC", "#D08770", "#88C0D0", "#EBCB8B", "#81A1C1", "#A3BE8C", "#8FBCBB"),
        LIGHT: ("#BF616A", "#3B566E", "#C2664D", "#4C7899", "#B58900", "#5E81AC", "#7A9663", "#4C7A82"),
    },
    'extended': {
        # Shuffled so red/blue/orange/green alternate
        DARK: (
            "#FF5252", "#40C4FF", "#FFD740", "#69F0AE", "#FF4081", "#7C4DFF", "#FF9E80", "#18FFFF",
            "#EA80FC", "#A7FFEB", "#FF8A80", "#82B1FF", "#FFE57F", "#CCFF90", "#E040FB", "#64FFDA",
            "#FFD180", "#80D8FF", "#FFFF8D", "#B388FF", "#FF80AB", "#F4FF81", "#EEFF41", "#CFD8DC",
        ),
        LIGHT: (
            "#C62828", "#0091EA", "#FF6D00", "#00C853", "#C51162", "#6200EA", "#BF360C", "#00B8D4",
            "#AA00FF", "#004D40", "#B71C1C", "#0D47A1", "#FF6F00", "#33691E", "#4A148C", "#00BFA5",
            "#E65100", "#01579B", "#F57F17", "#311B92", "#880E4F", "#827717", "#AEEA00", "#455A64",
        ),
    },
    'catppuccin': {
        # Red -> Blue -> Peach -> Teal -> Yellow -> Mauve -> Pink -> Green
        DARK: ("#ed8796", "#8aadf4", "#f5a97f", "#8bd5ca", "#eed49f", "#c6a0f6", "#f5bde6", "#a6da95"),
        LIGHT: ("#D20F39", "#1E66F5", "#FE640B", "#179299", "#DF8E1D", "#8839EF", "#EA76CB", "#40A02B"),
    },
    'oceanic_next': {
        # Red -> Blue -> Orange -> Cyan -> Yellow -> Purple -> Brown -> Green
        DARK: ("#ec5f67", "#6699cc", "#f99157", "#62b3b2", "#fac863", "#c594c5", "#ab7967", "#99c794"),
        LIGHT: ("#C43C44", "#36608F", "#D66B2F", "#3C7877", "#B58900", "#875487", "#70483C", "#5F875A"),
    },
    'kanagawa_dragon': {
        # Red -> Aqua -> Orange -> Blue -> Beige -> Violet -> Green -> Purple
        DARK: ("#c4746e", "#7aa89f", "#e6c384", "#658594", "#dcd7ba", "#957fb8", "#98bb6c", "#938aa9"),
        LIGHT: ("#A6453D", "#4A756D", "#C98F28", "#3C5766", "#8A8567", "#6A5094", "#5A7D35", "#5C5370"),
    },
    'iceberg': {
        # Red -> Blue -> Orange -> Cyan -> Purple -> Green -> Silver -> White
        DARK: ("#e27878", "#84a0c6", "#e2a478", "#89b8c2", "#a093c7", "#b4be82", "#c6c8d1", "#d2d4de"),
        LIGHT: ("#9E3636", "#325480", "#9E6036", "#3B6873", "#5D4D87", "#5E6B2E", "#5E6273", "#454752"),
    },
    'palenight': {
        # Red -> Blue -> Yellow -> Purple -> Pink -> Cyan -> Green -> Grey
        DARK: ("#f07178", "#82aaff", "#ffcb6b", "#c792ea", "#ff5370", "#89ddff", "#c3e88d", "#bfc7d5"),
        LIGHT: ("#A8383F", "#2C54AB", "#B37E19", "#703B94", "#AB223D", "#2B7A99", "#658A30", "#4D5663"),
    },
    'ayu_mirage': {
        # Coral -> Blue -> Orange -> Purple -> Green -> Sky -> Teal -> Ash
        DARK: ("#f28779", "#73d0ff", "#ffd580", "#d4bfff", "#bae67e", "#5ccfe6", "#95e6cb", "#cbccc6"),
        LIGHT: ("#A63D30", "#005F8F", "#B37A00", "#6B4EA8", "#5F8A24", "#00667A", "#2D7D62", "#5C5D57"),
    },
}


def validate_palettes(table: Mapping[str, Mapping[str, Tuple[str, ...]]]) -> None:
    """
    Validate palette definitions.

    Every palette must define both modes, each with at least one color, and
    both lists must have the same length.

    Args:
        table: Mapping of palette name to ``{'dark': [...], 'light': [...]}``

    Raises:
        ValueError: If any palette is malformed or the default is missing
    """
    if DEFAULT_PALETTE not in table:
        raise ValueError(f"Default palette '{DEFAULT_PALETTE}' is not registered")

    for name, modes in table.items():
        for mode in (DARK, LIGHT):
            if mode not in modes:
                raise ValueError(f"Palette '{name}' must define '{mode}' colors")
            if len(modes[mode]) == 0:
                raise ValueError(f"Palette '{name}' has no '{mode}' colors")
        if len(modes[DARK]) != len(modes[LIGHT]):
            raise ValueError(
                f"Palette '{name}' has {len(modes[DARK])} dark colors "
                f"but {len(modes[LIGHT])} light colors"
            )


validate_palettes(_PALETTE_TABLE)

# Read-only view; loaded once at import time
PALETTES: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    name: MappingProxyType(dict(modes)) for name, modes in _PALETTE_TABLE.items()
})


def palette_names() -> List[str]:
    """Return registered palette names in registry order."""
    return list(PALETTES.keys())


def mode_name(dark_mode: bool) -> str:
    """Map the host's dark-mode flag to a palette mode key."""
    return DARK if dark_mode else LIGHT


def resolve_palette_name(name: str) -> str:
    """Return ``name`` if registered, otherwise the default palette name."""
    return name if name in PALETTES else DEFAULT_PALETTE


def get_palette_colors(name: str, dark_mode: bool) -> Tuple[str, ...]:
    """
    Get the color list for a palette and display mode.

    Unknown palette names silently fall back to the default palette.

    Args:
        name: Palette name
        dark_mode: True for the dark-background list

    Returns:
        Tuple of ``#rrggbb`` colors (never empty)
    """
    return PALETTES[resolve_palette_name(name)][mode_name(dark_mode)]
