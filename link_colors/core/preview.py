"""Palette swatch previews rendered with matplotlib.

Uses the non-interactive Agg backend so previews can be written from the
command line and in tests without a display.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import to_rgb

from link_colors.core.colors import ColorSession, assign_color
from link_colors.core.logging_utils import get_logger
from link_colors.core.palettes import get_palette_colors, mode_name, resolve_palette_name

if TYPE_CHECKING:
    from link_colors.config import Settings

# Page background per display mode, so swatches are judged in context
BACKGROUND = {'dark': "#1e1e1e", 'light': "#ffffff"}


def swatch_array(colors: Sequence[str], swatch_size: int = 32) -> np.ndarray:
    """
    Build an RGB image with one square swatch per color.

    Args:
        colors: Colors in any matplotlib format
        swatch_size: Edge length of each swatch in pixels

    Returns:
        Float array of shape (swatch_size, swatch_size * len(colors), 3)
    """
    if len(colors) == 0:
        return np.zeros((swatch_size, 0, 3))
    rgb = np.array([to_rgb(c) for c in colors])
    row = np.repeat(rgb[np.newaxis, :, :], swatch_size, axis=0)
    return np.repeat(row, swatch_size, axis=1)


def render_palette_preview(
    palette: str,
    dark_mode: bool,
    output_path: Optional[Path] = None,
    samples: Optional[List[str]] = None,
    settings: Optional["Settings"] = None,
    session: Optional[ColorSession] = None,
) -> np.ndarray:
    """
    Render a palette's base colors, plus assigned colors for sample texts.

    Args:
        palette: Palette name (unknown names fall back to the default)
        dark_mode: Which mode's color list to show
        output_path: PNG file to write (optional)
        samples: Link targets whose assigned colors are shown in a second row
        settings: Settings used to color the samples
        session: Color session for the samples (a fresh one by default)

    Returns:
        Swatch image of the base colors
    """
    palette = resolve_palette_name(palette)
    mode = mode_name(dark_mode)
    base_colors = list(get_palette_colors(palette, dark_mode))
    base = swatch_array(base_colors)

    if output_path is None:
        return base

    sample_colors = []
    if samples:
        if settings is None:
            from link_colors.config import Settings
            settings = Settings(palette=palette)
        session = session if session is not None else ColorSession()
        for text in samples:
            color = assign_color(text, settings, dark_mode, session)
            if color is not None:
                sample_colors.append((text, color))

    rows = 2 if sample_colors else 1
    fig, axes = plt.subplots(rows, 1, figsize=(max(6, len(base_colors) * 0.8), 1.6 * rows),
                             squeeze=False)
    try:
        fig.patch.set_facecolor(BACKGROUND[mode])

        ax = axes[0][0]
        ax.imshow(base)
        ax.set_title(f"{palette} ({mode})", color=base_colors[0])
        ax.set_axis_off()

        if sample_colors:
            ax = axes[1][0]
            ax.set_facecolor(BACKGROUND[mode])
            ax.set_xlim(0, len(sample_colors))
            ax.set_ylim(0, 1)
            for i, (text, color) in enumerate(sample_colors):
                ax.text(i + 0.5, 0.5, text, color=color, ha='center', va='center',
                        fontweight='bold')
            ax.set_axis_off()

        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, facecolor=fig.get_facecolor(), bbox_inches='tight')
    finally:
        plt.close(fig)
    get_logger().success(f"Saved preview to {output_path}")
    return base
