"""Deterministic color assignment for link targets.

A target's color is derived in three steps:

1. hash the normalized text with the configured strategy;
2. pick a base palette slot, starting at ``hash % len(palette)`` and moving to
   the least-used slot so colors spread evenly over the palette;
3. perturb the base color in HSL space (hue fan driven by slot usage, small
   hash-driven wobble, clamped saturation/lightness) so texts sharing a slot
   still render differently.

Assigned colors are memoized in a ``ColorSession`` and never change for the
lifetime of that session.
"""

import colorsys
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

import numpy as np
from matplotlib.colors import to_hex, to_rgb

from link_colors.core.hashing import compute_hash, djb2
from link_colors.core.logging_utils import get_logger
from link_colors.core.normalize import normalize_text
from link_colors.core.palettes import get_palette_colors, mode_name, resolve_palette_name

if TYPE_CHECKING:
    from link_colors.config import Settings


# Hue fan: degrees per step, and the cap on the total offset
HUE_FAN_STEP = 15.0
HUE_FAN_MAX = 60.0
HUE_WOBBLE = 10.0

SATURATION_RANGE = (50.0, 95.0)

# Lightness target and clamp per display mode (percent)
LIGHTNESS_TARGET = {'dark': 75.0, 'light': 35.0}
LIGHTNESS_RANGE = {'dark': (60.0, 90.0), 'light': (20.0, 50.0)}
LIGHTNESS_PULL = 0.5

VARIANT_SUFFIX = "|v"

CacheKey = Tuple[str, str, str]
SlotKey = Tuple[str, str, int]


class ColorSession:
    """Session-wide color memo and palette-slot usage counters.

    One instance lives for the lifetime of the running host and is passed to
    every ``assign_color`` call. Not thread-safe: concurrent rebuilds need
    their own session or external locking.
    """

    def __init__(self):
        self.text_colors: Dict[CacheKey, str] = {}
        self.slot_usage: Dict[SlotKey, int] = {}

    def __len__(self) -> int:
        return len(self.text_colors)

    def lookup(self, key: CacheKey) -> Optional[str]:
        return self.text_colors.get(key)

    def store(self, key: CacheKey, color: str) -> None:
        self.text_colors[key] = color

    def usage(self, palette: str, mode: str, slot: int) -> int:
        return self.slot_usage.get((palette, mode, slot), 0)

    def increment_usage(self, palette: str, mode: str, slot: int) -> int:
        """Increment a slot's usage and return the count before incrementing."""
        key = (palette, mode, slot)
        previous = self.slot_usage.get(key, 0)
        self.slot_usage[key] = previous + 1
        return previous

    def usage_counts(self, palette: str, dark_mode: bool) -> List[int]:
        """Per-slot usage for a palette and display mode."""
        palette = resolve_palette_name(palette)
        colors = get_palette_colors(palette, dark_mode)
        mode = mode_name(dark_mode)
        return [self.usage(palette, mode, i) for i in range(len(colors))]


def select_slot(session: ColorSession, palette: str, mode: str,
                start: int, size: int) -> int:
    """
    Pick the least-used slot, scanning every index once from ``start``.

    Ties keep the candidate closest to ``start``.
    """
    best_index = start % size
    best_usage = session.usage(palette, mode, best_index)
    for offset in range(1, size):
        index = (start + offset) % size
        usage = session.usage(palette, mode, index)
        if usage < best_usage:
            best_index, best_usage = index, usage
    return best_index


def hue_fan_offset(usage: int) -> float:
    """Hue offset for a slot already used ``usage`` times.

    0, +15, -15, +30, -30, ... capped at 60 degrees.
    """
    step = (usage + 1) // 2
    magnitude = min(HUE_FAN_STEP * step, HUE_FAN_MAX)
    return magnitude if usage % 2 == 1 else -magnitude


def hex_to_hsl(color: str) -> Tuple[float, float, float]:
    """Convert a hex color to (hue degrees, saturation %, lightness %)."""
    r, g, b = to_rgb(color)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360.0, s * 100.0, l * 100.0


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert (hue degrees, saturation %, lightness %) to ``#rrggbb``."""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0,
                                  lightness / 100.0,
                                  saturation / 100.0)
    rgb = np.clip([r, g, b], 0.0, 1.0)
    return to_hex(rgb)


def make_variant(base_color: str, text: str, usage: int, dark_mode: bool) -> str:
    """
    Derive a variant of ``base_color`` for ``text``.

    Args:
        base_color: Palette color at the selected slot
        text: Normalized target text (seeds the jitter)
        usage: How many times the slot was used before this assignment
        dark_mode: Selects the lightness target and clamp

    Returns:
        Variant color as ``#rrggbb``
    """
    mode = mode_name(dark_mode)
    seed = djb2(text + VARIANT_SUFFIX)

    hue, saturation, lightness = hex_to_hsl(base_color)

    wobble = (seed & 0xFF) / 255.0 * (2 * HUE_WOBBLE) - HUE_WOBBLE
    hue = hue + hue_fan_offset(usage) + wobble

    saturation_jitter = ((seed >> 8) & 0xF) - 8
    saturation = float(np.clip(saturation + saturation_jitter, *SATURATION_RANGE))

    target = LIGHTNESS_TARGET[mode]
    lightness_jitter = ((seed >> 12) & 0x7) - 3
    lightness = lightness + (target - lightness) * LIGHTNESS_PULL + lightness_jitter
    lightness = float(np.clip(lightness, *LIGHTNESS_RANGE[mode]))

    return hsl_to_hex(hue, saturation, lightness)


def assign_color(raw_text: str, settings: "Settings", dark_mode: bool,
                 session: ColorSession) -> Optional[str]:
    """
    Return the color for a link target.

    Args:
        raw_text: Target text as it appears in the document
        settings: Palette, prefix and hash-mode settings
        dark_mode: True when rendering against a dark background
        session: Color memo and slot usage shared across rebuilds

    Returns:
        ``#rrggbb`` color, or None if the text normalizes to nothing
    """
    text = normalize_text(raw_text, settings.ignore_prefix)
    if not text:
        return None

    palette = resolve_palette_name(settings.palette)
    mode = mode_name(dark_mode)
    key = (palette, mode, text)

    cached = session.lookup(key)
    if cached is not None:
        return cached

    text_hash = compute_hash(text, settings.hash_mode)
    colors = get_palette_colors(palette, dark_mode)

    slot = select_slot(session, palette, mode, text_hash % len(colors), len(colors))
    usage = session.increment_usage(palette, mode, slot)

    color = make_variant(colors[slot], text, usage, dark_mode)
    session.store(key, color)

    logger = get_logger()
    if logger.debug_enabled:
        logger.debug(f"'{text}' -> {color} ({palette}/{mode} slot {slot}, usage {usage})")
    return color
