"""
Link Colors

Deterministic, visually distinct colors for wikilink targets, so every
reference to the same note renders in the same color.
"""

__version__ = "0.1.0"
__author__ = "Link Colors Contributors"

__all__ = [
    "assign_color",
    "ColorSession",
    "Settings",
    "build_annotations",
    "tokenize",
    "scan_tokens",
]


def __getattr__(name):
    """Lazy import so the CLI starts without loading every module."""
    if name == "assign_color":
        from link_colors.core.colors import assign_color
        return assign_color
    elif name == "ColorSession":
        from link_colors.core.colors import ColorSession
        return ColorSession
    elif name == "Settings":
        from link_colors.config import Settings
        return Settings
    elif name == "build_annotations":
        from link_colors.annotation.annotator import build_annotations
        return build_annotations
    elif name == "tokenize":
        from link_colors.scanning.tokenizer import tokenize
        return tokenize
    elif name == "scan_tokens":
        from link_colors.scanning.scanner import scan_tokens
        return scan_tokens
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
