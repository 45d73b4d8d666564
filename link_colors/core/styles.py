"""Underline variants and CSS style strings for colored link spans."""

from dataclasses import dataclass
from typing import Optional

from link_colors.core.hashing import djb2

UNDERLINE_STYLES = ("solid", "dashed", "dotted")
UNDERLINE_THICKNESS_PX = (1, 2, 3)
UNDERLINE_OFFSET_PX = (2, 3, 4)


@dataclass(frozen=True)
class UnderlineStyle:
    """Underline decoration used as an extra distinctness cue."""

    style: str
    thickness: int
    offset: int

    def css(self, color: str) -> str:
        """CSS declarations drawing this underline in ``color``."""
        return (
            f"text-decoration-line: underline !important; "
            f"text-decoration-style: {self.style} !important; "
            f"text-decoration-color: {color} !important; "
            f"text-decoration-thickness: {self.thickness}px !important; "
            f"text-underline-offset: {self.offset}px !important;"
        )

    def to_dict(self) -> dict:
        return {'style': self.style, 'thickness': self.thickness, 'offset': self.offset}


def underline_for_color(color: str) -> UnderlineStyle:
    """
    Derive an underline style from a final color.

    Stateless: the same color always gives the same underline, and the choice
    has no effect on color assignment.
    """
    h = djb2(color.lower())
    return UnderlineStyle(
        style=UNDERLINE_STYLES[h % len(UNDERLINE_STYLES)],
        thickness=UNDERLINE_THICKNESS_PX[(h >> 4) % len(UNDERLINE_THICKNESS_PX)],
        offset=UNDERLINE_OFFSET_PX[(h >> 8) % len(UNDERLINE_OFFSET_PX)],
    )


def style_string(color: str, underline: Optional[UnderlineStyle] = None) -> str:
    """
    Build the inline CSS applied to a colored span.

    The color is forced over theme link colors, including the CSS variables
    themes use for internal and external links.
    """
    declarations = [
        f"color: {color} !important;",
        f"-webkit-text-fill-color: {color} !important;",
        f"--link-color: {color} !important;",
        f"--link-external-color: {color} !important;",
        "font-weight: bold;",
    ]
    if underline is not None:
        declarations.append(underline.css(color))
    return " ".join(declarations)
