"""Token and annotation types shared by the tokenizer and link scanner."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from link_colors.core.styles import UnderlineStyle


class TokenKind(str, Enum):
    """Kind of a token in the document stream."""

    LINK_START = "link-start"
    LINK_END = "link-end"
    SEPARATOR = "separator"
    FORMATTING = "formatting"
    CONTENT = "content"


class Role(str, Enum):
    """Part of a link construct an annotation covers."""

    TARGET = "target"
    ALIAS = "alias"


@dataclass(frozen=True)
class Token:
    """Immutable slice of the document with its kind.

    Attributes:
        kind: Structural role of the token.
        text: Token text as it appears in the document.
        span_start: Absolute start offset (inclusive).
        span_end: Absolute end offset (exclusive).
    """

    kind: TokenKind
    text: str
    span_start: int
    span_end: int


@dataclass(frozen=True)
class Annotation:
    """Colored span produced by a scan, consumed by the rendering layer."""

    span_start: int
    span_end: int
    role: Role
    color: str
    underline: Optional[UnderlineStyle] = field(default=None, compare=False)


def classify_node_type(node_type: str, text: str = "") -> TokenKind:
    """
    Map an editor syntax-node type name to a token kind.

    Node names are matched by substring, e.g. ``"formatting-link_formatting-link-start"``
    is a link start.

    Args:
        node_type: Syntax-node type name from the host tokenizer
        text: Node text (a bare "|" is a separator whatever its type)

    Returns:
        TokenKind for the node
    """
    if "formatting-link-start" in node_type:
        return TokenKind.LINK_START
    if "formatting-link-end" in node_type:
        return TokenKind.LINK_END
    if text == "|" or "formatting-link-pipe" in node_type:
        return TokenKind.SEPARATOR
    if "formatting" in node_type:
        return TokenKind.FORMATTING
    return TokenKind.CONTENT
