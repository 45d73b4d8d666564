"""Token stream types, reference tokenizer and link scan state machine."""

from link_colors.scanning.tokens import (
    Annotation,
    Role,
    Token,
    TokenKind,
    classify_node_type,
)
from link_colors.scanning.tokenizer import tokenize
from link_colors.scanning.scanner import LinkScanner, ScanState, scan_tokens

__all__ = [
    "Annotation",
    "Role",
    "Token",
    "TokenKind",
    "classify_node_type",
    "tokenize",
    "LinkScanner",
    "ScanState",
    "scan_tokens",
]
