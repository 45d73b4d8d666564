"""Reference tokenizer for wikilink markdown.

Produces the token stream the link scanner consumes, for hosts without a
syntax tree of their own (and for the command-line tools):

- ``[[`` opens a link and ``]]`` closes it
- ``!`` directly before ``[[`` is an embed marker (formatting)
- ``|`` inside a link separates target and alias
- every newline is its own content token, which also ends any open link
"""

from typing import List, Optional

from link_colors.scanning.tokens import Token, TokenKind

LINK_OPEN = "[["
LINK_CLOSE = "]]"
EMBED_MARKER = "!"
SEPARATOR = "|"


def tokenize(document: str, start: int = 0, end: Optional[int] = None) -> List[Token]:
    """
    Split ``document[start:end]`` into tokens with absolute spans.

    Args:
        document: Full document text
        start: Range start offset (inclusive)
        end: Range end offset (exclusive), defaults to the document end

    Returns:
        Tokens in document order
    """
    end = len(document) if end is None else min(end, len(document))
    start = max(0, start)

    tokens: List[Token] = []
    in_link = False
    run_start = start
    i = start

    def flush(upto: int) -> None:
        if upto > run_start:
            tokens.append(Token(TokenKind.CONTENT, document[run_start:upto], run_start, upto))

    def emit(kind: TokenKind, length: int) -> None:
        tokens.append(Token(kind, document[i:i + length], i, i + length))

    while i < end:
        if document.startswith(EMBED_MARKER + LINK_OPEN, i, end):
            flush(i)
            emit(TokenKind.FORMATTING, 1)
            i += 1
            emit(TokenKind.LINK_START, 2)
            i += 2
            in_link = True
        elif document.startswith(LINK_OPEN, i, end):
            flush(i)
            emit(TokenKind.LINK_START, 2)
            i += 2
            in_link = True
        elif in_link and document.startswith(LINK_CLOSE, i, end):
            flush(i)
            emit(TokenKind.LINK_END, 2)
            i += 2
            in_link = False
        elif document[i] == "\n":
            flush(i)
            emit(TokenKind.CONTENT, 1)
            i += 1
            in_link = False
        elif in_link and document[i] == SEPARATOR:
            flush(i)
            emit(TokenKind.SEPARATOR, 1)
            i += 1
        else:
            i += 1
            continue
        run_start = i

    flush(end)
    return tokens
