"""Link scan state machine.

Walks a token stream in document order and emits Target/Alias annotations
for every link construct. The target color is re-derived each time the
target text grows, so the color follows the text while it is being typed.
Alias text is never hashed; it inherits the target's color.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from link_colors.core.colors import ColorSession, assign_color
from link_colors.scanning.tokens import Annotation, Role, Token, TokenKind

if TYPE_CHECKING:
    from link_colors.config import Settings

EMBED_MARKER = "!"
LITERAL_LINK_END = "]]"
LITERAL_SEPARATOR = "|"


@dataclass
class ScanState:
    """Mutable state of one rebuild pass."""

    in_link: bool = False
    is_embed: bool = False
    has_separator: bool = False
    target_buffer: str = ""
    target_color: Optional[str] = None

    def enter_link(self, is_embed: bool) -> None:
        self.in_link = True
        self.is_embed = is_embed
        self.has_separator = False
        self.target_buffer = ""
        self.target_color = None

    def leave_link(self) -> None:
        self.in_link = False
        self.is_embed = False
        self.has_separator = False
        self.target_buffer = ""
        self.target_color = None


class LinkScanner:
    """Single rebuild pass over one or more token ranges.

    Create a new scanner for every rebuild; the state carries over between
    the visible ranges fed to the same instance.

    Args:
        settings: Coloring settings
        dark_mode: True when rendering against a dark background
        session: Color session shared across rebuilds
        document: Full document text, used to look up the character before a
            link start (optional)
    """

    def __init__(self, settings: "Settings", dark_mode: bool, session: ColorSession,
                 document: Optional[str] = None):
        self.settings = settings
        self.dark_mode = dark_mode
        self.session = session
        self.document = document
        self.state = ScanState()
        self._previous: Optional[Token] = None

    def _color(self, text: str) -> Optional[str]:
        return assign_color(text, self.settings, self.dark_mode, self.session)

    def _preceded_by_embed_marker(self, token: Token) -> bool:
        if token.text.startswith(EMBED_MARKER):
            return True
        if self.document is not None:
            return token.span_start > 0 and self.document[token.span_start - 1] == EMBED_MARKER
        previous = self._previous
        return (previous is not None
                and previous.span_end == token.span_start
                and previous.text.endswith(EMBED_MARKER))

    def feed(self, token: Token) -> Optional[Annotation]:
        """Advance the state machine by one token.

        Returns:
            Annotation for the token's span, or None
        """
        try:
            return self._step(token)
        finally:
            self._previous = token

    def _step(self, token: Token) -> Optional[Annotation]:
        state = self.state

        if token.kind == TokenKind.LINK_START:
            state.enter_link(self._preceded_by_embed_marker(token))
            return None

        if not state.in_link:
            return None

        if token.kind == TokenKind.LINK_END or LITERAL_LINK_END in token.text:
            state.leave_link()
            return None

        if state.is_embed:
            return None

        if "\n" in token.text:
            # Unterminated link: stop before coloring trailing document text
            state.leave_link()
            return None

        is_separator = token.kind == TokenKind.SEPARATOR or token.text == LITERAL_SEPARATOR
        if is_separator:
            if not state.has_separator:
                state.has_separator = True
                state.target_color = self._color(state.target_buffer)
            return None

        if token.kind != TokenKind.CONTENT:
            return None

        if not state.has_separator:
            state.target_buffer += token.text
            color = self._color(state.target_buffer)
            if color is None:
                return None
            return Annotation(token.span_start, token.span_end, Role.TARGET, color)

        if state.target_color is None:
            return None
        return Annotation(token.span_start, token.span_end, Role.ALIAS, state.target_color)

    def boundary(self, hidden_text: str) -> None:
        """Skip over document text that lies between two visible ranges.

        A link left open at the end of one range is abandoned when the
        skipped text contains a line break, as if the newline had been seen.
        """
        if "\n" in hidden_text and self.state.in_link:
            self.state.leave_link()
        self._previous = None

    def scan(self, tokens: Iterable[Token]) -> Iterator[Annotation]:
        """Feed ``tokens`` in order, yielding annotations as they are produced."""
        for token in tokens:
            annotation = self.feed(token)
            if annotation is not None:
                yield annotation


def scan_tokens(tokens: Iterable[Token], settings: "Settings", dark_mode: bool,
                session: ColorSession, document: Optional[str] = None) -> List[Annotation]:
    """Run a fresh scanner over ``tokens`` and collect its annotations."""
    scanner = LinkScanner(settings, dark_mode, session, document=document)
    return list(scanner.scan(tokens))
