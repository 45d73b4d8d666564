"""Hash strategies mapping normalized text to non-negative integers.

All strategies share the DJB2 rolling hash and differ in what they feed it:

- strict-full: acronym + full text + length (maximum uniqueness)
- strict-acronym: the acronym only (same word initials -> same hash)
- similarity: additive bigram votes (similar spelling -> nearby hash)
"""

from enum import Enum
from typing import Dict

_MASK_32 = 0xFFFFFFFF
_DJB2_SEED = 5381

# Bit of each bigram's DJB2 hash used as that bigram's vote
_SIMILARITY_VOTE_BIT = 7


class HashMode(str, Enum):
    """Selectable hashing strategy."""

    STRICT_FULL = "strict-full"
    STRICT_ACRONYM = "strict-acronym"
    SIMILARITY = "similarity"


HASH_MODE_DESCRIPTIONS: Dict[HashMode, Dict[str, str]] = {
    HashMode.STRICT_FULL: {
        'name': 'Strict (Acronym + Length)',
        'description': 'Maximum uniqueness using acronyms, full text, and length. '
                       'Different words get different colors.',
    },
    HashMode.STRICT_ACRONYM: {
        'name': 'Strict (Acronym Only)',
        'description': 'Uses only first letters of words. '
                       'Similar structure words may share colors.',
    },
    HashMode.SIMILARITY: {
        'name': 'Similarity-Based',
        'description': 'Similar words get similar colors using shared letter pairs. '
                       'Great for related terms.',
    },
}


def djb2(text: str) -> int:
    """DJB2 rolling hash (h * 33 + code point), wrapped to unsigned 32 bits."""
    h = _DJB2_SEED
    for ch in text:
        h = (h * 33 + ord(ch)) & _MASK_32
    return h


def acronym(text: str) -> str:
    """Return the first character of each whitespace-separated word."""
    return "".join(word[0] for word in text.split())


def hash_strict_full(text: str) -> int:
    """Hash acronym + full text + decimal length."""
    seed = f"{acronym(text)}{text}{len(text)}"
    return djb2(seed)


def hash_strict_acronym(text: str) -> int:
    """Hash only the word initials, so "data science" == "design system"."""
    return djb2(acronym(text))


def hash_similarity(text: str) -> int:
    """
    Locality-preserving hash over overlapping character bigrams.

    Each bigram is folded through DJB2 and casts a 0/1 vote; the hash is the
    vote total. A one-character edit changes at most two bigrams and so moves
    the hash by at most 2, while unrelated strings spread out binomially.
    Texts shorter than two characters fall back to a plain DJB2 hash.
    """
    if len(text) < 2:
        return djb2(text)

    votes = 0
    for i in range(len(text) - 1):
        votes += (djb2(text[i:i + 2]) >> _SIMILARITY_VOTE_BIT) & 1
    return votes


_STRATEGIES = {
    HashMode.STRICT_FULL: hash_strict_full,
    HashMode.STRICT_ACRONYM: hash_strict_acronym,
    HashMode.SIMILARITY: hash_similarity,
}


def compute_hash(text: str, mode: HashMode) -> int:
    """Dispatch to the hash strategy for ``mode``."""
    return _STRATEGIES[HashMode(mode)](text)
