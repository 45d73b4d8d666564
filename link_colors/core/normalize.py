"""Text normalization for link targets before hashing."""

PREFIX_SEPARATOR = " - "


def normalize_text(raw: str, ignore_prefix: bool = False) -> str:
    """
    Clean raw target text into a hash/color key.

    With ``ignore_prefix``, "Char - Pamela" reduces to "pamela": only the part
    after the last " - " is kept.

    Args:
        raw: Raw target text as typed in the document
        ignore_prefix: Drop everything up to the last " - " separator

    Returns:
        Trimmed, lowercased text. An empty string means "no color".
    """
    if not raw:
        return ""

    text = raw
    if ignore_prefix and PREFIX_SEPARATOR in text:
        text = text.rsplit(PREFIX_SEPARATOR, 1)[1]

    return text.strip().lower()
