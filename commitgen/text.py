"""Text normalization helpers.

Contains pure, stateless functions used wherever a message field is produced:
- condense_spaces: Collapse whitespace runs to a single space
- truncate: Shorten text to a rune budget, ending with an ellipsis
- trim_lines: Split text into non-empty, stripped lines
- trim_to: Limit a diff to a byte budget, cutting on a line boundary
"""

import re

ELLIPSIS = "…"
DIFF_TRUNCATED_MARKER = "\n…[diff truncated]"

_WHITESPACE = re.compile(r"\s+")


def condense_spaces(text: str) -> str:
    """Collapse any run of whitespace characters into a single space.

    Args:
        text: The text to condense.

    Returns:
        The condensed text. Leading/trailing whitespace becomes a single space.
    """
    return _WHITESPACE.sub(" ", text)


def truncate(text: str, limit: int) -> str:
    """Shorten text to at most ``limit`` characters.

    Python strings are sequences of code points, so slicing never splits a
    multi-byte character.

    Args:
        text: The text to shorten.
        limit: Maximum number of characters in the result.

    Returns:
        The original text if it fits, otherwise the first ``limit - 1``
        characters followed by a single ellipsis character.
    """
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    return text[: limit - 1] + ELLIPSIS


def trim_lines(text: str) -> list[str]:
    """Split text on newlines, stripping each line and dropping empty ones.

    Args:
        text: Multi-line text (``\\r\\n`` line endings are accepted).

    Returns:
        The cleaned list of lines.
    """
    if not text:
        return []
    lines = text.replace("\r\n", "\n").split("\n")
    return [line.strip() for line in lines if line.strip()]


def trim_to(diff: str, max_bytes: int) -> str:
    """Limit a diff to ``max_bytes`` UTF-8 bytes.

    The cut backs up to the last newline inside the kept head when there is
    one, and a truncation marker is appended.

    Args:
        diff: The diff text.
        max_bytes: The byte budget. Values <= 0 disable trimming.

    Returns:
        The (possibly trimmed) diff.
    """
    encoded = diff.encode("utf-8")
    if max_bytes <= 0 or len(encoded) <= max_bytes:
        return diff

    head = encoded[:max_bytes]
    newline = head.rfind(b"\n")
    if newline > 0:
        head = head[:newline]

    return head.decode("utf-8", errors="ignore") + DIFF_TRUNCATED_MARKER
