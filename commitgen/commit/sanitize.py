"""Field sanitation rules applied to every produced message field.

Contains:
- sanitize_description: Headline description (<= 72 chars, no trailing period)
- sanitize_summary: Summary line (<= 100 chars)
- sanitize_body: Multi-line body (each line <= 300 chars, no blank lines)
"""

from commitgen.commit.constants import (
    BODY_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    SUMMARY_MAX_LENGTH,
)
from commitgen.text import condense_spaces, trim_lines, truncate


def sanitize_description(text: str) -> str:
    """Sanitize the headline description.

    Args:
        text: The raw description.

    Returns:
        A single-line description of at most 72 characters without trailing
        periods, or an empty string.
    """
    text = condense_spaces(text).strip()
    if not text:
        return ""
    text = truncate(text, DESCRIPTION_MAX_LENGTH)
    return text.rstrip(".")


def sanitize_summary(text: str) -> str:
    """Sanitize the summary line.

    Args:
        text: The raw summary.

    Returns:
        A single-line summary of at most 100 characters, or an empty string.
    """
    text = condense_spaces(text).strip()
    if not text:
        return ""
    return truncate(text, SUMMARY_MAX_LENGTH)


def sanitize_body(body: str, fallback_seed: str) -> str:
    """Sanitize the message body.

    Args:
        body: The raw body text.
        fallback_seed: Text used when the body is blank (usually the summary).

    Returns:
        Newline-joined, condensed, non-empty lines each truncated to 300
        characters. Empty if both body and seed are blank.
    """
    body = body.strip()
    if not body:
        body = fallback_seed

    lines = []
    for line in trim_lines(body):
        line = condense_spaces(line).strip()
        if line:
            lines.append(truncate(line, BODY_MAX_LENGTH))

    return "\n".join(lines)
