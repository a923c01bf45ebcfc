"""Assemble the final commit message from parsed parts."""

from commitgen.commit.constants import DEFAULT_DESCRIPTION, SUMMARY_MAX_LENGTH
from commitgen.commit.inference import extract_ticket, normalize_commit_type
from commitgen.commit.models import Message, Parts
from commitgen.commit.sanitize import (
    sanitize_body,
    sanitize_description,
    sanitize_summary,
)
from commitgen.text import truncate


def build_message(branch: str, parts: Parts) -> Message:
    """Combine branch and parts into the final message.

    Format:
        <ticket> [<type>] <description>

        <body>

    Args:
        branch: The current branch name.
        parts: Raw or normalized parts.

    Returns:
        The assembled Message. The headline is never empty for a non-empty
        ticket, since the description always defaults.
    """
    ticket = extract_ticket(branch)
    commit_type = normalize_commit_type(parts.commit_type)
    summary = sanitize_summary(parts.summary)

    description = (
        sanitize_description(parts.description)
        or sanitize_description(summary)
        or DEFAULT_DESCRIPTION
    )

    if not summary:
        summary = truncate(description, SUMMARY_MAX_LENGTH)

    body = sanitize_body(parts.body, summary)
    headline = f"{ticket} [{commit_type}] {description}".strip()

    return Message(headline=headline, body=body)
