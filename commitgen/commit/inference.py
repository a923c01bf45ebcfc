"""Inference utilities for commitgen.

Contains functions for:
- Extracting ticket keys from branch names
- Canonicalizing free-text commit type tokens
- Detecting a commit type in free-form model output
"""

import re

from commitgen.commit.constants import (
    COMMIT_TYPE_SYNONYMS,
    DEFAULT_COMMIT_TYPE,
    FALLBACK_KEYWORDS,
    UNKNOWN_TICKET,
)
from commitgen.text import condense_spaces

TICKET_PATTERN = re.compile(r"^([A-Za-z]+-\d+)")


def extract_ticket(branch: str) -> str:
    """Extract the ticket key from a branch name.

    Examples:
    - "feature/TES-123-login-audit" -> "TES-123"
    - "main" -> "main"
    - "" -> "unknown"

    Args:
        branch: The branch name (or short commit hash when detached).

    Returns:
        The ticket key if the last path segment starts with one, otherwise the
        last path segment unchanged.
    """
    branch = condense_spaces(branch).strip()
    if not branch:
        return UNKNOWN_TICKET

    slash = branch.rfind("/")
    if slash != -1 and slash < len(branch) - 1:
        branch = branch[slash + 1:]

    match = TICKET_PATTERN.match(branch)
    if match:
        return match.group(1)
    return branch


def normalize_commit_type(token: str) -> str:
    """Canonicalize a commit type token.

    Lookup order:
    1. Exact synonym match ("feature" -> "feat", "bugfix" -> "fix")
    2. A synonym the token starts with ("fixes" -> "fix", "feat(api)" -> "feat")
    3. A synonym that starts with the token ("ref" -> "refactor")
    Prefix checks follow the synonym table's declaration order.

    Args:
        token: Free-text commit type.

    Returns:
        One of COMMIT_TYPES, "chore" when nothing matches.
    """
    candidate = token.strip().lower().strip("[]")
    if not candidate:
        return DEFAULT_COMMIT_TYPE

    if candidate in COMMIT_TYPE_SYNONYMS:
        return COMMIT_TYPE_SYNONYMS[candidate]

    for key, value in COMMIT_TYPE_SYNONYMS.items():
        if candidate.startswith(key):
            return value

    for key, value in COMMIT_TYPE_SYNONYMS.items():
        if key.startswith(candidate):
            return value

    return DEFAULT_COMMIT_TYPE


def detect_commit_type(raw: str) -> str:
    """Detect a commit type in free-form text.

    Keywords are tried in priority order (fix, feat, perf, refactor, docs,
    test, build, ci); the first one contained anywhere in the text wins.

    Args:
        raw: Free-form model output.

    Returns:
        The canonical commit type, "chore" when no keyword occurs.
    """
    lower = raw.lower()
    for keyword in FALLBACK_KEYWORDS:
        if keyword in lower:
            return normalize_commit_type(keyword)
    return DEFAULT_COMMIT_TYPE
