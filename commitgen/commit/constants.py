"""Constants for the commitgen commit module.

Contains:
- COMMIT_TYPES: The fixed commit type enumeration
- COMMIT_TYPE_SYNONYMS: Synonym table, in matching priority order
- FALLBACK_KEYWORDS: Keywords scanned in free-form output, in priority order
- Field length limits and default phrases
"""

# Valid commit types
COMMIT_TYPES = [
    "feat",
    "fix",
    "perf",
    "refactor",
    "docs",
    "test",
    "build",
    "chore",
    "ci",
]

# Declaration order is the prefix-matching priority order.
COMMIT_TYPE_SYNONYMS = {
    "feat": "feat",
    "feature": "feat",
    "fix": "fix",
    "bugfix": "fix",
    "perf": "perf",
    "refactor": "refactor",
    "docs": "docs",
    "doc": "docs",
    "test": "test",
    "tests": "test",
    "build": "build",
    "chore": "chore",
    "ci": "ci",
}

FALLBACK_KEYWORDS = ["fix", "feat", "perf", "refactor", "docs", "test", "build", "ci"]

DEFAULT_COMMIT_TYPE = "chore"
DEFAULT_DESCRIPTION = "update project files"
UNKNOWN_TICKET = "unknown"

DESCRIPTION_MAX_LENGTH = 72
SUMMARY_MAX_LENGTH = 100
BODY_MAX_LENGTH = 300
