"""Commit message module for commitgen.

This package turns parsed model output into the final message:
- constants: commit types, synonym table, limits
- models: Parts, Message
- sanitize: sanitize_description, sanitize_summary, sanitize_body
- inference: extract_ticket, normalize_commit_type, detect_commit_type
- assemble: build_message
"""

from commitgen.commit.constants import (
    COMMIT_TYPES,
    COMMIT_TYPE_SYNONYMS,
    DEFAULT_COMMIT_TYPE,
    DEFAULT_DESCRIPTION,
)
from commitgen.commit.models import Message, Parts
from commitgen.commit.sanitize import (
    sanitize_body,
    sanitize_description,
    sanitize_summary,
)
from commitgen.commit.inference import (
    detect_commit_type,
    extract_ticket,
    normalize_commit_type,
)
from commitgen.commit.assemble import build_message


__all__ = [
    # Constants
    "COMMIT_TYPES",
    "COMMIT_TYPE_SYNONYMS",
    "DEFAULT_COMMIT_TYPE",
    "DEFAULT_DESCRIPTION",
    # Models
    "Message",
    "Parts",
    # Sanitation
    "sanitize_body",
    "sanitize_description",
    "sanitize_summary",
    # Inference
    "detect_commit_type",
    "extract_ticket",
    "normalize_commit_type",
    # Assembly
    "build_message",
]
