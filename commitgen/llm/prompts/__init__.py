"""LLM prompt templates for commitgen.

This package contains the two outbound prompts:
- review: Plain-text code review with a "no issues" sentinel
- commit: Single JSON object with commit_type, description, summary, body
"""

from commitgen.llm.prompts.review import (
    NO_ISSUES_SENTINEL,
    REVIEW_PROMPT_TEMPLATE,
    build_review_prompt,
)
from commitgen.llm.prompts.commit import (
    COMMIT_PROMPT_TEMPLATE,
    build_commit_prompt,
)


__all__ = [
    "NO_ISSUES_SENTINEL",
    "REVIEW_PROMPT_TEMPLATE",
    "COMMIT_PROMPT_TEMPLATE",
    "build_review_prompt",
    "build_commit_prompt",
]
