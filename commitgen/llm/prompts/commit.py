"""Commit prompt template for JSON commit parts generation.

The key names and limits below are what commitgen.llm.parsing expects.
"""

from commitgen.commit.constants import (
    BODY_MAX_LENGTH,
    COMMIT_TYPES,
    DESCRIPTION_MAX_LENGTH,
    SUMMARY_MAX_LENGTH,
)

COMMIT_PROMPT_TEMPLATE = """You help craft git commit messages.
Analyse the staged diff and respond with a single JSON object describing the commit.

Requirements:
- "commit_type": choose the best fit from [{commit_types}].
- "description": short imperative summary of what changed (<= {description_max} characters, no trailing punctuation, lower case start).
- "summary": brief reason or impact of the change (<= {summary_max} characters).
- "body": 1-3 sentences that highlight key details or rationale (<= {body_max} characters). Use newline separators if listing items.
- Output only valid JSON with exactly these four keys. No prose, markdown, or backticks.

Example:
{{"commit_type":"fix","description":"handle nil pointer in parser","summary":"avoid panic when schema metadata missing","body":"Add nil check before parser access to prevent runtime crash."}}

Context:
- Branch: {branch}
- Diff:
{diff}
"""


def build_commit_prompt(diff: str, branch: str) -> str:
    """Build the commit generation prompt.

    Args:
        diff: The staged diff, embedded verbatim.
        branch: The current branch name.

    Returns:
        The rendered prompt.
    """
    return COMMIT_PROMPT_TEMPLATE.format(
        commit_types=",".join(f'"{t}"' for t in COMMIT_TYPES),
        description_max=DESCRIPTION_MAX_LENGTH,
        summary_max=SUMMARY_MAX_LENGTH,
        body_max=BODY_MAX_LENGTH,
        branch=branch,
        diff=diff,
    )
