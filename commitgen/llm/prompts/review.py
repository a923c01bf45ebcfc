"""Review prompt template for a lightweight pre-commit code review.

The model either lists findings as "- " lines or answers with the sentinel.
"""

NO_ISSUES_SENTINEL = "No blocking issues found."

FINDING_MAX_LENGTH = 160

REVIEW_PROMPT_TEMPLATE = """You are a meticulous senior engineer.
Review the following git diff and highlight any potential issues.

Return plain text following this format:
- If you see problems: list each on its own line starting with "- " and keep each finding under {finding_max} characters.
- If the changes look good: respond with "{sentinel}"

Focus on correctness, security, performance, tests, and edge cases. Do not mention formatting unless it hides a bug.

Diff:
{diff}
"""


def build_review_prompt(diff: str) -> str:
    """Build the review prompt.

    Args:
        diff: The staged diff, embedded verbatim.

    Returns:
        The rendered prompt.
    """
    return REVIEW_PROMPT_TEMPLATE.format(
        finding_max=FINDING_MAX_LENGTH,
        sentinel=NO_ISSUES_SENTINEL,
        diff=diff,
    )
