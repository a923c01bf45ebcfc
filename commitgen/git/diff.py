"""Git diff utilities.

Contains:
- get_staged_diff: Get the staged diff without context lines
"""

from typing import Optional

from commitgen.git.runner import _run_git_command


def get_staged_diff(timeout: Optional[float] = None) -> str:
    """Get the unified diff of staged changes.

    Context lines are dropped (-U0) to keep prompts small and rename
    detection (-M) is enabled.

    Args:
        timeout: Seconds allowed for the git command.

    Returns:
        The staged diff (empty when nothing is staged).
    """
    return _run_git_command(["diff", "--staged", "-U0", "-M"], timeout=timeout)
