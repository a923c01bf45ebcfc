"""Git branch utilities.

Contains:
- get_branch: Get the current branch name, or a short hash when detached
"""

from typing import Optional

from commitgen.git.runner import _run_git_command


def get_branch(timeout: Optional[float] = None) -> str:
    """Get the current branch name.

    Args:
        timeout: Seconds allowed per git command.

    Returns:
        The branch name, or the short commit hash in detached HEAD state.
    """
    branch = _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"], timeout=timeout)
    if branch and branch != "HEAD":
        return branch

    # Detached HEAD state
    return _run_git_command(["rev-parse", "--short", "HEAD"], timeout=timeout)
