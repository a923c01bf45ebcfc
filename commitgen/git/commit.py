"""Git commit and hook file utilities.

Contains:
- commit: Create a commit from a headline and optional body
- write_hook: Write the message into a commit-msg/prepare-commit-msg file
"""

from pathlib import Path
from typing import Optional

from commitgen.git.exceptions import GitError, HookWriteError
from commitgen.git.runner import _run_git_command


def commit(headline: str, body: str = "", timeout: Optional[float] = None) -> str:
    """Create a commit with the headline as the first -m and body as the second.

    Args:
        headline: The commit headline.
        body: Optional body, omitted when blank.
        timeout: Seconds allowed for the git command.

    Returns:
        The stdout of git commit.

    Raises:
        GitError: If the headline is empty or the commit fails.
    """
    if not headline.strip():
        raise GitError("empty headline")

    args = ["commit", "-m", headline]
    if body.strip():
        args += ["-m", body]
    return _run_git_command(args, timeout=timeout)


def write_hook(path: Path, message: str) -> None:
    """Write the rendered message to a hook file, newline-terminated.

    Args:
        path: The message file passed to the git hook.
        message: The rendered message (headline, blank line, body).

    Raises:
        HookWriteError: If the file cannot be written.
    """
    try:
        Path(path).write_text(message + "\n", encoding="utf-8")
    except OSError as e:
        raise HookWriteError(f"Failed to write hook message file {path}: {e}")
