"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
"""

import subprocess
from typing import Optional

from commitgen.git.exceptions import GitError


def _run_git_command(args: list[str], timeout: Optional[float] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        timeout: Seconds before the command is killed. None waits forever.

    Returns:
        The stdout of the git command, stripped.

    Raises:
        GitError: If the command fails, times out, or git is missing.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except subprocess.TimeoutExpired:
        raise GitError(f"Git command timed out: git {' '.join(args)}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
