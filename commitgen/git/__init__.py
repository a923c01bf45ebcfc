"""Git collaborator module for commitgen.

This package wraps the git CLI:
- exceptions: GitError, NoStagedChangesError, HookWriteError
- runner: _run_git_command
- branch: get_branch
- diff: get_staged_diff
- commit: commit, write_hook
- repository: GitRepository
"""

# Exceptions
from commitgen.git.exceptions import (
    GitError,
    HookWriteError,
    NoStagedChangesError,
)

# Runner utilities
from commitgen.git.runner import _run_git_command

# Branch, diff and commit utilities
from commitgen.git.branch import get_branch
from commitgen.git.diff import get_staged_diff
from commitgen.git.commit import commit, write_hook

# Repository facade
from commitgen.git.repository import GitRepository


__all__ = [
    # Exceptions
    "GitError",
    "HookWriteError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    # Operations
    "get_branch",
    "get_staged_diff",
    "commit",
    "write_hook",
    # Facade
    "GitRepository",
]
