"""Repository facade used by the generation service."""

from pathlib import Path
from typing import Optional

from commitgen.deadline import Deadline
from commitgen.git.branch import get_branch
from commitgen.git.commit import commit, write_hook
from commitgen.git.diff import get_staged_diff


class GitRepository:
    """Git operations bound to one invocation deadline.

    Args:
        deadline: Bounds every git subprocess. None means unbounded.
    """

    def __init__(self, deadline: Optional[Deadline] = None):
        self.deadline = deadline

    def _timeout(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return self.deadline.remaining()

    def staged_diff(self) -> str:
        return get_staged_diff(timeout=self._timeout())

    def current_branch(self) -> str:
        return get_branch(timeout=self._timeout())

    def commit(self, headline: str, body: str = "") -> str:
        return commit(headline, body, timeout=self._timeout())

    def write_hook(self, path: Path, message: str) -> None:
        write_hook(path, message)
