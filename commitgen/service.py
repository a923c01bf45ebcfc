"""Generation pipeline for commitgen.

Contains:
- GenerationOptions: Effective inputs for one run
- ReviewReport: The optional code review text
- GenerationResult: Everything the CLI needs to print, write or commit
- CommitService: Staged diff -> review -> commit parts -> Message
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol

from commitgen.commit import Message, build_message
from commitgen.deadline import Deadline
from commitgen.git.exceptions import NoStagedChangesError
from commitgen.llm import (
    NO_ISSUES_SENTINEL,
    GenerationRequest,
    LLMError,
    ResponseParseError,
    commit_request,
    parse_parts,
    review_request,
)
from commitgen.text import trim_to


class EmptyMessageError(Exception):
    """Raised when the assembled headline is empty."""
    pass


class Generator(Protocol):
    def generate(
        self, endpoint: str, request: GenerationRequest, deadline: Optional[Deadline] = None
    ) -> str:
        ...


class Repository(Protocol):
    def staged_diff(self) -> str:
        ...

    def current_branch(self) -> str:
        ...


@dataclass(frozen=True)
class GenerationOptions:
    """Inputs for one pipeline run.

    Attributes:
        model: Model used for the commit parts call.
        review_model: Model used for the review call.
        endpoint: Ollama base URL.
        max_bytes: Diff budget in bytes (<= 0 disables trimming).
        review: Whether to run the review call first.
    """

    model: str
    review_model: str
    endpoint: str
    max_bytes: int
    review: bool = False


@dataclass(frozen=True)
class ReviewReport:
    """Plain-text review returned by the model."""

    text: str

    @property
    def is_clean(self) -> bool:
        return self.text == NO_ISSUES_SENTINEL

    @property
    def findings(self) -> List[str]:
        """The ``- `` bullet lines, empty for a clean review."""
        if self.is_clean:
            return []
        return [
            line.strip()
            for line in self.text.splitlines()
            if line.strip().startswith("- ")
        ]


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of CommitService.execute.

    Attributes:
        message: The assembled commit message.
        branch: The branch the ticket was extracted from.
        diff_used: The (possibly trimmed) diff sent to the model.
        raw_response: Aggregated output of the commit parts call.
        parse_error: Strict-parse failure that triggered fallback, or None.
        review: The review, when requested and successful.
        review_error: The review failure, when requested and failed.
    """

    message: Message
    branch: str
    diff_used: str
    raw_response: str
    parse_error: Optional[ResponseParseError] = None
    review: Optional[ReviewReport] = None
    review_error: Optional[LLMError] = None

    @property
    def used_fallback(self) -> bool:
        """True when the heuristic path produced the parts."""
        return self.parse_error is not None


class CommitService:
    """Orchestrates git, the model client and message assembly.

    Args:
        client: Anything with OllamaClient's ``generate`` signature.
        repo: Anything with ``staged_diff`` and ``current_branch``.
    """

    def __init__(self, client: Generator, repo: Repository):
        self.client = client
        self.repo = repo

    def execute(self, options: GenerationOptions, deadline: Optional[Deadline] = None) -> GenerationResult:
        """Run the full pipeline once.

        Args:
            options: Effective settings for this run.
            deadline: Bounds every model call.

        Returns:
            The GenerationResult.

        Raises:
            NoStagedChangesError: If nothing is staged.
            GitError: If a git command fails.
            LLMError: If the commit parts call fails.
            EmptyMessageError: If the assembled headline is empty.
        """
        diff = self.repo.staged_diff()
        if not diff.strip():
            raise NoStagedChangesError("No staged changes found.")

        diff = trim_to(diff, options.max_bytes)
        branch = self.repo.current_branch()

        review = None
        review_error = None
        if options.review:
            try:
                text = self.client.generate(
                    options.endpoint, review_request(options.review_model, diff), deadline
                )
                review = ReviewReport(text=text.strip())
            except LLMError as e:
                review_error = e

        raw_response = self.client.generate(
            options.endpoint, commit_request(options.model, diff, branch), deadline
        )

        outcome = parse_parts(raw_response)
        message = build_message(branch, outcome.parts)
        if not message.headline.strip():
            raise EmptyMessageError("assembled headline is empty")

        return GenerationResult(
            message=message,
            branch=branch,
            diff_used=diff,
            raw_response=raw_response,
            parse_error=outcome.error,
            review=review,
            review_error=review_error,
        )
