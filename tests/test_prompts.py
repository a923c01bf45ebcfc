"""Tests for commitgen.llm.prompts and request builders."""

from commitgen.llm import (
    COMMIT_OPTIONS,
    NO_ISSUES_SENTINEL,
    REVIEW_OPTIONS,
    build_commit_prompt,
    build_review_prompt,
    commit_request,
    review_request,
)


class TestReviewPrompt:
    """Tests for build_review_prompt."""

    def test_contains_sentinel_and_diff(self, sample_diff):
        """Test that the sentinel and diff are embedded."""
        prompt = build_review_prompt(sample_diff)

        assert f'"{NO_ISSUES_SENTINEL}"' in prompt
        assert prompt.rstrip().endswith(sample_diff.rstrip())
        assert "160 characters" in prompt

    def test_diff_with_braces_is_verbatim(self):
        """Test that braces in the diff are not treated as placeholders."""
        diff = "+x = {'a': {b}}"
        assert diff in build_review_prompt(diff)


class TestCommitPrompt:
    """Tests for build_commit_prompt."""

    def test_lists_keys_types_and_limits(self, sample_diff):
        """Test that the prompt names the keys, types and limits."""
        prompt = build_commit_prompt(sample_diff, "feature/TES-123-login")

        for key in ("commit_type", "description", "summary", "body"):
            assert f'"{key}"' in prompt
        assert '"feat","fix","perf","refactor","docs","test","build","chore","ci"' in prompt
        assert "<= 72 characters" in prompt
        assert "<= 100 characters" in prompt
        assert "<= 300 characters" in prompt
        assert "- Branch: feature/TES-123-login" in prompt
        assert sample_diff in prompt

    def test_example_is_literal_json(self):
        """Test that the example object keeps its braces."""
        prompt = build_commit_prompt("", "main")

        assert '{"commit_type":"fix","description":"handle nil pointer in parser"' in prompt


class TestRequests:
    """Tests for the request builders."""

    def test_review_request(self):
        """Test the review sampling options."""
        request = review_request("reviewer", "diff")

        assert request.model == "reviewer"
        assert dict(request.options) == {"temperature": 0.1, "top_p": 0.9, "num_predict": 200}
        assert dict(request.options) == REVIEW_OPTIONS

    def test_commit_request(self):
        """Test the commit sampling options."""
        request = commit_request("writer", "diff", "main")

        assert request.model == "writer"
        assert dict(request.options) == {"temperature": 0.2, "top_p": 0.9, "num_predict": 120}
        assert dict(request.options) == COMMIT_OPTIONS
        assert "- Branch: main" in request.prompt
