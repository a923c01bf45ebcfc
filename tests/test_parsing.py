"""Tests for commitgen.llm.parsing module."""

import json

import pytest

from commitgen.commit import DEFAULT_DESCRIPTION, Parts, build_message
from commitgen.llm.exceptions import (
    EmptyResponseError,
    JSONParseError,
    MissingDescriptionError,
    NoJSONObjectError,
)
from commitgen.llm.parsing import fallback_parts, parse_parts, parse_strict
from commitgen.text import ELLIPSIS


class TestParseStrict:
    """Tests for parse_strict."""

    def test_valid_json(self, sample_parts_json):
        """Test parsing a clean JSON object."""
        parts = parse_strict(sample_parts_json)

        assert parts == Parts(
            commit_type="feat",
            description="add login audit hook",
            summary="logs auth events",
            body="adds publisher",
        )

    def test_json_surrounded_by_prose(self):
        """Test that text around the object is ignored."""
        raw = 'Sure! Here it is:\n{"commit_type":"Feature","description":"add export."}\nHope this helps.'

        parts = parse_strict(raw)

        assert parts.commit_type == "feat"
        assert parts.description == "add export"

    def test_json_in_markdown_fence(self):
        """Test that a fenced JSON block is accepted."""
        raw = '```json\n{"commit_type":"fix","description":"handle nil parser"}\n```'

        assert parse_strict(raw).description == "handle nil parser"

    def test_nulls_and_missing_keys_become_empty(self):
        """Test that null and absent fields default to empty strings."""
        parts = parse_strict('{"commit_type":null,"description":"add x","summary":null}')

        assert parts.commit_type == "chore"
        assert parts.summary == ""
        assert parts.body == ""

    def test_unknown_keys_ignored(self):
        """Test that extra keys do not cause a failure."""
        parts = parse_strict('{"description":"add x","scope":"auth","confidence":0.9}')

        assert parts.description == "add x"

    def test_body_defaults_to_summary(self):
        """Test that a blank body is seeded from the summary."""
        parts = parse_strict('{"description":"add x","summary":"because y","body":"  "}')

        assert parts.body == "because y"

    def test_fields_are_bounded(self):
        """Test that every field respects its length limit."""
        raw = json.dumps({
            "commit_type": "feat",
            "description": "d" * 200,
            "summary": "s" * 200,
            "body": "b" * 400,
        })

        parts = parse_strict(raw)

        assert len(parts.description) == 72
        assert len(parts.summary) == 100
        assert parts.body == "b" * 299 + ELLIPSIS

    def test_multiline_body_capped_as_a_whole(self):
        """Test that the joined body is capped at 300 characters."""
        body = "\n".join(c * 100 for c in "abcd")

        parts = parse_strict(json.dumps({"description": "add x", "body": body}))

        assert len(parts.body) == 300
        assert parts.body.endswith(ELLIPSIS)
        assert parts.body.startswith("a" * 100 + "\n" + "b" * 100 + "\n")

    def test_empty_response(self):
        """Test that a blank response raises EmptyResponseError."""
        with pytest.raises(EmptyResponseError):
            parse_strict("  \n ")

    @pytest.mark.parametrize("raw", ["no braces here", "only { open", "} reversed {"])
    def test_missing_object(self, raw):
        """Test that responses without a {...} span raise NoJSONObjectError."""
        with pytest.raises(NoJSONObjectError):
            parse_strict(raw)

    @pytest.mark.parametrize("raw", [
        "{not json}",
        '{"description": 5}',
        '{"description": ["a", "b"]}',
        '{"description": "a",}',
    ])
    def test_invalid_object(self, raw):
        """Test that undecodable or mistyped objects raise JSONParseError."""
        with pytest.raises(JSONParseError):
            parse_strict(raw)

    @pytest.mark.parametrize("raw", [
        '{"commit_type":"feat"}',
        '{"description":"   "}',
        '{"description":"..."}',
    ])
    def test_missing_description(self, raw):
        """Test that an empty sanitized description raises MissingDescriptionError."""
        with pytest.raises(MissingDescriptionError):
            parse_strict(raw)


class TestFallbackParts:
    """Tests for fallback_parts."""

    def test_prose_response(self):
        """Test heuristic parts from a plain sentence."""
        parts = fallback_parts("Fixed the login bug.")

        assert parts.commit_type == "fix"
        assert parts.description == "Fixed the login bug"
        assert parts.summary == "Fixed the login bug."
        assert parts.body == "Fixed the login bug."

    def test_empty_response(self):
        """Test that empty output still yields usable parts."""
        parts = fallback_parts("")

        assert parts.commit_type == "chore"
        assert parts.description == DEFAULT_DESCRIPTION
        assert parts.summary == DEFAULT_DESCRIPTION
        assert parts.body == DEFAULT_DESCRIPTION

    def test_multiline_response(self):
        """Test that the description is condensed to one bounded line."""
        raw = "Add new feature\n\nfor exporting reports " + "x" * 100

        parts = fallback_parts(raw)

        assert "\n" not in parts.description
        assert len(parts.description) <= 72
        assert parts.body.split("\n")[0] == "Add new feature"
        assert parts.commit_type == "feat"

    def test_multiline_body_only_capped_per_line(self):
        """Test that fallback bodies are not capped as a whole."""
        raw = "\n".join(c * 100 for c in "abcd")

        parts = fallback_parts(raw)

        assert parts.body == raw
        assert len(parts.body) == 403


class TestParseParts:
    """Tests for parse_parts."""

    def test_strict_success(self, sample_parts_json):
        """Test that valid JSON does not use fallback."""
        outcome = parse_parts(sample_parts_json)

        assert outcome.error is None
        assert outcome.parts.description == "add login audit hook"

    def test_fallback_records_reason(self):
        """Test that a strict failure is recorded alongside fallback parts."""
        outcome = parse_parts("refactor the parser module")

        assert isinstance(outcome.error, NoJSONObjectError)
        assert outcome.parts.commit_type == "refactor"

    @pytest.mark.parametrize("raw", [
        "",
        "no json at all",
        "{broken",
        '{"description": null}',
        "}{",
        "\n\n\n",
    ])
    def test_malformed_output_on_main_branch(self, raw):
        """Test that malformed output always assembles into a main headline."""
        message = build_message("main", parse_parts(raw).parts)

        assert message.headline.startswith("main [")
        assert len(message.headline) > len("main [chore] ")
