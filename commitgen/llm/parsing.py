"""Parsing utilities for model responses.

Contains functions for turning model output into commit parts:
- parse_strict: Extract and validate the JSON object in the response
- fallback_parts: Heuristic extraction that always yields usable parts
- parse_parts: Strict parse, else fallback, as a tagged ParseOutcome
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from commitgen.commit.constants import (
    BODY_MAX_LENGTH,
    DEFAULT_DESCRIPTION,
    SUMMARY_MAX_LENGTH,
)
from commitgen.commit.inference import detect_commit_type, normalize_commit_type
from commitgen.commit.models import Parts
from commitgen.commit.sanitize import (
    sanitize_body,
    sanitize_description,
    sanitize_summary,
)
from commitgen.llm.exceptions import (
    EmptyResponseError,
    JSONParseError,
    MissingDescriptionError,
    NoJSONObjectError,
    ResponseParseError,
)
from commitgen.text import truncate


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parse_parts.

    Attributes:
        parts: The normalized parts (strict or fallback).
        error: The strict-parse failure that triggered fallback, or None.
    """

    parts: Parts
    error: Optional[ResponseParseError] = None


def parse_strict(raw_response: str) -> Parts:
    """Parse the model response as a JSON commit parts object.

    The object may be surrounded by stray prose: everything between the first
    "{" and the last "}" is decoded. Unknown keys are ignored and missing keys
    default to empty strings.

    Args:
        raw_response: The aggregated model output.

    Returns:
        Normalized Parts.

    Raises:
        EmptyResponseError: If the response is blank.
        NoJSONObjectError: If no {...} span exists.
        JSONParseError: If the span is not a valid parts object.
        MissingDescriptionError: If the description is empty after sanitation.
    """
    cleaned = raw_response.strip()
    if not cleaned:
        raise EmptyResponseError("empty model response")

    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")
    if first_brace == -1 or last_brace == -1 or first_brace > last_brace:
        raise NoJSONObjectError("model response missing JSON object")

    try:
        parsed = Parts.model_validate_json(cleaned[first_brace:last_brace + 1])
    except ValidationError as e:
        raise JSONParseError(
            f"Failed to parse model response as commit JSON.\n"
            f"Error: {e}\n"
            f"Raw response:\n{raw_response}"
        ) from e

    summary = sanitize_summary(parsed.summary)
    parts = Parts(
        commit_type=normalize_commit_type(parsed.commit_type),
        description=sanitize_description(parsed.description),
        summary=summary,
        body=truncate(sanitize_body(parsed.body, summary), BODY_MAX_LENGTH),
    )

    if not parts.description:
        raise MissingDescriptionError("model response missing description")

    return parts


def fallback_parts(raw_response: str) -> Parts:
    """Build parts from arbitrary text.

    Args:
        raw_response: The aggregated model output, treated as prose.

    Returns:
        Parts with a non-empty description and a canonical commit type.
    """
    description = sanitize_description(raw_response) or DEFAULT_DESCRIPTION
    summary = sanitize_summary(raw_response) or truncate(description, SUMMARY_MAX_LENGTH)

    return Parts(
        commit_type=detect_commit_type(raw_response),
        description=description,
        summary=summary,
        body=sanitize_body(raw_response, summary),
    )


def parse_parts(raw_response: str) -> ParseOutcome:
    """Parse strictly, falling back to heuristics on any parse failure.

    Args:
        raw_response: The aggregated model output.

    Returns:
        A ParseOutcome; ``error`` records why fallback was used.
    """
    try:
        return ParseOutcome(parts=parse_strict(raw_response))
    except ResponseParseError as e:
        return ParseOutcome(parts=fallback_parts(raw_response), error=e)
