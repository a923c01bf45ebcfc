"""LLM module for commitgen.

This module talks to a local Ollama endpoint and turns its output into
commit parts:
- client: OllamaClient, GenerationRequest, StreamFragment
- prompts: review and commit prompt templates
- parsing: parse_strict, fallback_parts, parse_parts
- exceptions: LLMError and subclasses
"""

from dotenv import load_dotenv

from commitgen.llm.exceptions import (
    EmptyResponseError,
    GenerationTimeoutError,
    HTTPStatusError,
    JSONParseError,
    LLMError,
    MissingDescriptionError,
    NetworkError,
    NoJSONObjectError,
    ResponseParseError,
)
from commitgen.llm.client import (
    GenerationRequest,
    OllamaClient,
    StreamFragment,
    decode_fragment,
)
from commitgen.llm.prompts import (
    NO_ISSUES_SENTINEL,
    build_commit_prompt,
    build_review_prompt,
)
from commitgen.llm.parsing import (
    ParseOutcome,
    fallback_parts,
    parse_parts,
    parse_strict,
)

# Load environment variables from .env file
load_dotenv()

REVIEW_OPTIONS = {"temperature": 0.1, "top_p": 0.9, "num_predict": 200}
COMMIT_OPTIONS = {"temperature": 0.2, "top_p": 0.9, "num_predict": 120}


def review_request(model: str, diff: str) -> GenerationRequest:
    """Build the request for the code review call."""
    return GenerationRequest(model=model, prompt=build_review_prompt(diff), options=REVIEW_OPTIONS)


def commit_request(model: str, diff: str, branch: str) -> GenerationRequest:
    """Build the request for the commit parts call."""
    return GenerationRequest(model=model, prompt=build_commit_prompt(diff, branch), options=COMMIT_OPTIONS)


# Export commonly used items
__all__ = [
    # Exceptions
    "LLMError",
    "NetworkError",
    "HTTPStatusError",
    "GenerationTimeoutError",
    "ResponseParseError",
    "EmptyResponseError",
    "NoJSONObjectError",
    "JSONParseError",
    "MissingDescriptionError",
    # Client
    "OllamaClient",
    "GenerationRequest",
    "StreamFragment",
    "decode_fragment",
    # Prompts
    "NO_ISSUES_SENTINEL",
    "build_commit_prompt",
    "build_review_prompt",
    "review_request",
    "commit_request",
    "REVIEW_OPTIONS",
    "COMMIT_OPTIONS",
    # Parsing
    "ParseOutcome",
    "parse_strict",
    "fallback_parts",
    "parse_parts",
]
