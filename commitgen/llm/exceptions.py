"""LLM-related exception classes.

Contains all exception classes for model calls and response parsing:
- LLMError: Base exception for LLM-related errors
- NetworkError: Connection-level failure talking to the endpoint
- HTTPStatusError: Endpoint answered with a non-success status
- GenerationTimeoutError: The invocation deadline elapsed
- ResponseParseError: Base for strict-parse failures (all trigger fallback)
  - EmptyResponseError, NoJSONObjectError, JSONParseError, MissingDescriptionError
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class NetworkError(LLMError):
    """Raised when the endpoint cannot be reached or the connection drops."""

    pass


class HTTPStatusError(LLMError):
    """Raised when the endpoint returns a non-success HTTP status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"ollama error {status_code}: {body}")


class GenerationTimeoutError(LLMError):
    """Raised when the deadline elapses before or during a call."""

    pass


class ResponseParseError(LLMError):
    """Base exception for model output that cannot be parsed strictly."""

    pass


class EmptyResponseError(ResponseParseError):
    """Raised when the model output is blank."""

    pass


class NoJSONObjectError(ResponseParseError):
    """Raised when the model output contains no {...} span."""

    pass


class JSONParseError(ResponseParseError):
    """Raised when the {...} span is not a valid commit parts object."""

    pass


class MissingDescriptionError(ResponseParseError):
    """Raised when the parsed description is empty after sanitation."""

    pass
