"""Streaming client for the Ollama generate endpoint.

Contains:
- GenerationRequest: Immutable request payload for one call
- StreamFragment: One line of the newline-delimited JSON response stream
- decode_fragment: Decode a wire line, returning None for undecodable lines
- OllamaClient: Sends the request and aggregates the streamed text
"""

import socket
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Iterator, Mapping, Optional

import httpx
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
)

from commitgen.deadline import Deadline
from commitgen.llm.exceptions import (
    GenerationTimeoutError,
    HTTPStatusError,
    NetworkError,
)

GENERATE_PATH = "/api/generate"
CONNECT_TIMEOUT = 5.0
REQUEST_TIMEOUT = 35.0


@dataclass(frozen=True)
class GenerationRequest:
    """Payload for a single generate call.

    Attributes:
        model: Ollama model name.
        prompt: Fully rendered prompt text.
        options: Sampling parameters (temperature, top_p, num_predict).
    """

    stream: ClassVar[bool] = True

    model: str
    prompt: str
    options: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body sent to the endpoint."""
        payload: dict[str, Any] = {
            "model": self.model,
            "prompt": self.prompt,
            "stream": self.stream,
        }
        if self.options:
            payload["options"] = dict(self.options)
        return payload


class StreamFragment(BaseModel):
    """One decoded record of the streamed response.

    Attributes:
        text: Partial response text (wire key ``response``).
        terminal: True on the last record (wire key ``done``).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    text: StrictStr = Field("", alias="response")
    terminal: StrictBool = Field(False, alias="done")

    @field_validator("text", "terminal", mode="before")
    @classmethod
    def null_as_default(cls, v, info):
        """Treat JSON null as the field default."""
        if v is None:
            return "" if info.field_name == "text" else False
        return v


def decode_fragment(line: str) -> Optional[StreamFragment]:
    """Decode one wire line.

    Args:
        line: A single line from the response body.

    Returns:
        The decoded fragment, or None for blank or malformed lines.
    """
    if not line.strip():
        return None
    try:
        return StreamFragment.model_validate_json(line)
    except ValidationError:
        return None


class _StreamWatchdog:
    """Aborts a streamed response when the deadline passes.

    httpx read timeouts restart on every received chunk, so a peer that
    trickles bytes or stalls between lines is only bounded by wall-clock
    expiry. On expiry the underlying socket is shut down, which wakes the
    reader blocked in recv.
    """

    def __init__(self, deadline: Optional[Deadline]):
        self.deadline = deadline
        self.fired = False

    def expired(self) -> bool:
        """True once the deadline has passed or the watchdog has fired."""
        return self.fired or (self.deadline is not None and self.deadline.expired())

    @contextmanager
    def guard(self, response: httpx.Response) -> Iterator[None]:
        remaining = self.deadline.remaining() if self.deadline is not None else None
        if remaining is None:
            yield
            return

        timer = threading.Timer(remaining, self._abort, args=(response,))
        timer.daemon = True
        timer.start()
        try:
            yield
        finally:
            timer.cancel()

    def _abort(self, response: httpx.Response) -> None:
        self.fired = True
        network_stream = response.extensions.get("network_stream")
        if network_stream is None:
            return
        sock = network_stream.get_extra_info("socket")
        if sock is None:
            return
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            # Already closed by the reader
            pass


class OllamaClient:
    """HTTP client for the Ollama ``/api/generate`` endpoint.

    Args:
        connect_timeout: Seconds allowed to establish the connection.
        request_timeout: Upper bound for any single read/write wait.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        connect_timeout: float = CONNECT_TIMEOUT,
        request_timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.connect_timeout = connect_timeout
        self.request_timeout = request_timeout
        self._transport = transport

    def generate(
        self,
        endpoint: str,
        request: GenerationRequest,
        deadline: Optional[Deadline] = None,
    ) -> str:
        """Send a prompt to the model and return the aggregated response.

        Args:
            endpoint: Ollama base URL (e.g. http://localhost:11434).
            request: The request payload.
            deadline: Optional invocation deadline. When it fires mid-stream
                the read is aborted and nothing is returned.

        Returns:
            The concatenated response text, stripped of surrounding whitespace.

        Raises:
            NetworkError: If the endpoint cannot be reached.
            HTTPStatusError: If the endpoint returns a non-success status.
            GenerationTimeoutError: If the deadline elapses.
        """
        if deadline is not None and deadline.expired():
            raise GenerationTimeoutError("deadline exceeded before the request was sent")

        url = endpoint.rstrip("/") + GENERATE_PATH
        watchdog = _StreamWatchdog(deadline)

        try:
            with httpx.Client(transport=self._transport, timeout=self._timeout(deadline)) as client:
                with client.stream("POST", url, json=request.to_payload()) as response:
                    if response.status_code >= 300:
                        response.read()
                        raise HTTPStatusError(response.status_code, response.text)
                    with watchdog.guard(response):
                        text = self._collect(response.iter_lines(), deadline)
                    # A body delimited by connection close ends cleanly on abort
                    if watchdog.fired:
                        raise GenerationTimeoutError(
                            "deadline exceeded while reading the response stream"
                        )
                    return text
        except httpx.ConnectTimeout as e:
            # The connect timeout is clamped to the remaining time
            if watchdog.expired():
                raise GenerationTimeoutError(f"deadline exceeded connecting to {url}") from e
            raise NetworkError(f"connection to {url} timed out: {e}") from e
        except httpx.TimeoutException as e:
            raise GenerationTimeoutError(f"request to {url} timed out: {e}") from e
        except httpx.TransportError as e:
            if watchdog.expired():
                raise GenerationTimeoutError(
                    "deadline exceeded while reading the response stream"
                ) from e
            raise NetworkError(f"request to {url} failed: {e}") from e

    def _timeout(self, deadline: Optional[Deadline]) -> httpx.Timeout:
        """Build per-phase timeouts bounded by the deadline."""
        limit = self.request_timeout
        remaining = deadline.remaining() if deadline is not None else None
        if remaining is not None:
            limit = min(limit, remaining)
        return httpx.Timeout(limit, connect=min(self.connect_timeout, limit))

    @staticmethod
    def _collect(lines: Iterable[str], deadline: Optional[Deadline]) -> str:
        """Concatenate fragment text until a terminal fragment or end of input."""
        chunks = []
        for line in lines:
            if deadline is not None and deadline.expired():
                raise GenerationTimeoutError("deadline exceeded while reading the response stream")
            fragment = decode_fragment(line)
            if fragment is None:
                continue
            chunks.append(fragment.text)
            if fragment.terminal:
                break
        return "".join(chunks).strip()
