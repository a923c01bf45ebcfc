"""Configuration for commitgen.

Settings are resolved from, highest precedence first:
1. Command-line flags (passed in as overrides)
2. Environment variables (a .env file is loaded by commitgen.llm)
3. ~/.commitgen/config.yaml
4. The defaults below
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from commitgen import global_config
from commitgen.deadline import parse_duration


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_ENDPOINT = "http://localhost:11434"
DEFAULT_MODEL = "qwen2.5-coder:1.5b"
DEFAULT_MAX_BYTES = 32000
DEFAULT_TIMEOUT = 40.0
DEFAULT_REVIEW = False
DEFAULT_COMMIT = True


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

ENV_MODEL = "OLLAMA_MODEL"
ENV_REVIEW_MODEL = "OLLAMA_REVIEW_MODEL"
ENV_ENDPOINT = "OLLAMA_ENDPOINT"
ENV_MAX_BYTES = "COMMITGEN_MAX_BYTES"
ENV_TIMEOUT = "COMMITGEN_TIMEOUT"


@dataclass
class Settings:
    """Effective runtime settings for one invocation."""

    model: str = DEFAULT_MODEL
    review_model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    max_bytes: int = DEFAULT_MAX_BYTES
    timeout: float = DEFAULT_TIMEOUT
    review: bool = DEFAULT_REVIEW
    commit: bool = DEFAULT_COMMIT
    hook_path: Optional[Path] = None


def default_config() -> dict:
    """Values written to config.yaml by `commitgen init`."""
    return {
        "model": DEFAULT_MODEL,
        "review_model": DEFAULT_MODEL,
        "endpoint": DEFAULT_ENDPOINT,
        "max_bytes": DEFAULT_MAX_BYTES,
        "timeout": f"{int(DEFAULT_TIMEOUT)}s",
        "review": DEFAULT_REVIEW,
        "commit": DEFAULT_COMMIT,
    }


def _first_text(*values: Any) -> Optional[str]:
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def _first_int(*values: Any) -> Optional[int]:
    for value in values:
        if value is None or isinstance(value, bool):
            continue
        try:
            return int(str(value).strip())
        except ValueError:
            continue
    return None


def _first_bool(*values: Any) -> Optional[bool]:
    for value in values:
        if isinstance(value, bool):
            return value
    return None


def _first_duration(*values: Any) -> Optional[float]:
    for value in values:
        seconds = parse_duration(value)
        if seconds is not None:
            return seconds
    return None


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
    file_config: Optional[Mapping[str, Any]] = None,
) -> Settings:
    """Resolve the effective settings.

    Args:
        overrides: Values from command-line flags (None entries are ignored).
        env: Environment mapping. Defaults to os.environ.
        file_config: Parsed config.yaml. Defaults to loading ~/.commitgen/config.yaml.

    Returns:
        The resolved Settings.
    """
    overrides = overrides or {}
    env = os.environ if env is None else env
    if file_config is None:
        file_config = global_config.load_global_config()

    model = _first_text(
        overrides.get("model"), env.get(ENV_MODEL), file_config.get("model"),
    ) or DEFAULT_MODEL

    review_model = _first_text(
        overrides.get("review_model"), env.get(ENV_REVIEW_MODEL), file_config.get("review_model"),
    ) or model

    endpoint = _first_text(
        overrides.get("endpoint"), env.get(ENV_ENDPOINT), file_config.get("endpoint"),
    ) or DEFAULT_ENDPOINT

    max_bytes = _first_int(
        overrides.get("max_bytes"), env.get(ENV_MAX_BYTES), file_config.get("max_bytes"),
    )
    if max_bytes is None:
        max_bytes = DEFAULT_MAX_BYTES

    timeout = _first_duration(
        overrides.get("timeout"), env.get(ENV_TIMEOUT), file_config.get("timeout"),
    ) or DEFAULT_TIMEOUT

    review = _first_bool(overrides.get("review"), file_config.get("review"))
    commit = _first_bool(overrides.get("commit"), file_config.get("commit"))

    hook_path = overrides.get("hook_path")

    return Settings(
        model=model,
        review_model=review_model,
        endpoint=endpoint,
        max_bytes=max_bytes,
        timeout=timeout,
        review=DEFAULT_REVIEW if review is None else review,
        commit=DEFAULT_COMMIT if commit is None else commit,
        hook_path=Path(hook_path) if hook_path else None,
    )
