"""Global configuration management for commitgen.

Handles user-level configuration stored in ~/.commitgen/config.yaml:
model, review model, endpoint, diff budget, timeout and default flags.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from commitgen.deadline import parse_duration


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".commitgen"

# Keys accepted by `commitgen config set`, mapped to their value parser
CONFIG_KEYS = {
    "model": str,
    "review_model": str,
    "endpoint": str,
    "max_bytes": int,
    "timeout": parse_duration,
    "review": bool,
    "commit": bool,
}


def get_global_config_dir() -> Path:
    """Get the global commitgen configuration directory.

    Returns:
        Path to ~/.commitgen/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commitgen/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitgen/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.commitgen/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.commitgen/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def parse_config_value(key: str, raw: str) -> Any:
    """Convert a command-line string into the typed value stored for ``key``.

    Args:
        key: One of CONFIG_KEYS.
        raw: The string given on the command line.

    Returns:
        The typed value.

    Raises:
        GlobalConfigError: If the key is unknown or the value does not parse.
    """
    if key not in CONFIG_KEYS:
        raise GlobalConfigError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIG_KEYS)}"
        )

    kind = CONFIG_KEYS[key]
    value = raw.strip()
    if kind is bool:
        lowered = value.lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
        raise GlobalConfigError(f"Invalid boolean for {key}: {raw}")
    if kind is parse_duration:
        if parse_duration(value) is None:
            raise GlobalConfigError(f"Invalid duration for {key}: {raw} (e.g. 40s, 1m30s, 45)")
        return value
    if kind is int:
        try:
            return int(value)
        except ValueError:
            raise GlobalConfigError(f"Invalid integer for {key}: {raw}")
    return value


def set_config_value(key: str, raw: str) -> Any:
    """Parse and persist one configuration value.

    Args:
        key: One of CONFIG_KEYS.
        raw: The string given on the command line.

    Returns:
        The stored typed value.
    """
    value = parse_config_value(key, raw)
    config = load_global_config()
    config[key] = value
    save_global_config(config)
    return value


def initialize_default_config(defaults: Dict[str, Any]) -> None:
    """Write config.yaml with the given defaults, replacing any existing file.

    Args:
        defaults: Configuration values to store.
    """
    save_global_config(dict(defaults))


def is_configured() -> bool:
    """Check if commitgen has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
