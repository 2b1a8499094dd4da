"""
Configuration file parsing and management.

Reads YAML configuration files and merges them (custom path → project → user
→ defaults), then applies environment variable overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any

import yaml

from .common import env_flag, vlog
from .tools import KNOWN_NAMES


# Configuration file locations (in priority order)
CONFIG_LOCATIONS = [
    ".toolchain-audit.yml",                                       # Project root (highest priority)
    ".toolchain-audit.yaml",
    os.path.expanduser("~/.config/toolchain-audit/config.yml"),   # User global
    os.path.expanduser("~/.config/toolchain-audit/config.yaml"),
]

MAX_TIMEOUT_SECONDS = 600


def _check_timeout(name: str, value: float | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Invalid {name}: {value!r}. Must be a number of seconds or null")
    if value < 1 or value > MAX_TIMEOUT_SECONDS:
        raise ValueError(
            f"Invalid {name}: {value}. "
            f"Must be between 1 and {MAX_TIMEOUT_SECONDS}"
        )


@dataclass(frozen=True)
class Config:
    """
    Complete configuration for toolchain audit.

    Attributes:
        version: Config schema version
        parallel: Evaluate version checks concurrently (output order is unchanged)
        update_brew: Run the interactive Homebrew updater after the checks
        assume_yes: Answer the Homebrew prompt with "y" automatically
        skip: Tool names to leave out ("node", "deno", "rust", "brew")
        http_timeout_seconds: Timeout for release API requests (None: no timeout)
        command_timeout_seconds: Timeout for local commands (None: no timeout)
        color: Colorize status lines
        emoji: Prefix status lines with emoji
        source: Path to the configuration file that was loaded
    """
    version: int = 1
    parallel: bool = False
    update_brew: bool = True
    assume_yes: bool = False
    skip: tuple[str, ...] = ()
    http_timeout_seconds: float | None = None
    command_timeout_seconds: float | None = None
    color: bool = True
    emoji: bool = True
    source: str = ""

    def __post_init__(self):
        """Validate config after initialization."""
        if self.version != 1:
            raise ValueError(f"Unsupported config version: {self.version}. Expected version 1")
        _check_timeout("http_timeout_seconds", self.http_timeout_seconds)
        _check_timeout("command_timeout_seconds", self.command_timeout_seconds)

    @staticmethod
    def from_dict(data: dict[str, Any], source: str = "") -> Config:
        """Create Config from dictionary."""
        skip = data.get("skip") or ()
        if isinstance(skip, str):
            skip = (skip,)
        if not isinstance(skip, (list, tuple)):
            raise ValueError(f"Invalid skip: {skip!r}. Must be a tool name or a list of tool names")

        return Config(
            version=data.get("version", 1),
            parallel=bool(data.get("parallel", False)),
            update_brew=bool(data.get("update_brew", True)),
            assume_yes=bool(data.get("assume_yes", False)),
            skip=tuple(str(name).lower() for name in skip),
            http_timeout_seconds=data.get("http_timeout_seconds"),
            command_timeout_seconds=data.get("command_timeout_seconds"),
            color=bool(data.get("color", True)),
            emoji=bool(data.get("emoji", True)),
            source=source,
        )

    def is_enabled(self, name: str) -> bool:
        """Return True if the named tool (or "brew") should run."""
        if name == "brew" and not self.update_brew:
            return False
        return name not in self.skip


def _load_yaml(file_path: str) -> dict[str, Any] | None:
    """
    Load YAML configuration file.

    Args:
        file_path: Path to YAML file

    Returns:
        Parsed configuration dictionary, or None if the file is unreadable or invalid
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return None


def load_config_data(file_path: str, verbose: bool = False) -> dict[str, Any] | None:
    """
    Load raw configuration data from a single file.

    Returns:
        Configuration dictionary, or None if the file is missing or invalid
    """
    if not os.path.exists(file_path):
        return None

    vlog(f"Loading config from: {file_path}", verbose)
    data = _load_yaml(file_path)
    if data is None:
        vlog(f"Invalid config file: {file_path}", verbose)
    return data


def load_config_file(file_path: str, verbose: bool = False) -> Config | None:
    """
    Load configuration from a single file.

    Returns:
        Config object, or None if file cannot be loaded or fails validation
    """
    data = load_config_data(file_path, verbose)
    if data is None:
        return None

    try:
        return Config.from_dict(data, source=file_path)
    except (ValueError, TypeError) as e:
        vlog(f"Config validation failed for {file_path}: {e}", verbose)
        return None


def apply_env_overrides(config: Config) -> Config:
    """
    Apply TOOLCHAIN_AUDIT_* environment variables on top of a config.

    Raises:
        ValueError: If TOOLCHAIN_AUDIT_HTTP_TIMEOUT is not a valid number
    """
    changes: dict[str, Any] = {
        "parallel": env_flag("TOOLCHAIN_AUDIT_PARALLEL", config.parallel),
        "color": env_flag("TOOLCHAIN_AUDIT_COLOR", config.color),
        "emoji": env_flag("TOOLCHAIN_AUDIT_EMOJI", config.emoji),
    }

    raw_timeout = os.environ.get("TOOLCHAIN_AUDIT_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            changes["http_timeout_seconds"] = float(raw_timeout)
        except ValueError:
            raise ValueError(f"Invalid TOOLCHAIN_AUDIT_HTTP_TIMEOUT: {raw_timeout}") from None

    return replace(config, **changes)


def load_config(
    custom_path: str | None = None,
    verbose: bool = False,
) -> Config:
    """
    Load and merge configuration from all sources.

    Configuration precedence (highest to lowest):
    1. Environment variables
    2. Custom path (if provided)
    3. Project .toolchain-audit.yml
    4. User ~/.config/toolchain-audit/config.yml
    5. Default configuration

    Args:
        custom_path: Optional path to custom configuration file
        verbose: Enable verbose logging

    Returns:
        Merged Config object (never None, returns defaults if no config found)

    Raises:
        ValueError: If custom_path is provided but cannot be loaded or is
            invalid. Invalid files in the standard locations are skipped.
    """
    layers: list[tuple[str, dict[str, Any]]] = []

    if custom_path:
        data = load_config_data(custom_path, verbose)
        if data is None:
            raise ValueError(f"Could not load config from specified path: {custom_path}")
        try:
            Config.from_dict(data, source=custom_path)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid config in {custom_path}: {e}") from e
        layers.append((custom_path, data))
        vlog(f"Using custom config: {custom_path}", verbose)

    for location in CONFIG_LOCATIONS:
        if location == custom_path:
            continue
        data = load_config_data(location, verbose)
        if data is None:
            continue
        try:
            Config.from_dict(data, source=location)
        except (ValueError, TypeError) as e:
            vlog(f"Config validation failed for {location}: {e}", verbose)
            continue
        layers.append((location, data))
        vlog(f"Found config at: {location}", verbose)

    if not layers:
        vlog("No config files found, using defaults", verbose)
        return apply_env_overrides(Config())

    # Lowest priority first, so higher-priority files override key by key
    merged: dict[str, Any] = {}
    for _, data in reversed(layers):
        merged.update(data)

    config = Config.from_dict(merged, source=layers[0][0])
    vlog(f"Merged {len(layers)} config files", verbose)
    return apply_env_overrides(config)


def validate_config(config: Config) -> list[str]:
    """
    Validate configuration and return list of warnings.

    Args:
        config: Config object to validate

    Returns:
        List of validation warning messages (empty if valid)
    """
    warnings = []

    for name in config.skip:
        if name not in KNOWN_NAMES:
            warnings.append(
                f"Unknown tool in skip list: '{name}'. "
                f"Known tools: {', '.join(sorted(KNOWN_NAMES))}"
            )

    if config.assume_yes and not config.update_brew:
        warnings.append("assume_yes has no effect when update_brew is disabled")

    return warnings
