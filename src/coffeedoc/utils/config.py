"""Configuration management for coffeedoc.

This module handles loading, validating, and managing configuration from
multiple sources (CLI args, config files, environment variables).
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class CoffeedocConfig(BaseSettings):
    """Main configuration for coffeedoc.

    Configuration is loaded in this order (later sources override earlier):
    1. Default values
    2. Environment variables (COFFEEDOC_*)
    3. Config file (coffeedoc.toml or pyproject.toml)
    4. CLI arguments

    Attributes:
        file_pattern: Glob pattern for finding syntax tree files
        exclude_patterns: Patterns to exclude from processing
        output_dir: Directory to write documentation models to
        output_suffix: Suffix replacing the input file's suffix on output
        json_indent: Indentation of written JSON (0 for compact)
        overwrite: Whether to overwrite existing output files
        fail_fast: Abort on the first module that cannot be documented
        verbose: Enable verbose logging
        quiet: Suppress all non-error output
        log_level: Logging level
        log_format: Log format (json or console)
    """

    model_config = SettingsConfigDict(
        env_prefix="COFFEEDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # File processing
    file_pattern: str = Field(
        default="**/*.json",
        description="File pattern for discovery",
    )
    exclude_patterns: list[str] = Field(
        default_factory=lambda: [
            "**/*.doc.json",
            "**/node_modules/**",
            "**/.*/**",
        ],
        description="Patterns to exclude",
    )

    # Output
    output_dir: Path | None = Field(
        default=None,
        description="Output directory (stdout if unset)",
    )
    output_suffix: str = Field(
        default=".doc.json",
        description="Suffix for written documentation files",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="JSON indentation",
    )
    overwrite: bool = Field(
        default=False,
        description="Overwrite existing output files",
    )
    fail_fast: bool = Field(
        default=False,
        description="Stop at the first failing module",
    )

    # Logging
    verbose: bool = Field(
        default=False,
        description="Verbose output",
    )
    quiet: bool = Field(
        default=False,
        description="Quiet mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level",
    )
    log_format: str = Field(
        default="console",
        description="Log format (json or console)",
    )

    @field_validator("output_suffix")
    @classmethod
    def validate_output_suffix(cls, v: str) -> str:
        """Validate output suffix."""
        if not v.startswith("."):
            raise ValueError(f"Output suffix must start with '.': {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v_lower


def load_config(
    config_path: Path | None = None,
    **overrides: Any,
) -> CoffeedocConfig:
    """Load configuration from file and environment.

    Args:
        config_path: Path to config file (searches for default if not provided)
        **overrides: Configuration overrides from CLI

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If specified config file doesn't exist
        ValueError: If config file is invalid
    """
    if config_path is None:
        config_path = find_config_file()

    file_config: dict[str, Any] = {}
    if config_path:
        file_config = load_config_file(config_path)

    # CLI options left unset arrive as None and must not mask file values
    cli_config = {k: v for k, v in overrides.items() if v is not None}

    return CoffeedocConfig(**{**file_config, **cli_config})


def find_config_file() -> Path | None:
    """Search for a config file in standard locations.

    Searches in this order:
    1. ./coffeedoc.toml
    2. ./pyproject.toml (with [tool.coffeedoc] section)
    3. ../.coffeedoc.toml
    4. ~/.config/coffeedoc/config.toml

    Returns:
        Path to config file if found, None otherwise
    """
    search_paths = [
        Path.cwd() / "coffeedoc.toml",
        Path.cwd() / "pyproject.toml",
        Path.cwd().parent / ".coffeedoc.toml",
        Path.home() / ".config" / "coffeedoc" / "config.toml",
    ]

    for path in search_paths:
        if not path.exists():
            continue
        if path.name != "pyproject.toml":
            return path
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            continue
        if "coffeedoc" in data.get("tool", {}):
            return path

    return None


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to config file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is invalid TOML
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e

    if config_path.name == "pyproject.toml":
        config: dict[str, Any] = data.get("tool", {}).get("coffeedoc", {})
    else:
        config = data.get("coffeedoc", data)

    return config


def create_default_config(output_path: Path) -> None:
    """Create a default configuration file.

    Args:
        output_path: Where to write the config file

    Raises:
        FileExistsError: If file already exists
    """
    if output_path.exists():
        raise FileExistsError(f"Config file already exists: {output_path}")

    default_config = """# coffeedoc configuration

[coffeedoc]
# Syntax tree files to document
file_pattern = "**/*.json"
exclude_patterns = [
    "**/*.doc.json",
    "**/node_modules/**",
    "**/.*/**",
]

# Output (omit output_dir to print to stdout)
# output_dir = "docs/api"
output_suffix = ".doc.json"
json_indent = 2
overwrite = false

# Stop at the first module that cannot be documented
fail_fast = false

# Logging
verbose = false
quiet = false
log_level = "INFO"
log_format = "console"
"""

    output_path.write_text(default_config)
