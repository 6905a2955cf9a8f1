"""
eql.toml configuration.

Every section and key is optional:

    [repl]
    prompt = "> "
    continuation_prompt = ".. "

    [output]
    format = "text"     # "text" | "json"
    show_index = true

    [logging]
    level = "WARNING"
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

from .errors import ManifestError

DEFAULT_CONFIG_NAME = "eql.toml"
OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ReplConfig:
    """Interactive loop prompts."""

    prompt: str = "> "
    continuation_prompt: str = ".. "


@dataclass
class OutputConfig:
    """How parsed operations are printed."""

    format: str = "text"  # "text" | "json"
    show_index: bool = True


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class EqlConfig:
    """Complete eql configuration."""

    repl: ReplConfig = field(default_factory=ReplConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None


def load_config(path: Path | None = None) -> EqlConfig:
    """
    Load configuration from ``path``, or from ./eql.toml when it exists.

    Args:
        path: Explicit config file; must exist when given

    Returns:
        EqlConfig with defaults for anything the file leaves out

    Raises:
        ManifestError: If the file is missing, not valid TOML, or holds an
            unknown output format or log level
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            logger.debug("No %s found, using defaults", DEFAULT_CONFIG_NAME)
            return EqlConfig()
        path = candidate
    elif not path.exists():
        raise ManifestError(f"Config file not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    repl_data = _table(data, "repl", path)
    output_data = _table(data, "output", path)
    logging_data = _table(data, "logging", path)

    repl_config = ReplConfig(
        prompt=_value(repl_data, "repl.prompt", "> ", str, path),
        continuation_prompt=_value(repl_data, "repl.continuation_prompt", ".. ", str, path),
    )

    output_format = _value(output_data, "output.format", "text", str, path)
    if output_format not in OUTPUT_FORMATS:
        raise ManifestError(
            f"Unknown output format {output_format!r} in {path} "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    output_config = OutputConfig(
        format=output_format,
        show_index=_value(output_data, "output.show_index", True, bool, path),
    )

    level = _value(logging_data, "logging.level", "WARNING", str, path).upper()
    if level not in LOG_LEVELS:
        raise ManifestError(
            f"Unknown log level {level!r} in {path} (expected one of: {', '.join(LOG_LEVELS)})"
        )

    logger.debug("Loaded config from %s", path)
    return EqlConfig(
        repl=repl_config,
        output=output_config,
        logging=LoggingConfig(level=level),
        path=path,
    )


def _table(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ManifestError(f"[{name}] in {path} must be a table")
    return section


def _value(table: dict[str, Any], key: str, default: T, expected: type[T], path: Path) -> T:
    """Look up ``section.name`` in its table, checking the value's type."""
    value = table.get(key.rpartition(".")[2], default)
    if not isinstance(value, expected):
        raise ManifestError(
            f"{key} in {path} must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value
