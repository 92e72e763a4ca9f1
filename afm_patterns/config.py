"""Configuration schema for afm-patterns.

Defines the afm.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from afm_patterns.core.merge import MergeStrategy


class MergeConfig(BaseModel):
    """Filter merge options."""

    strategy: MergeStrategy = MergeStrategy.PER_DATASET

    model_config = {"frozen": True}

    @field_validator("strategy", mode="before")
    @classmethod
    def parse_strategy(cls, v: Any) -> MergeStrategy:
        """Parse strategy from string (case-insensitive, dashes allowed)."""
        if isinstance(v, MergeStrategy):
            return v
        if isinstance(v, str):
            try:
                return MergeStrategy(v.lower().replace("-", "_"))
            except ValueError:
                valid = [s.value for s in MergeStrategy]
                raise ValueError(f"Invalid merge strategy '{v}'. Valid: {valid}")
        return MergeStrategy(v)


class OutputConfig(BaseModel):
    """How the CLI prints AFM documents."""

    format: str = "json"  # "json" or "yaml"
    indent: int = Field(default=2, ge=2, le=9)  # PyYAML ignores other widths

    model_config = {"frozen": True}

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, v: Any) -> str:
        if v is None:
            return "json"
        if isinstance(v, str) and v.lower() in ("json", "yaml"):
            return v.lower()
        raise ValueError(f"Invalid output format '{v}'. Valid: 'json', 'yaml'")


class LoggingConfig(BaseModel):
    """Log level for the CLI's rich log handler."""

    level: str = "WARNING"

    model_config = {"frozen": True}

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level


class AfmConfig(BaseModel):
    """
    Root configuration for afm-patterns.

    This is the schema for afm.yml files. Every section is optional.

    Example:
        merge:
          strategy: per_dataset  # or first_only

        output:
          format: yaml
          indent: 2

        logging:
          level: DEBUG
    """

    merge: MergeConfig = Field(default_factory=MergeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_yaml(cls, content: str) -> AfmConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content)
        return cls.model_validate(data or {})

    @classmethod
    def from_file(cls, path: Path | str) -> AfmConfig:
        """Load config from a YAML file."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return cls.from_yaml(content)


# Config file discovery
CONFIG_FILENAMES = ["afm.yml", "afm.yaml", ".afm.yml", ".afm.yaml"]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Find afm.yml config file.

    Searches start_dir (default: current working directory) and then its
    parent directories up to root.

    Returns:
        Path to config file, or None if not found
    """
    if start_dir is None:
        start_dir = Path.cwd()
    else:
        start_dir = Path(start_dir)

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path | str | None = None) -> AfmConfig:
    """
    Load configuration from file.

    If path is not provided, searches for afm.yml in current and parent
    directories and falls back to defaults when none exists.

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If config is invalid
    """
    if path is None:
        path = find_config()
        if path is None:
            return AfmConfig()
    else:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

    return AfmConfig.from_file(path)
