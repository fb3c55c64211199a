"""Configuration for the command interpreter.

Parses and validates an optional YAML file with a top-level ``shell:`` key.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class ShellConfig(BaseModel):
    """Interpreter settings."""
    prompt: str = "myshell> "
    history_file: Path = Path("history.txt")
    shell_path: str = "/bin/sh"
    delimiters: str = " \t"
    background_marker: str = "&"
    reap_background: bool = True

    @field_validator('history_file', mode='before')
    @classmethod
    def expand_user(cls, v: Any) -> Path:
        """Expand ``~`` in the history file location."""
        return Path(str(v)).expanduser()

    @field_validator('delimiters', 'background_marker', 'shell_path')
    @classmethod
    def not_empty(cls, v: str) -> str:
        """Reject empty strings."""
        if not v:
            raise ValueError("must not be empty")
        return v

    @model_validator(mode='after')
    def marker_is_a_token(self) -> 'ShellConfig':
        """Ensure the background marker can survive tokenization."""
        if any(ch in self.delimiters for ch in self.background_marker):
            raise ValueError(
                f"background_marker {self.background_marker!r} contains a delimiter character"
            )
        return self


class ConfigFile(BaseModel):
    """Top-level configuration file."""
    shell: ShellConfig = Field(default_factory=ShellConfig)


class ConfigParser:
    """Parse and validate interpreter configuration."""

    def __init__(self, config_path: Union[str, Path]):
        """Initialize parser with config file path.

        Args:
            config_path: Path to a YAML configuration file

        Raises:
            FileNotFoundError: If the file does not exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.config: Optional[ConfigFile] = None
        self._raw_config: Optional[Dict[str, Any]] = None

    def parse(self) -> ConfigFile:
        """Parse and validate configuration.

        Returns:
            Validated configuration object

        Raises:
            yaml.YAMLError: If YAML parsing fails
            pydantic.ValidationError: If validation fails
        """
        with open(self.config_path) as f:
            self._raw_config = yaml.safe_load(f) or {}

        self.config = ConfigFile.model_validate(self._raw_config)
        logger.debug(f"Loaded configuration from {self.config_path}")
        return self.config

    def get_shell_config(self) -> ShellConfig:
        """Get interpreter settings."""
        if not self.config:
            raise ValueError("Configuration not parsed. Call parse() first.")
        return self.config.shell


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    **overrides: Any
) -> ShellConfig:
    """Load interpreter settings.

    Args:
        config_path: Path to a YAML file, or None for defaults
        **overrides: Field values that take precedence over the file;
            None values are ignored

    Returns:
        Validated settings

    Example:
        >>> config = load_config("myshell.yaml", prompt="$ ")
        >>> config.prompt
        '$ '
    """
    if config_path is None:
        data: Dict[str, Any] = {}
    else:
        parser = ConfigParser(config_path)
        data = parser.parse().shell.model_dump()

    data.update({k: v for k, v in overrides.items() if v is not None})
    return ShellConfig(**data)
