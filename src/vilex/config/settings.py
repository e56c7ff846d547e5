# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the optional .vilex.yaml settings file."""

import codecs
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from vilex.lexer.errors import VilexError
from vilex.lexer.lexer import DEFAULT_ENCODING

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".vilex.yaml"


class ConfigError(VilexError):
    """Raised when a settings file cannot be read or is invalid."""


class LexerConfig(BaseModel):
    """Settings controlling how source files are loaded and tokens are shown.

    Attributes:
        encoding: Text encoding used when reading .vi source files.
        output_format: How the CLI renders tokens, either ``text`` or ``json``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    encoding: str = DEFAULT_ENCODING
    output_format: Literal["text", "json"] = Field(alias="output-format", default="text")

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding '{value}'") from None
        return value


def find_config(directory: Path) -> Path | None:
    """Return the settings file in *directory*, or None if there is none."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path) -> LexerConfig:
    """Load and validate a settings file.

    An empty file yields the default settings.

    Args:
        path: Path to the .vilex.yaml file.

    Returns:
        A validated LexerConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: settings must be a YAML mapping")

    try:
        return LexerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings file '{path}': {exc}") from exc
