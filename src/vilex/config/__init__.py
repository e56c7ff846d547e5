# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings for the vilex command-line tool."""

from vilex.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    LexerConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "LexerConfig",
    "find_config",
    "load_config",
]
