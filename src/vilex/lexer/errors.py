# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while loading and scanning .vi source."""

from pathlib import Path

from vilex.lexer.cursor import Position

# ###############
# Public Interface
# ###############


class VilexError(Exception):
    """Base class for every error raised by vilex."""


class IoError(VilexError):
    """Raised when a source file cannot be read.

    Attributes:
        path: The file that could not be loaded.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read source file '{path}': {reason}")
        self.path = path


class LexicalError(VilexError):
    """Raised when the scanner cannot recognize a token.

    Attributes:
        position: Where the offending token (or character) starts.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, position: Position) -> None:
        super().__init__(f"Line {position.line}, column {position.column}: {message}")
        self.position = position

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


class UnexpectedCharacter(LexicalError):
    """A character that cannot start any token."""

    def __init__(self, char: str, position: Position) -> None:
        super().__init__(f"Unexpected character {char!r}", position)
        self.char = char


class MissingHexDigit(LexicalError):
    """A hexadecimal prefix with no digit after it."""

    def __init__(self, position: Position) -> None:
        super().__init__("Expected hexadecimal digit after '0x'", position)


class MissingFractionalDigit(LexicalError):
    """A decimal point in a number with no digit after it."""

    def __init__(self, position: Position) -> None:
        super().__init__("Expected digit after '.'", position)


class UnterminatedString(LexicalError):
    """A string literal that is not closed before the end of its line."""

    def __init__(self, position: Position) -> None:
        super().__init__("Unterminated string literal", position)
