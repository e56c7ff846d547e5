# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer driver: owns the loaded source and turns it into tokens."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from vilex.lexer.cursor import SourceCursor
from vilex.lexer.errors import IoError
from vilex.lexer.scanner import Scanner
from vilex.lexer.tokens import Token

# ###############
# Public Interface
# ###############

DEFAULT_ENCODING = "utf-8"


class Lexer:
    """Scans one .vi source text into a sequence of tokens.

    A Lexer owns its cursor and is consumed by scanning: once the input is
    exhausted, further calls to :meth:`read_next` return None. Create a new
    instance to scan the same text again.

    Attributes:
        lines: The source split on line breaks. Never modified.
    """

    def __init__(self, lines: list[str] | tuple[str, ...]) -> None:
        self.lines: tuple[str, ...] = tuple(lines)
        self._cursor = SourceCursor(self.lines)
        self._scanner = Scanner(self._cursor)

    @classmethod
    def from_text(cls, text: str) -> Lexer:
        """Create a lexer over in-memory source text."""
        return cls(text.split("\n"))

    @classmethod
    def from_file(cls, path: Path | str, encoding: str = DEFAULT_ENCODING) -> Lexer:
        """Create a lexer over the full contents of a source file.

        The whole file is read up front; nothing is scanned yet.

        Args:
            path: The .vi file to load.
            encoding: Text encoding of the file.

        Raises:
            IoError: If the file cannot be read or decoded.
            LookupError: If *encoding* is not a known codec.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=encoding)
        except FileNotFoundError as exc:
            raise IoError(path, "file not found") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise IoError(path, str(exc)) from exc
        return cls.from_text(text)

    def read_next(self) -> Token | None:
        """Return the next token, or None at end of input.

        Raises:
            LexicalError: If the next token is malformed.
        """
        return self._scanner.read_next()

    def tokens(self) -> Iterator[Token]:
        """Lazily yield tokens until the input is exhausted.

        Raises:
            LexicalError: When the generator reaches a malformed token.
        """
        while (token := self._scanner.read_next()) is not None:
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def analyze(self) -> list[Token]:
        """Scan the remaining input into a list of tokens.

        Fails fast: no partial list is returned when an error occurs.

        Raises:
            LexicalError: On the first malformed token.
        """
        return list(self.tokens())


def tokenize(source: str) -> list[Token]:
    """Tokenize .vi source text into a list of tokens.

    Whitespace and comments are consumed and not included in the output.
    There is no end-of-file token; the list simply ends.

    Args:
        source: The full text of a .vi file.

    Returns:
        The tokens in source order.

    Raises:
        LexicalError: On unexpected characters, malformed numbers, or
            unterminated string literals.
    """
    return Lexer.from_text(source).analyze()
