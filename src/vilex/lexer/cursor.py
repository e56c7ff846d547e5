# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Forward-only read cursor over loaded source lines."""

from collections.abc import Sequence
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Position:
    """A 1-based location in the source text."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class SourceCursor:
    """Character cursor over a sequence of source lines.

    The lines are flattened into a single buffer joined by newline characters,
    so the cursor is one absolute offset plus the line/column it corresponds
    to. The offset only ever grows; once it reaches the end of the buffer the
    cursor is exhausted and stays there.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self._buffer = "\n".join(lines)
        self._offset = 0
        self._line = 1
        self._column = 1

    @property
    def position(self) -> Position:
        """The location of the current character (or of the end of input)."""
        return Position(self._line, self._column)

    @property
    def offset(self) -> int:
        """Absolute index of the current character in the flattened buffer."""
        return self._offset

    def current(self) -> str | None:
        """Return the character under the cursor, or None when exhausted."""
        if self._offset < len(self._buffer):
            return self._buffer[self._offset]
        return None

    def peek_next(self) -> str | None:
        """Return the character after the current one without moving."""
        if self._offset + 1 < len(self._buffer):
            return self._buffer[self._offset + 1]
        return None

    def advance(self) -> bool:
        """Move one character forward.

        Returns:
            True if the cursor moved, False if it was already exhausted.
        """
        if self._offset >= len(self._buffer):
            return False
        if self._buffer[self._offset] == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        self._offset += 1
        return True
