# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token recognition rules for .vi source.

The scanner reads characters exclusively through a :class:`SourceCursor` and
produces exactly one token per :meth:`Scanner.read_next` call. Whitespace and
``//`` line comments are skipped between tokens and never produce output.
"""

from vilex.lexer.cursor import Position, SourceCursor
from vilex.lexer.errors import (
    MissingFractionalDigit,
    MissingHexDigit,
    UnexpectedCharacter,
    UnterminatedString,
)
from vilex.lexer.tokens import Token, TokenKind, lookup_keyword

# ###############
# Public Interface
# ###############


class Scanner:
    """Dispatches on the current character to the matching recognizer."""

    def __init__(self, cursor: SourceCursor) -> None:
        self._cursor = cursor

    def read_next(self) -> Token | None:
        """Scan and return the next token.

        Returns:
            The next token, or None once the input is exhausted.

        Raises:
            LexicalError: If the characters at the cursor do not form a valid
                token. The cursor is left inside the malformed token.
        """
        ch = self._skip_whitespace_and_comments()
        if ch is None:
            return None

        start = self._cursor.position
        if ch.isalpha() or ch == "_":
            return self._scan_identifier_or_keyword(start)
        if ch in _DIGITS:
            return self._scan_number(start)
        if ch == '"':
            return self._scan_string(start)
        if ch in _SINGLE_CHAR_TOKENS:
            self._cursor.advance()
            return Token(_SINGLE_CHAR_TOKENS[ch], ch, start.line, start.column)
        if ch in _EQUALS_SUFFIXED_TOKENS:
            return self._scan_comparison(ch, start)
        raise UnexpectedCharacter(ch, start)

    # ------------------------------------------------------------------
    # Whitespace and comment skipping
    # ------------------------------------------------------------------

    def _skip_whitespace_and_comments(self) -> str | None:
        """Skip whitespace and line comments; return the first significant character."""
        cursor = self._cursor
        while (ch := cursor.current()) is not None:
            if ch.isspace():
                cursor.advance()
            elif ch == "/" and cursor.peek_next() == "/":
                self._skip_line_comment()
            else:
                break
        return ch

    def _skip_line_comment(self) -> None:
        """Consume from '//' through end-of-line (exclusive of the newline itself)."""
        cursor = self._cursor
        while (ch := cursor.current()) is not None and ch != "\n":
            cursor.advance()

    # ------------------------------------------------------------------
    # Recognizers
    # ------------------------------------------------------------------

    def _consume_run(self, chars: list[str], accepted: frozenset[str]) -> None:
        """Append characters to *chars* for as long as they belong to *accepted*."""
        cursor = self._cursor
        while (ch := cursor.current()) is not None and ch in accepted:
            chars.append(ch)
            cursor.advance()

    def _scan_identifier_or_keyword(self, start: Position) -> Token:
        """Scan an identifier and map it to a keyword kind if it is reserved."""
        cursor = self._cursor
        chars: list[str] = []
        while (ch := cursor.current()) is not None and (ch.isalnum() or ch == "_"):
            chars.append(ch)
            cursor.advance()
        word = "".join(chars)
        kind = lookup_keyword(word) or TokenKind.IDENTIFIER
        return Token(kind, word, start.line, start.column)

    def _scan_number(self, start: Position) -> Token:
        """Scan a decimal integer, a double, or a hexadecimal integer.

        A hexadecimal literal is a digit followed by 'x' and at least one hex
        digit. A double requires at least one digit on both sides of a single
        decimal point.
        """
        cursor = self._cursor
        chars = [cursor.current()]
        cursor.advance()

        if cursor.current() == "x":
            chars.append("x")
            cursor.advance()
            if cursor.current() not in _HEX_DIGITS:
                raise MissingHexDigit(cursor.position)
            self._consume_run(chars, _HEX_DIGITS)
            return Token(TokenKind.HEX_INTEGER, "".join(chars), start.line, start.column)

        self._consume_run(chars, _DIGITS)
        if cursor.current() != ".":
            return Token(TokenKind.INTEGER, "".join(chars), start.line, start.column)

        chars.append(".")
        cursor.advance()
        if cursor.current() not in _DIGITS:
            raise MissingFractionalDigit(cursor.position)
        self._consume_run(chars, _DIGITS)
        return Token(TokenKind.DOUBLE, "".join(chars), start.line, start.column)

    def _scan_string(self, start: Position) -> Token:
        """Scan a double-quoted string literal.

        Backslashes only matter for finding the closing quote: a quote preceded
        by an odd run of backslashes does not end the literal. The lexeme keeps
        both quotes and every escape sequence undecoded.
        """
        cursor = self._cursor
        chars = ['"']
        escaped = False
        while True:
            cursor.advance()
            ch = cursor.current()
            if ch is None or ch == "\n":
                raise UnterminatedString(start)
            chars.append(ch)
            if ch == '"' and not escaped:
                break
            escaped = not escaped if ch == "\\" else False
        cursor.advance()  # closing "
        return Token(TokenKind.STRING_LITERAL, "".join(chars), start.line, start.column)

    def _scan_comparison(self, ch: str, start: Position) -> Token:
        """Scan '=', '>', '<' or '!', fusing a directly following '='."""
        cursor = self._cursor
        single, fused = _EQUALS_SUFFIXED_TOKENS[ch]
        if cursor.peek_next() == "=":
            cursor.advance()
            cursor.advance()
            return Token(fused, ch + "=", start.line, start.column)
        cursor.advance()
        return Token(single, ch, start.line, start.column)


# ################
# Implementation
# ################

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.PAREN_OPEN,
    ")": TokenKind.PAREN_CLOSE,
    ":": TokenKind.COLON,
    ".": TokenKind.DOT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.FORWARD_SLASH,
}

# Operators that become a different token when directly followed by '='.
_EQUALS_SUFFIXED_TOKENS: dict[str, tuple[TokenKind, TokenKind]] = {
    "=": (TokenKind.EQUALS, TokenKind.EQUAL_TO),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    "!": (TokenKind.EXCLAMATION, TokenKind.NOT_EQUAL),
}
