# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for .vi source files."""

from vilex.lexer.cursor import Position, SourceCursor
from vilex.lexer.errors import (
    IoError,
    LexicalError,
    MissingFractionalDigit,
    MissingHexDigit,
    UnexpectedCharacter,
    UnterminatedString,
    VilexError,
)
from vilex.lexer.lexer import DEFAULT_ENCODING, Lexer, tokenize
from vilex.lexer.scanner import Scanner
from vilex.lexer.tokens import KEYWORDS, Token, TokenKind, lookup_keyword

__all__ = [
    "DEFAULT_ENCODING",
    "IoError",
    "KEYWORDS",
    "Lexer",
    "LexicalError",
    "MissingFractionalDigit",
    "MissingHexDigit",
    "Position",
    "Scanner",
    "SourceCursor",
    "Token",
    "TokenKind",
    "UnexpectedCharacter",
    "UnterminatedString",
    "VilexError",
    "lookup_keyword",
    "tokenize",
]
