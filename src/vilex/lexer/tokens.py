# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token data model and keyword table for the .vi language."""

import enum
from dataclasses import dataclass
from types import MappingProxyType

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds produced by the vilex scanner."""

    # Literals and identifiers
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    HEX_INTEGER = "HexInteger"
    DOUBLE = "Double"
    STRING_LITERAL = "StringLiteral"

    # Keywords
    FROM = "From"
    IMPORT = "Import"
    FUN = "Fun"
    MUT = "Mut"

    # Structural symbols
    BRACE_OPEN = "BraceOpen"
    BRACE_CLOSE = "BraceClose"
    SEMICOLON = "Semicolon"
    PAREN_OPEN = "ParenOpen"
    PAREN_CLOSE = "ParenClose"
    COLON = "Colon"
    DOT = "Dot"

    # Operators
    EQUALS = "Equals"
    EQUAL_TO = "EqualTo"
    GREATER = "Greater"
    GREATER_EQUAL = "GreaterEqual"
    LESS = "Less"
    LESS_EQUAL = "LessEqual"
    NOT_EQUAL = "NotEqual"
    EXCLAMATION = "Exclamation"
    PLUS = "Plus"
    MINUS = "Minus"
    ASTERISK = "Asterisk"
    FORWARD_SLASH = "ForwardSlash"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        kind: The kind of token.
        lexeme: The exact source text of the token. String literals keep both
            quotes and any escape sequences undecoded.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.kind.value} {self.lexeme!r} {self.line}:{self.column}"


# Reserved words of the language. Read-only and shared by every scanner.
KEYWORDS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "from": TokenKind.FROM,
        "import": TokenKind.IMPORT,
        "fun": TokenKind.FUN,
        "mut": TokenKind.MUT,
    }
)


def lookup_keyword(word: str) -> TokenKind | None:
    """Return the keyword kind for *word*, or None if it is not reserved."""
    return KEYWORDS.get(word)

