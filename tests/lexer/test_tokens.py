# Copyright 2026 Vilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the token model and keyword table."""

import dataclasses

import pytest

from vilex.lexer.tokens import KEYWORDS, Token, TokenKind, lookup_keyword


class TestKeywordTable:
    def test_contains_exactly_the_reserved_words(self) -> None:
        assert dict(KEYWORDS) == {
            "from": TokenKind.FROM,
            "import": TokenKind.IMPORT,
            "fun": TokenKind.FUN,
            "mut": TokenKind.MUT,
        }

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            KEYWORDS["let"] = TokenKind.IDENTIFIER  # type: ignore[index]

    def test_lookup_hit(self) -> None:
        assert lookup_keyword("fun") == TokenKind.FUN

    @pytest.mark.parametrize("word", ["Fun", "fun ", "", "funs", "let"])
    def test_lookup_miss(self, word: str) -> None:
        assert lookup_keyword(word) is None


class TestTokenKind:
    def test_kind_values_are_canonical_names(self) -> None:
        assert TokenKind.HEX_INTEGER.value == "HexInteger"
        assert TokenKind.STRING_LITERAL.value == "StringLiteral"
        assert TokenKind.EQUAL_TO.value == "EqualTo"

    def test_closed_set_size(self) -> None:
        assert len(TokenKind) == 28


class TestToken:
    def test_token_is_frozen(self) -> None:
        token = Token(TokenKind.IDENTIFIER, "x", 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.lexeme = "y"  # type: ignore[misc]

    def test_equality_is_by_value(self) -> None:
        assert Token(TokenKind.INTEGER, "1", 2, 3) == Token(TokenKind.INTEGER, "1", 2, 3)
        assert Token(TokenKind.INTEGER, "1", 2, 3) != Token(TokenKind.DOUBLE, "1", 2, 3)

    def test_str(self) -> None:
        assert str(Token(TokenKind.STRING_LITERAL, '"hi"', 4, 9)) == "StringLiteral '\"hi\"' 4:9"
