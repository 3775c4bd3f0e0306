"""Tests for short-flag cluster scanning."""

from __future__ import annotations

from argvlex.lexer import Lexer
from argvlex.tokens import Token, TokenType


def lex(*argv: str | bytes) -> Lexer:
    return Lexer(list(argv), includes_program_name=False)


def short(char: str, index: int, offset: int) -> Token:
    return Token(TokenType.SHORT_FLAG, char, index, offset)


class TestClusters:
    """-abc yields one flag per character."""

    def test_single_flag(self) -> None:
        lexer = lex("-v")
        assert lexer.next_token() == short("v", 0, 1)
        assert lexer.is_finished()

    def test_cluster_in_order(self) -> None:
        lexer = lex("-abc", "file")
        assert lexer.next_token() == short("a", 0, 1)
        assert lexer.position.index == 0
        assert lexer.next_token() == short("b", 0, 2)
        assert lexer.next_token() == short("c", 0, 3)
        assert lexer.position.index == 1
        assert lexer.position.offset == 0
        assert lexer.next_token() == Token(TokenType.VALUE, "file", 1)

    def test_offset_tracks_cluster(self) -> None:
        lexer = lex("-abc")
        lexer.next_token()
        assert lexer.position.offset == 2
        lexer.next_token()
        assert lexer.position.offset == 3

    def test_non_ascii_characters(self) -> None:
        lexer = lex("-éß")
        assert lexer.next_token().value == "é"
        assert lexer.next_token().value == "ß"
        assert lexer.is_finished()

    def test_dash_inside_cluster(self) -> None:
        lexer = lex("-a-b")
        assert [t.value for t in lexer.tokenize()] == ["a", "-", "b"]

    def test_bytes_cluster(self) -> None:
        lexer = lex(b"-xy")
        assert lexer.next_token() == short("x", 0, 1)
        assert lexer.next_token() == short("y", 0, 2)


class TestAttachedValues:
    """-a=val and -aval."""

    def test_equals_value(self) -> None:
        lexer = lex("-a=val", "next")
        assert lexer.next_token() == short("a", 0, 1)
        assert lexer.position.offset == 3
        assert lexer.get_value() == "val"
        assert lexer.next_token().value == "next"

    def test_concatenated_value(self) -> None:
        lexer = lex("-ofile.txt")
        assert lexer.next_token().value == "o"
        assert lexer.get_value() == "file.txt"
        assert lexer.is_finished()

    def test_equals_after_cluster(self) -> None:
        lexer = lex("-vo=out")
        assert lexer.next_token().value == "v"
        assert lexer.next_token().value == "o"
        assert lexer.get_value() == "out"

    def test_empty_equals_value(self) -> None:
        lexer = lex("-a=", "next")
        lexer.next_token()
        assert lexer.get_value() == ""
        assert lexer.get_value() == "next"

    def test_double_equals(self) -> None:
        lexer = lex("-a==b")
        lexer.next_token()
        assert lexer.get_value() == "=b"

    def test_unclaimed_equals_value_becomes_value_token(self) -> None:
        lexer = lex("-a=val")
        assert lexer.next_token() == short("a", 0, 1)
        assert lexer.next_token() == Token(TokenType.VALUE, "val", 0, 3)
        assert lexer.is_finished()

    def test_following_argument_value(self) -> None:
        lexer = lex("-o", "out.txt")
        lexer.next_token()
        assert lexer.get_value() == "out.txt"
        assert lexer.is_finished()

    def test_following_flag_is_not_value(self) -> None:
        lexer = lex("-v", "-x")
        lexer.next_token()
        assert lexer.get_value() is None
        assert lexer.next_token().value == "x"

    def test_bytes_attached_value(self) -> None:
        lexer = lex(b"-o\xffout")
        assert lexer.next_token().value == "o"
        assert lexer.get_value() == b"\xffout"

    def test_leading_equals_is_a_flag(self) -> None:
        """An = straight after the dash has no flag before it."""
        lexer = lex("-=a")
        assert [t.value for t in lexer.tokenize()] == ["=", "a"]
