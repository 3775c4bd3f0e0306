"""Tests for long-flag scanning: --name and --name=value."""

from __future__ import annotations

from argvlex.lexer import Lexer
from argvlex.tokens import Token, TokenType


def lex(*argv: str | bytes) -> Lexer:
    return Lexer(list(argv), includes_program_name=False)


class TestLongFlagWithoutValue:
    """--name with no attached value."""

    def test_name_only(self) -> None:
        lexer = lex("--verbose")
        assert lexer.next_token() == Token(TokenType.LONG_FLAG, "verbose", 0, 2)
        assert lexer.is_finished()

    def test_following_argument_is_value(self) -> None:
        """get_value takes the next argument when it is not a flag."""
        lexer = lex("--output", "out.txt", "rest")
        token = lexer.next_token()
        assert token.type is TokenType.LONG_FLAG
        assert token.value == "output"
        assert lexer.get_value() == "out.txt"
        assert lexer.next_token() == Token(TokenType.VALUE, "rest", 2)

    def test_following_flag_is_not_value(self) -> None:
        lexer = lex("--force", "--dry-run")
        lexer.next_token()
        assert lexer.get_value() is None
        assert lexer.position.index == 1
        assert lexer.next_token().value == "dry-run"

    def test_no_following_argument(self) -> None:
        lexer = lex("--force")
        lexer.next_token()
        assert lexer.get_value() is None

    def test_leading_equals_does_not_split(self) -> None:
        """An = right after the dashes is part of the name."""
        lexer = lex("--=x")
        assert lexer.next_token().value == "=x"
        assert lexer.is_finished()

    def test_triple_dash(self) -> None:
        lexer = lex("---")
        assert lexer.next_token().value == "-"


class TestLongFlagWithAttachedValue:
    """--name=value keeps the argument current until the value is claimed."""

    def test_get_value_returns_attached(self) -> None:
        lexer = lex("--name=val", "next")
        assert lexer.next_token().value == "name"
        assert lexer.position.index == 0
        assert lexer.position.offset == len("--name=")
        assert lexer.get_value() == "val"
        assert lexer.position.index == 1
        assert lexer.position.offset == 0

    def test_value_may_contain_equals(self) -> None:
        lexer = lex("--define=KEY=VALUE")
        assert lexer.next_token().value == "define"
        assert lexer.get_value() == "KEY=VALUE"

    def test_empty_attached_value(self) -> None:
        lexer = lex("--name=", "next")
        lexer.next_token()
        assert lexer.get_value() == ""
        assert lexer.next_token().value == "next"

    def test_value_may_start_with_dash(self) -> None:
        lexer = lex("--offset=-3")
        lexer.next_token()
        assert lexer.get_value() == "-3"

    def test_unclaimed_value_becomes_value_token(self) -> None:
        """Skipping get_value still moves the stream forward."""
        lexer = lex("--name=val", "next")
        lexer.next_token()
        assert lexer.next_token() == Token(TokenType.VALUE, "val", 0, 7)
        assert lexer.next_token() == Token(TokenType.VALUE, "next", 1)

    def test_non_ascii_offsets_count_characters(self) -> None:
        lexer = lex("--nom=café", "--clé=été")
        assert lexer.next_token().value == "nom"
        assert lexer.get_value() == "café"
        assert lexer.next_token().value == "clé"
        assert lexer.position.offset == 6
        assert lexer.get_value() == "été"


class TestLongFlagBytes:
    """bytes arguments keep their type for values."""

    def test_bytes_name_is_str(self) -> None:
        lexer = lex(b"--name=val")
        assert lexer.next_token().value == "name"
        assert lexer.get_value() == b"val"

    def test_undecodable_value_survives(self) -> None:
        lexer = lex(b"--path=/tmp/\xff\xfe")
        assert lexer.next_token().value == "path"
        assert lexer.get_value() == b"/tmp/\xff\xfe"

    def test_multibyte_name(self) -> None:
        lexer = lex("--ñame=ü".encode())
        assert lexer.next_token().value == "ñame"
        assert lexer.get_value() == "ü".encode()
