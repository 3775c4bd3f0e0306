"""Short-flag cluster scanner mixin."""

from __future__ import annotations

from argvlex.errors import DecodeError
from argvlex.lexer.modes import ASSIGN
from argvlex.text import ArgumentView
from argvlex.tokens import Token, TokenType


class ShortFlagScannerMixin:
    """Mixin providing ``-abc`` cluster scanning.

    Yields one character per call. The offset walks through the cluster:
    - ``-abc``: a, b, c, then the next argument
    - ``-a=val``: a, with the offset left after ``=``
    - ``-aval``: a, then ``get_value`` returns ``val``

    """

    _index: int
    _offset: int

    def _advance(self) -> None:
        """Move to the next argument. Implemented by Lexer."""
        raise NotImplementedError

    def _decode_error(
        self, view: ArgumentView, reason: UnicodeError, index: int | None = None
    ) -> DecodeError:
        """Build a decode error for the current argument. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_short_flag(self, view: ArgumentView) -> Token | DecodeError:
        """Scan one character of a short-flag cluster.

        The position moves before the character is checked, so a malformed
        character is consumed and the rest of the cluster stays reachable.

        Args:
            view: The current argument

        Returns:
            SHORT_FLAG token, or DecodeError for an undecodable character.
        """
        text = view.text
        index = self._index
        read = self._offset or 1
        following = read + 1

        if following < len(text) and text[following] == ASSIGN:
            self._offset = following + 1
        elif following < len(text):
            self._offset = following
        else:
            self._advance()

        try:
            char = view.decode(read, following)
        except UnicodeError as exc:
            return self._decode_error(view, exc, index)
        return Token(TokenType.SHORT_FLAG, char, index, read)
