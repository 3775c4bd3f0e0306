"""Long-flag scanner mixin."""

from __future__ import annotations

from argvlex.errors import DecodeError
from argvlex.lexer.classifiers import split_long_flag
from argvlex.lexer.modes import LONG_PREFIX
from argvlex.text import ArgumentView
from argvlex.tokens import Token, TokenType


class LongFlagScannerMixin:
    """Mixin providing ``--name`` / ``--name=value`` scanning.

    With an attached value the offset is left just after ``=`` and the
    argument stays current, so ``get_value`` reads the value from the same
    argument.

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

    def _scan_long_flag(self, view: ArgumentView) -> Token | DecodeError:
        """Scan a long flag at the current argument.

        Decode failures leave the position untouched; the caller steps over
        the argument with ``skip()``.

        Args:
            view: The current argument

        Returns:
            LONG_FLAG token, or DecodeError if the name is not valid text.
        """
        name_end, value_start = split_long_flag(view.text)
        try:
            name = view.decode(len(LONG_PREFIX), name_end)
        except UnicodeError as exc:
            return self._decode_error(view, exc)

        token = Token(TokenType.LONG_FLAG, name, self._index, len(LONG_PREFIX))
        if value_start:
            self._offset = value_start
        else:
            self._advance()
        return token
