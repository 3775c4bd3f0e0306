"""Exception classes for argvlex.

The lexer reports malformed arguments by returning these objects from
``Lexer.next_token`` rather than raising them, so a caller can decide to
abort, skip the argument, or report and continue. ``Lexer.tokenize`` raises
them for callers that prefer exceptions.
"""

from __future__ import annotations


class ArgvLexError(Exception):
    """Base exception for all argvlex errors.

    Subclass this for specific error categories.
    """

    pass


class DecodeError(ArgvLexError):
    """An argument (or the relevant slice of it) is not valid text.

    Only flag names and short-flag characters are decoded; positional values
    are handed back as raw platform text and never produce this error.
    """

    def __init__(
        self,
        argument: str,
        reason: UnicodeError | str,
        index: int | None = None,
    ) -> None:
        """Initialize decode error.

        Args:
            argument: Offending argument, rendered for display (undecodable
                units replaced with U+FFFD)
            reason: Underlying decode failure
            index: Position of the argument in the vector (optional)
        """
        self.argument = argument
        self.reason = reason
        self.index = index

        location = f"argument {index}: " if index is not None else ""
        super().__init__(
            f"{location}Invalid unicode character(s) in argument {argument!r}: {reason}"
        )
