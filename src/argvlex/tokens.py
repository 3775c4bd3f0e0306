"""Token and TokenType definitions for the argvlex lexer.

The lexer produces a stream of Token objects that a command layer consumes.
Each Token has a type, a value, and the scan position it was read from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from argvlex.position import ScanPosition
from argvlex.text import ArgText


class TokenType(Enum):
    """Token types produced by the lexer."""

    SHORT_FLAG = auto()  # -a, one letter of -abc
    LONG_FLAG = auto()  # --name, --name=value
    VALUE = auto()  # positional argument or unclaimed attached value


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Flag character or long-flag name (``str``), or the raw
            platform text of a value (``str`` or ``bytes``)
        index: Index of the argument the token was read from
        offset: Character offset of the token inside that argument

    Long-flag names are owned strings, so tokens stay valid after the
    lexer moves on.

    """

    type: TokenType
    value: ArgText
    index: int
    offset: int = 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + ("..." if isinstance(val, str) else b"...")
        return f"Token({self.type.name}, {val!r}, {self.index}:{self.offset})"

    def __str__(self) -> str:
        """Render the token the way it appeared on the command line."""
        if self.type is TokenType.SHORT_FLAG:
            return f"-{self.value}"
        if self.type is TokenType.LONG_FLAG:
            return f"--{self.value}"
        return repr(self.value)

    @property
    def position(self) -> ScanPosition:
        """Scan position the token was read from."""
        return ScanPosition(self.index, self.offset)

    @property
    def is_flag(self) -> bool:
        """Whether the token is a short or long flag."""
        return self.type is not TokenType.VALUE
