"""Scan position tracking for the argument lexer.

Provides ScanPosition, the explicit (index, offset) cursor of a scan session.
Tokens and errors refer back to it for messages and debugging.

Thread Safety:
ScanPosition is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class ScanPosition:
    """Position of a scan session within an argument vector.

    Attributes:
        index: Index of the argument being scanned. Equal to the vector
            length once the stream is exhausted.
        offset: Characters of ``argv[index]`` already consumed, counted from
            the start of the argument (leading dashes included). Always 0
            right after ``index`` advances.

    Examples:
            >>> ScanPosition(1, 2)
        ScanPosition(index=1, offset=2)
            >>> str(ScanPosition(1, 2))
        '1:2'

    """

    index: int
    offset: int = 0

    def __str__(self) -> str:
        """Format position for error messages.

        Returns:
            Formatted string like "3:1"
        """
        return f"{self.index}:{self.offset}"

    def next_argument(self) -> ScanPosition:
        """Position at the start of the following argument."""
        return ScanPosition(self.index + 1, 0)

    @classmethod
    def start(cls, includes_program_name: bool) -> ScanPosition:
        """Initial position for a vector with or without a program name."""
        return cls(1 if includes_program_name else 0, 0)
