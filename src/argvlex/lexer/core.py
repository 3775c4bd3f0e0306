"""State-machine lexer over a command-line argument vector.

Walks the vector in a single forward pass with O(1) extra state: the index
of the current argument and a character offset inside it. The offset lets
short-flag clusters (``-abc``) and attached values (``-a=val``,
``--name=val``, ``-aval``) be resolved one piece at a time, with
``get_value`` claiming the value that belongs to the flag just returned.

Thread Safety:
Lexer instances mutate their position on every call; do not share one
across threads. The captured vector is immutable, so ``fork()`` copies
can be scanned independently.

"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from argvlex.config import LexerConfig, get_lexer_config
from argvlex.errors import DecodeError
from argvlex.lexer.classifiers import classify_argument, has_pending_value
from argvlex.lexer.modes import ArgumentKind
from argvlex.lexer.scanners import LongFlagScannerMixin, ShortFlagScannerMixin
from argvlex.position import ScanPosition
from argvlex.text import ArgText, ArgumentView
from argvlex.tokens import Token, TokenType
from argvlex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Scanners (consume one token and move the position)
    LongFlagScannerMixin,
    ShortFlagScannerMixin,
):
    """Pull-based tokenizer for a command-line argument vector.

    Each ``next_token`` call returns a Token, a DecodeError, or None at the
    end of the stream. Right after a flag token the caller may call
    ``get_value`` to claim the flag's value: the rest of the same argument
    when one is pending, otherwise the following argument if it is not a
    flag.

    Usage:
            >>> lexer = Lexer(["prog", "-vo=out.txt", "--jobs", "4", "src"])
            >>> lexer.next_token()
        Token(SHORT_FLAG, 'v', 1:1)
            >>> lexer.next_token()
        Token(SHORT_FLAG, 'o', 1:2)
            >>> lexer.get_value()
        'out.txt'
            >>> lexer.next_token()
        Token(LONG_FLAG, 'jobs', 2:2)
            >>> lexer.get_value()
        '4'
            >>> lexer.next_token()
        Token(VALUE, 'src', 4:0)

    The ``--`` marker ends the stream without being consumed, so the caller
    can detect it and read what follows with ``take_argument`` or
    ``remaining``.

    """

    __slots__ = (
        "_argv",
        "_argv_len",  # Cached len(argv)
        "_index",
        "_offset",
        "_start_index",  # Initial index, for set_includes_program_name
    )

    def __init__(
        self,
        argv: Iterable[ArgText],
        includes_program_name: bool | None = None,
        *,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer with a snapshot of the argument vector.

        Args:
            argv: Arguments as ``str`` or ``bytes``
            includes_program_name: Whether element zero is the program name.
                Defaults to the active LexerConfig.
            config: Configuration to use instead of the active one

        Raises:
            TypeError: If an argument is neither ``str`` nor ``bytes``.
        """
        config = config or get_lexer_config()
        if includes_program_name is None:
            includes_program_name = config.includes_program_name

        self._argv: tuple[ArgumentView, ...] = tuple(
            ArgumentView.of(arg, config.encoding) for arg in argv
        )
        self._argv_len = len(self._argv)
        start = ScanPosition.start(includes_program_name)
        self._index: int = start.index
        self._offset: int = start.offset
        self._start_index: int = start.index

    @classmethod
    def from_env(cls, *, config: LexerConfig | None = None) -> Lexer:
        """Create a lexer over this process's ``sys.argv``.

        Element zero is the program name. Undecodable bytes are already
        surrogate-escaped by the interpreter and survive unchanged.
        """
        return cls(sys.argv, includes_program_name=True, config=config)

    def __repr__(self) -> str:
        return f"Lexer({self._argv_len} args, at {self.position})"

    # =========================================================================
    # Mode and state
    # =========================================================================

    def set_includes_program_name(self, includes_program_name: bool) -> None:
        """Change whether element zero is the program name.

        Only honoured before anything has been scanned; afterwards it is a
        no-op so an in-progress scan cannot be corrupted.
        """
        if self._offset != 0 or self._index != self._start_index:
            return
        start = ScanPosition.start(includes_program_name)
        self._index = start.index
        self._start_index = start.index

    def is_finished(self) -> bool:
        """Whether every argument has been consumed."""
        return self._index >= self._argv_len

    @property
    def position(self) -> ScanPosition:
        """Current scan position."""
        return ScanPosition(self._index, self._offset)

    @property
    def argv(self) -> tuple[ArgText, ...]:
        """The captured argument vector, as supplied."""
        return tuple(view.raw for view in self._argv)

    def fork(self) -> Lexer:
        """Independent lexer over the same vector, at the same position."""
        clone = type(self).__new__(type(self))
        clone._argv = self._argv
        clone._argv_len = self._argv_len
        clone._index = self._index
        clone._offset = self._offset
        clone._start_index = self._start_index
        return clone

    # =========================================================================
    # Token stream
    # =========================================================================

    def next_token(self) -> Token | DecodeError | None:
        """Read the next token.

        Returns:
            A Token; a DecodeError when a flag name or short-flag character
            is not valid text; None at the end of the vector, at an
            unconsumed ``--`` marker, or at a lone ``-``, which is left in
            place for the caller.
        """
        if self._index >= self._argv_len:
            return None

        view = self._argv[self._index]
        kind = classify_argument(view.text)

        if kind is ArgumentKind.END_OF_OPTIONS or kind is ArgumentKind.LONE_DASH:
            return None
        if has_pending_value(kind, view.text, self._offset):
            return self._emit_unclaimed_value(view)
        if kind is ArgumentKind.LONG_FLAG:
            return self._scan_long_flag(view)
        if kind is ArgumentKind.SHORT_CLUSTER:
            return self._scan_short_flag(view)

        token = Token(TokenType.VALUE, view.raw, self._index)
        self._advance()
        return token

    def tokenize(self) -> Iterator[Token]:
        """Iterate over tokens until the stream ends.

        ``get_value`` may be called between iterations to claim a flag's
        value.

        Yields:
            Token objects one at a time

        Raises:
            DecodeError: When an argument cannot be decoded.
        """
        while True:
            result = self.next_token()
            if result is None:
                return
            if isinstance(result, DecodeError):
                raise result
            yield result

    def get_value(self) -> ArgText | None:
        """Claim the value of the flag just returned.

        Precedence:
        1. The current argument does not start with a dash: return it whole.
        2. A position inside the current argument is pending (after ``=``
           or within a cluster): return the rest of the argument.
        3. Otherwise there is no value; return None.

        The value is returned in the argument's original type and is never
        decoded.
        """
        if self._index >= self._argv_len:
            return None

        view = self._argv[self._index]
        if classify_argument(view.text) is ArgumentKind.VALUE:
            self._advance()
            return view.raw
        if self._offset > 0:
            value = view.slice(self._offset)
            self._advance()
            return value
        return None

    # =========================================================================
    # Cursor operations
    # =========================================================================

    def at_end_of_options(self) -> bool:
        """Whether the current argument is an unconsumed ``--`` marker."""
        if self._index >= self._argv_len or self._offset != 0:
            return False
        view = self._argv[self._index]
        return classify_argument(view.text) is ArgumentKind.END_OF_OPTIONS

    def skip(self) -> bool:
        """Step over the current argument, whatever its state.

        Returns:
            False if the stream was already exhausted.
        """
        if self._index >= self._argv_len:
            return False
        self._advance()
        return True

    def take_argument(self) -> ArgText | None:
        """Read the current argument whole, as a literal value.

        Unlike ``get_value`` this ignores leading dashes, which is what a
        caller wants after ``--``. A partly consumed argument yields only
        its unconsumed part.
        """
        if self._index >= self._argv_len:
            return None
        value = self._argv[self._index].slice(self._offset)
        self._advance()
        return value

    def remaining(self) -> list[ArgText]:
        """Consume and return every argument from the current one on."""
        values: list[ArgText] = []
        while self._index < self._argv_len:
            values.append(self._argv[self._index].slice(self._offset))
            self._advance()
        return values

    # =========================================================================
    # Internal helpers
    # =========================================================================

    def _advance(self) -> None:
        """Move to the start of the next argument."""
        self._index += 1
        self._offset = 0

    def _emit_unclaimed_value(self, view: ArgumentView) -> Token:
        """Emit an attached value the caller did not claim as a VALUE token."""
        logger.debug(
            "Unclaimed attached value in argument %d at offset %d",
            self._index,
            self._offset,
        )
        token = Token(
            TokenType.VALUE, view.slice(self._offset), self._index, self._offset
        )
        self._advance()
        return token

    def _decode_error(
        self, view: ArgumentView, reason: UnicodeError, index: int | None = None
    ) -> DecodeError:
        """Build a decode error for an argument."""
        if index is None:
            index = self._index
        logger.debug("Undecodable flag in argument %d: %s", index, reason)
        return DecodeError(view.display(), reason, index)
