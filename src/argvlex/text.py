"""Platform text handling for raw argument values.

Arguments reach a process as platform text that is not guaranteed to be
valid under any encoding:

- ``bytes`` (POSIX argv as octets) may hold invalid UTF-8 sequences.
- ``str`` from ``sys.argv`` carries undecodable bytes as lone surrogates
  (PEP 383), and Windows command lines may contain unpaired UTF-16
  surrogates.

Both forms are viewed through ArgumentView: a ``str`` in which every
undecodable unit is exactly one lone surrogate character. Character counts
and offsets are measured on that view, while payloads are sliced from it and
converted back to the argument's original type without loss.
"""

from __future__ import annotations

from dataclasses import dataclass

ArgText = str | bytes

REPLACEMENT_CHAR = "\ufffd"


def is_undecodable(char: str) -> bool:
    """Whether a view character stands for an undecodable unit."""
    return "\ud800" <= char <= "\udfff"


def display_text(text: str) -> str:
    """Render view text for humans, replacing undecodable units with U+FFFD."""
    return "".join(REPLACEMENT_CHAR if is_undecodable(c) else c for c in text)


@dataclass(frozen=True, slots=True)
class ArgumentView:
    """A single argument and its character view.

    Attributes:
        raw: The argument exactly as supplied
        text: Character view (undecodable units as lone surrogates)
        encoding: Codec for ``bytes`` arguments; None for ``str`` arguments

    """

    raw: ArgText
    text: str
    encoding: str | None = None

    @classmethod
    def of(cls, raw: ArgText, encoding: str = "utf-8") -> ArgumentView:
        """Build the view of one argument.

        Raises:
            TypeError: If the argument is neither ``str`` nor ``bytes``.
        """
        if isinstance(raw, bytes):
            return cls(raw, raw.decode(encoding, "surrogateescape"), encoding)
        if isinstance(raw, str):
            return cls(raw, raw)
        raise TypeError(
            f"argument must be str or bytes, not {type(raw).__name__}"
        )

    def __len__(self) -> int:
        return len(self.text)

    def slice(self, start: int, end: int | None = None) -> ArgText:
        """Return characters ``start:end`` in the argument's original type."""
        piece = self.text[start:end]
        if self.encoding is None:
            return piece
        return piece.encode(self.encoding, "surrogateescape")

    def decode(self, start: int, end: int | None = None) -> str:
        """Return characters ``start:end`` as validated text.

        Raises:
            UnicodeDecodeError: For ``bytes`` arguments with invalid sequences.
            UnicodeEncodeError: For ``str`` arguments carrying lone surrogates.
        """
        if self.encoding is not None:
            return self.slice(start, end).decode(self.encoding)
        piece = self.text[start:end]
        piece.encode("utf-8")
        return piece

    def display(self) -> str:
        """Best-effort human-readable form of the whole argument."""
        return display_text(self.text)
