"""Argument classification for the argvlex lexer.

Classifiers are pure functions: they inspect an argument's character view
and never touch scan state.
"""

from __future__ import annotations

from argvlex.lexer.modes import ASSIGN, DASH, LONG_PREFIX, ArgumentKind


def classify_argument(text: str) -> ArgumentKind:
    """Classify an argument by its leading dashes.

    A lone ``-`` is dash-prefixed but carries no flag, so it is neither a
    short cluster nor a value.

    Args:
        text: Character view of the argument

    Returns:
        The ArgumentKind for the argument.
    """
    if text.startswith(LONG_PREFIX):
        if len(text) == len(LONG_PREFIX):
            return ArgumentKind.END_OF_OPTIONS
        return ArgumentKind.LONG_FLAG
    if text.startswith(DASH):
        if len(text) == len(DASH):
            return ArgumentKind.LONE_DASH
        return ArgumentKind.SHORT_CLUSTER
    return ArgumentKind.VALUE


def split_long_flag(text: str) -> tuple[int, int]:
    """Locate the name of a long flag.

    Returns:
        (name_end, value_start). ``value_start`` is 0 when the argument has
        no attached value. An ``=`` right after the dashes does not split.
    """
    eq = text.find(ASSIGN, len(LONG_PREFIX))
    if eq > len(LONG_PREFIX):
        return eq, eq + 1
    return len(text), 0


def has_pending_value(kind: ArgumentKind, text: str, offset: int) -> bool:
    """Whether ``offset`` marks an attached value nobody has claimed yet.

    For long flags any non-zero offset points past ``=``. In a short cluster
    an ``=`` is never yielded as a flag once a flag precedes it, so an ``=``
    just before the offset is always a separator.
    """
    if offset == 0:
        return False
    if kind is ArgumentKind.LONG_FLAG:
        return True
    if kind is ArgumentKind.SHORT_CLUSTER:
        return offset > 2 and text[offset - 1] == ASSIGN
    return False
