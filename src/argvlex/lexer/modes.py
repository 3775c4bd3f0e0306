"""Argument kinds and the marker characters the lexer recognizes."""

from __future__ import annotations

from enum import Enum, auto

DASH = "-"
LONG_PREFIX = "--"
ASSIGN = "="


class ArgumentKind(Enum):
    """Kinds of argument, decided from their leading characters.

    - END_OF_OPTIONS: exactly ``--``
    - LONG_FLAG: ``--name`` or ``--name=value``
    - SHORT_CLUSTER: ``-abc``, ``-a=value``, ``-avalue``
    - LONE_DASH: exactly ``-``, a dash with no cluster after it
    - VALUE: everything else

    """

    END_OF_OPTIONS = auto()
    LONG_FLAG = auto()
    SHORT_CLUSTER = auto()
    LONE_DASH = auto()
    VALUE = auto()
