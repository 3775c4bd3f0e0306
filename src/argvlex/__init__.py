"""
argvlex — command-line argument tokenizer

Turns the raw argument vector of a process into a stream of short flags,
long flags and positional values. It does not know which flags exist,
convert types or render help; a command layer built on top does that.

Quick Start:
    >>> from argvlex import Lexer, TokenType
    >>> lexer = Lexer(["prog", "-v", "--output=out.txt", "input.txt"])
    >>> for token in lexer.tokenize():
    ...     if token.type is TokenType.LONG_FLAG:
    ...         print(token.value, lexer.get_value())
    ...     else:
    ...         print(token)
-v
output out.txt
'input.txt'

    >>> # Whole vector at once
    >>> from argvlex import tokenize
    >>> [str(t) for t in tokenize(["-xy", "file"])]
    ['-x', '-y', "'file'"]

Arguments may be ``str`` (as in ``sys.argv``, with undecodable bytes
surrogate-escaped) or ``bytes``. Values come back in the type they went in.
"""

from collections.abc import Iterable

from argvlex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from argvlex.errors import ArgvLexError, DecodeError
from argvlex.lexer import ArgumentKind, Lexer
from argvlex.position import ScanPosition
from argvlex.text import ArgText, ArgumentView
from argvlex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    argv: Iterable[ArgText],
    *,
    includes_program_name: bool = False,
) -> list[Token]:
    """Tokenize a whole argument vector without claiming values.

    Attached values nobody claims come back as VALUE tokens, so
    ``--out=x`` yields ``--out`` followed by ``'x'``. Tokenization stops at
    a ``--`` marker.

    Args:
        argv: Arguments as ``str`` or ``bytes``
        includes_program_name: Whether element zero is the program name

    Returns:
        List of tokens in order

    Raises:
        DecodeError: When a flag cannot be decoded.

    Example:
        >>> tokenize(["-ab", "--", "-c"])
        [Token(SHORT_FLAG, 'a', 0:1), Token(SHORT_FLAG, 'b', 0:2)]
    """
    return list(Lexer(argv, includes_program_name).tokenize())


__all__ = [
    "ArgText",
    "ArgumentKind",
    "ArgumentView",
    "ArgvLexError",
    "DecodeError",
    "Lexer",
    "LexerConfig",
    "ScanPosition",
    "Token",
    "TokenType",
    "__version__",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
    "tokenize",
]
