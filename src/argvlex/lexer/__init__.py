"""State-machine lexer for command-line argument vectors.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ArgumentKind
├── core.py              # Lexer class (mixin composition + cursor operations)
├── modes.py             # ArgumentKind enum, marker characters
├── classifiers.py       # Pure argument classification
└── scanners/            # Token scanners
    ├── long.py          # --name, --name=value
    └── short.py         # -abc, -a=value, -avalue

Usage:
    >>> from argvlex.lexer import Lexer
    >>> lexer = Lexer(["-ab", "--out=x", "file"], includes_program_name=False)
    >>> for token in lexer.tokenize():
    ...     print(token)
-a
-b
--out
'x'
'file'

"""

from argvlex.lexer.core import Lexer
from argvlex.lexer.modes import ArgumentKind

__all__ = ["ArgumentKind", "Lexer"]
