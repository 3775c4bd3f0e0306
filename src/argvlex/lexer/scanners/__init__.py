"""Flag scanners for the argvlex lexer.

Each scanner is a mixin that consumes one token from the current argument
and updates the scan position.
"""

from argvlex.lexer.scanners.long import LongFlagScannerMixin
from argvlex.lexer.scanners.short import ShortFlagScannerMixin

__all__ = [
    "LongFlagScannerMixin",
    "ShortFlagScannerMixin",
]
