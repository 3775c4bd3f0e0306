r"""Logger access for argvlex.

The lexer reports two things at DEBUG level: flag names or short-flag
characters that fail to decode, and attached values (``--out=x``) that the
caller never claimed with ``get_value``. Everything lives under the
``argvlex`` logger, so ``logging.getLogger("argvlex").setLevel(logging.DEBUG)``
turns on tracing for a whole scan. No handlers are installed here.

Example:
    >>> import logging
    >>> from argvlex import Lexer
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> lexer = Lexer([b"--\xff"], includes_program_name=False)
    >>> lexer.next_token()  # logs "Undecodable flag in argument 0: ..."
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``argvlex`` namespace.

    Module loggers (``__name__`` inside the package) pass through unchanged;
    any other name is prefixed, so an application embedding the lexer can
    tune all of its output from one place.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("argvlex.lexer.core").name
        'argvlex.lexer.core'
        >>> get_logger("scan").name
        'argvlex.scan'
    """
    if not (name == "argvlex" or name.startswith("argvlex.")):
        name = f"argvlex.{name}"
    return logging.getLogger(name)
