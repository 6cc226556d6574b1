"""Logger access for mathlang modules.

The library installs no handlers. Applications opt in by configuring the
``mathlang`` logger; the lexer reports a string literal that runs off the
end of input (non-strict mode) at WARNING, and each LexError it raises at
DEBUG.

Example:
    >>> import logging
    >>> logging.getLogger("mathlang").setLevel(logging.DEBUG)
    >>> from mathlang import tokenize
    >>> tokenize('note "unfinished')  # logs mathlang.lexer.core WARNING
    [Token(NAME, 'note', 1:1)]
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a mathlang module.

    Names outside the package are nested under ``mathlang.`` so every
    record can be filtered through the one package logger.

    Args:
        name: Module name, normally ``__name__``

    Example:
        >>> get_logger("mathlang.lexer.core").name
        'mathlang.lexer.core'
        >>> get_logger("calc_parser").name
        'mathlang.calc_parser'
    """
    if name != "mathlang" and not name.startswith("mathlang."):
        name = f"mathlang.{name}"
    return logging.getLogger(name)
