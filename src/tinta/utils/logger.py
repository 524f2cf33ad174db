"""Logger factory for Tinta modules.

Every module logs under the ``tinta`` namespace so an application can turn
on tokenizer diagnostics (registry builds, plain-text fallbacks, cache hits)
with a single ``logging.getLogger("tinta").setLevel(logging.DEBUG)``.
Tinta never installs handlers itself.

Example:
    >>> from tinta.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("No grammar for %r, using plain text", "cobol")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``tinta`` namespace.

    Names already under ``tinta`` are used as-is; anything else is nested
    under it, so records from extension grammars reach the same handlers.

    Example:
        >>> get_logger("ini_grammar").name
        'tinta.ini_grammar'
    """
    if not (name == "tinta" or name.startswith("tinta.")):
        name = f"tinta.{name}"
    return logging.getLogger(name)
