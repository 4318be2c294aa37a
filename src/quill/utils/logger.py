"""Logger factory for Quill.

Every Quill module logs under the ``quill`` namespace, so one call such as
``logging.getLogger("quill").setLevel(logging.DEBUG)`` is enough to see
which extractor fell back to returning its input unchanged. Quill never
installs handlers itself.

Example:
    >>> from quill.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("between(): end delimiter %r not found", "}")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the ``quill`` namespace.

    Module names from this package (``quill.extract``) are used as they
    are; any other name is nested under ``quill.`` so that callers' loggers
    and Quill's own stay in one tree.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("quill.extract").name
        'quill.extract'
        >>> get_logger("codegen").name
        'quill.codegen'
    """
    if name != "quill" and not name.startswith("quill."):
        name = f"quill.{name}"
    return logging.getLogger(name)
