"""Logging helpers for marktoc.

Every module logs through a standard library logger under the ``marktoc``
namespace, so applications can tune the whole package with one logger.

Example:
    >>> from marktoc.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "marktoc"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance named ``marktoc.<name>``

    Example:
        >>> get_logger("toc").name
        'marktoc.toc'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Configure console logging for command-line use.

    Args:
        verbose: Log INFO messages when True, WARNING and above otherwise
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
