"""Utility modules for marktoc.

Provides:
- text: escape_html, slugify, unique_slug
- logger: get_logger, configure_logging
"""

from marktoc.utils.logger import configure_logging, get_logger
from marktoc.utils.text import escape_html, slugify, unique_slug

__all__ = [
    "configure_logging",
    "escape_html",
    "get_logger",
    "slugify",
    "unique_slug",
]
