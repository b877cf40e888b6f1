"""Text helpers: HTML escaping and heading slugs.

Example:
    >>> from marktoc.utils.text import escape_html, slugify
    >>> escape_html("a < b")
    'a &lt; b'
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html
import re

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[-\s]+")


def escape_html(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes. Safe for element content and
    double-quoted attribute values. Applying it once to raw text never
    produces double escaping; applying it twice does.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to a URL fragment.

    Keeps Unicode word characters, lowercases, and collapses runs of
    whitespace and hyphens into ``separator``.

    Examples:
        >>> slugify("Test & Code")
        'test-code'
        >>> slugify("Café au lait")
        'café-au-lait'
        >>> slugify("!!!")
        ''
    """
    if not text:
        return ""
    text = _NON_WORD.sub("", text.lower().strip())
    return _SEPARATORS.sub(separator, text).strip(separator)


def unique_slug(slug: str, seen: set[str]) -> str:
    """Return ``slug`` or the first free ``slug-N`` variant, and mark it seen.

    Examples:
        >>> seen: set[str] = set()
        >>> unique_slug("intro", seen), unique_slug("intro", seen)
        ('intro', 'intro-1')
    """
    candidate = slug
    counter = 1
    while candidate in seen:
        candidate = f"{slug}-{counter}"
        counter += 1
    seen.add(candidate)
    return candidate
