"""Table-of-contents builder.

Turns the ordered heading records collected by the HTML renderer into a nested
``<ul>`` navigation fragment::

    <nav>
    <h2>Table of Contents</h2>
    <ul>
    <li><a href="#intro">Intro</a></li>
    <ul>
    <li><a href="#details">Details</a></li>
    </ul>
    </ul>
    </nav>

Nesting Strategies:
- step: one ``<ul>`` per heading level stepped through. A jump from level 1 to
  level 4 opens three lists even though levels 2 and 3 never occur. This is the
  historical output and the default.
- compact: one ``<ul>`` per increase in depth, whatever the size of the jump.

Thread Safety:
build_toc() keeps all state in locals. HeadingRecord is only mutated by the
renderer that created it, before it is handed to build_toc().
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from marktoc.stringbuilder import HtmlBuffer
from marktoc.utils.text import escape_html

MIN_LEVEL = 1
MAX_LEVEL = 6

DEFAULT_TOC_TITLE = "Table of Contents"


@dataclass(slots=True)
class HeadingRecord:
    """Heading captured during rendering.

    ``text_content`` holds the raw, unescaped heading text. It is escaped
    once, when the TOC entry is emitted.
    """

    level: int
    anchor_id: str = ""
    text_content: str = ""


def _entry(sb: HtmlBuffer, heading: HeadingRecord) -> None:
    sb.line(
        f'<li><a href="#{heading.anchor_id}">{escape_html(heading.text_content)}</a></li>'
    )


def _nest_step(headings: Sequence[HeadingRecord], sb: HtmlBuffer) -> None:
    current_level = MIN_LEVEL
    for heading in headings:
        while heading.level > current_level and current_level < MAX_LEVEL:
            sb.line("<ul>")
            current_level += 1
        while heading.level < current_level and current_level > MIN_LEVEL:
            sb.line("</ul>")
            current_level -= 1
        _entry(sb, heading)

    while current_level > MIN_LEVEL:
        sb.line("</ul>")
        current_level -= 1


def _nest_compact(headings: Sequence[HeadingRecord], sb: HtmlBuffer) -> None:
    # Level of the entries in each open list; index 0 is the outer list.
    stack: list[int] = []
    for heading in headings:
        if not stack:
            stack.append(heading.level)
        else:
            while len(stack) > 1 and heading.level < stack[-1]:
                sb.line("</ul>")
                stack.pop()
            if heading.level < stack[0]:
                # Shallower than every entry so far: the outer list takes its level.
                stack[0] = heading.level
            if heading.level > stack[-1]:
                sb.line("<ul>")
                stack.append(heading.level)
        _entry(sb, heading)

    for _ in stack[1:]:
        sb.line("</ul>")


NESTING_STRATEGIES: dict[str, Callable[[Sequence[HeadingRecord], HtmlBuffer], None]] = {
    "step": _nest_step,
    "compact": _nest_compact,
}

DEFAULT_NESTING = "step"


def build_toc(
    headings: Sequence[HeadingRecord],
    *,
    nesting: str = DEFAULT_NESTING,
    title: str = DEFAULT_TOC_TITLE,
) -> str:
    """Build the navigation fragment for ``headings``.

    Args:
        headings: Heading records in document order
        nesting: Name of a nesting strategy ("step" or "compact")
        title: Text of the ``<h2>`` above the list (escaped)

    Returns:
        HTML fragment wrapped in ``<nav>``. With no headings the inner list is
        empty but still present.

    Raises:
        KeyError: If ``nesting`` names no known strategy
    """
    nest = NESTING_STRATEGIES[nesting]

    sb = HtmlBuffer()
    sb.line("<nav>")
    sb.line(f"<h2>{escape_html(title)}</h2>")
    sb.line("<ul>")
    nest(headings, sb)
    sb.line("</ul>")
    sb.line("</nav>")
    return sb.build()


__all__ = [
    "DEFAULT_NESTING",
    "DEFAULT_TOC_TITLE",
    "HeadingRecord",
    "NESTING_STRATEGIES",
    "build_toc",
]
