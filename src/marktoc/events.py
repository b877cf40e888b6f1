"""Document events consumed by the marktoc renderer.

An event source yields a flat, ordered stream of events. Structural elements
arrive as ``Start(tag)`` / ``End(tag)`` pairs; leaf content arrives as
``Text``, ``Code``, ``Rule`` and the break events.

Event Hierarchy:
Event
├── Start(tag)
├── End(tag)
├── Text(content)
├── Code(content)
├── Rule
├── SoftBreak
├── HardBreak
└── Html(content)

Tag
├── Heading(level, anchor_id)
├── Paragraph
├── Strong / Emphasis / Strikethrough
├── Link(url)
├── Image(url, alt_text)
├── List(ordered, start_number)
├── ListItem
├── CodeBlock(language)
├── BlockQuote
├── Table(alignments)
├── TableHead / TableRow / TableCell

Thread Safety:
All events and tags are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Alignment(Enum):
    """Column alignment of a table."""

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# =============================================================================
# Tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Tag:
    """Base class for structural tags carried by Start/End events.

    Subclasses not known to a renderer are ignored by it.

    """


@dataclass(frozen=True, slots=True)
class Heading(Tag):
    """Section heading.

    HTML: <h1>..</h1> through <h6>..</h6>

    """

    level: int
    anchor_id: str | None = None


@dataclass(frozen=True, slots=True)
class Paragraph(Tag):
    pass


@dataclass(frozen=True, slots=True)
class Strong(Tag):
    pass


@dataclass(frozen=True, slots=True)
class Emphasis(Tag):
    pass


@dataclass(frozen=True, slots=True)
class Strikethrough(Tag):
    pass


@dataclass(frozen=True, slots=True)
class Link(Tag):
    url: str


@dataclass(frozen=True, slots=True)
class Image(Tag):
    """Inline image. Self-contained: no content events follow it."""

    url: str
    alt_text: str = ""


@dataclass(frozen=True, slots=True)
class List(Tag):
    """Ordered or unordered list.

    ``start_number`` is only meaningful for ordered lists.

    """

    ordered: bool = False
    start_number: int | None = None


@dataclass(frozen=True, slots=True)
class ListItem(Tag):
    pass


@dataclass(frozen=True, slots=True)
class CodeBlock(Tag):
    language: str | None = None


@dataclass(frozen=True, slots=True)
class BlockQuote(Tag):
    pass


@dataclass(frozen=True, slots=True)
class Table(Tag):
    """GFM table. One alignment entry per column."""

    alignments: tuple[Alignment, ...] = ()


@dataclass(frozen=True, slots=True)
class TableHead(Tag):
    pass


@dataclass(frozen=True, slots=True)
class TableRow(Tag):
    pass


@dataclass(frozen=True, slots=True)
class TableCell(Tag):
    pass


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True, slots=True)
class Event:
    """Base class for all document events."""


@dataclass(frozen=True, slots=True)
class Start(Event):
    tag: Tag


@dataclass(frozen=True, slots=True)
class End(Event):
    tag: Tag


@dataclass(frozen=True, slots=True)
class Text(Event):
    """Literal text. Escaped by the renderer."""

    content: str


@dataclass(frozen=True, slots=True)
class Code(Event):
    """Inline code span."""

    content: str


@dataclass(frozen=True, slots=True)
class Rule(Event):
    """Thematic break (horizontal rule)."""


@dataclass(frozen=True, slots=True)
class SoftBreak(Event):
    pass


@dataclass(frozen=True, slots=True)
class HardBreak(Event):
    pass


@dataclass(frozen=True, slots=True)
class Html(Event):
    """Raw HTML from the source document."""

    content: str


__all__ = [
    "Alignment",
    # Tags
    "Tag",
    "BlockQuote",
    "CodeBlock",
    "Emphasis",
    "Heading",
    "Image",
    "Link",
    "List",
    "ListItem",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableHead",
    "TableRow",
    # Events
    "Event",
    "Code",
    "End",
    "HardBreak",
    "Html",
    "Rule",
    "SoftBreak",
    "Start",
    "Text",
]
