"""HTML renderer for document event streams.

Consumes events strictly in order, exactly once, with no lookahead. Heading
text is captured while rendering so the table of contents can be built
without scanning the output.

Thread Safety:
All per-render state is encapsulated in RenderState, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer
instance and call render() concurrently without synchronization.

Error Tolerance:
render() never raises on a malformed stream. Unbalanced or unknown events
degrade to no-ops (for example, ending a list when no list is open emits
nothing) and are reported at DEBUG level.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from marktoc.config import RenderConfig, get_render_config
from marktoc.events import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    Event,
    HardBreak,
    Heading,
    Html,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Rule,
    SoftBreak,
    Start,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Tag,
    Text,
)
from marktoc.policies import CellRolePolicy, get_cell_role_policy
from marktoc.stringbuilder import HtmlBuffer
from marktoc.toc import HeadingRecord
from marktoc.utils.logger import get_logger
from marktoc.utils.text import escape_html

logger = get_logger(__name__)


def _verbatim(value: str) -> str:
    return value


@dataclass(slots=True)
class RenderState:
    """Per-render mutable state.

    Created fresh for each render() call, so concurrent renders never share
    nesting stacks or heading lists.
    """

    list_stack: list[str] = field(default_factory=list)
    table_alignments: tuple[Alignment, ...] | None = None
    in_table_head: bool = False
    cell_index: int = 0
    open_cell_tag: str | None = None
    in_heading: bool = False
    headings: list[HeadingRecord] = field(default_factory=list)


class HtmlRenderer:
    """Render an event stream to an HTML fragment.

    Usage:
        >>> from marktoc.events import End, Heading, Start, Text
        >>> renderer = HtmlRenderer()
        >>> html, headings = renderer.render([
        ...     Start(Heading(1, "intro")), Text("Intro"), End(Heading(1, "intro")),
        ... ])
        >>> html
        '<h1>Intro</h1>\\n'
        >>> headings[0].text_content
        'Intro'

    Thread Safety:
        Each render() call creates an independent RenderState.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. When None, the active config of the
                calling context is read at the start of every render() call.
        """
        self._config = config

    @property
    def config(self) -> RenderConfig:
        return self._config if self._config is not None else get_render_config()

    def render(self, events: Iterable[Event]) -> tuple[str, list[HeadingRecord]]:
        """Render events to HTML.

        Args:
            events: Ordered event stream for one document. Consumed once.

        Returns:
            Tuple of (HTML body fragment, heading records in document order)
        """
        config = self.config
        ctx = _RenderPass(config)
        for event in events:
            ctx.dispatch(event)
        return ctx.sb.build(), ctx.state.headings


class _RenderPass:
    """One render() call: configuration resolved once, state owned exclusively."""

    __slots__ = (
        "sb",
        "state",
        "_attr",
        "_cell_role",
        "_heading_class",
        "_heading_ids",
        "_paragraph_class",
    )

    def __init__(self, config: RenderConfig) -> None:
        self.sb = HtmlBuffer()
        self.state = RenderState()
        self._attr: Callable[[str], str] = escape_html if config.escape_attributes else _verbatim
        self._cell_role: CellRolePolicy = get_cell_role_policy(config.cell_role)
        self._heading_class = self._class_attr(config.heading_class)
        self._paragraph_class = self._class_attr(config.paragraph_class)
        self._heading_ids = config.heading_ids

    def _class_attr(self, css_class: str | None) -> str:
        if css_class is None:
            return ""
        return f' class="{self._attr(css_class)}"'

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(self, event: Event) -> None:
        match event:
            case Start(tag=tag):
                self._start(tag)
            case End(tag=tag):
                self._end(tag)
            case Text(content=content):
                self._text(content)
            case Code(content=content):
                self.sb.append("<code>").append(escape_html(content)).append("</code>")
            case Rule():
                self.sb.line("<hr>")
            case SoftBreak():
                self.sb.line()
                if self.state.in_heading and self.state.headings:
                    self.state.headings[-1].text_content += " "
            case HardBreak():
                self.sb.line("<br>")
            case Html():
                logger.debug("Dropping raw HTML event")
            case _:
                logger.debug("Ignoring unrecognized event %r", event)

    def _text(self, content: str) -> None:
        self.sb.append(escape_html(content))
        if self.state.in_heading and self.state.headings:
            self.state.headings[-1].text_content += content

    # =========================================================================
    # Start tags
    # =========================================================================

    def _start(self, tag: Tag) -> None:
        sb = self.sb
        state = self.state
        match tag:
            case Heading():
                anchor_id = tag.anchor_id or ""
                attrs = self._heading_class
                if self._heading_ids and anchor_id:
                    attrs = f' id="{self._attr(anchor_id)}"{attrs}'
                sb.open(f"h{tag.level}", attrs)
                state.headings.append(HeadingRecord(level=tag.level, anchor_id=anchor_id))
                state.in_heading = True
            case Paragraph():
                sb.open("p", self._paragraph_class)
            case Strong():
                sb.open("strong")
            case Emphasis():
                sb.open("em")
            case Strikethrough():
                sb.open("s")
            case Link():
                sb.open("a", f' href="{self._attr(tag.url)}"')
            case Image():
                alt = self._attr(tag.alt_text)
                title = f' title="{alt}"' if tag.alt_text else ""
                sb.line(f'<img src="{self._attr(tag.url)}" alt="{alt}"{title}>')
            case List(ordered=True):
                start = tag.start_number if tag.start_number is not None else 1
                sb.open("ol", f' start="{start}"', newline=True)
                state.list_stack.append("ol")
            case List():
                sb.open("ul", newline=True)
                state.list_stack.append("ul")
            case ListItem():
                sb.open("li")
            case CodeBlock():
                language = self._attr(tag.language or "")
                sb.append(f'<pre><code class="language-{language}">')
            case BlockQuote():
                sb.open("blockquote", newline=True)
            case Table():
                sb.open("table", newline=True)
                state.table_alignments = tag.alignments
            case TableHead():
                sb.append("<thead>\n<tr>")
                state.in_table_head = True
                state.cell_index = 0
            case TableRow():
                sb.open("tr")
                state.cell_index = 0
            case TableCell():
                cell_tag = self._cell_tag()
                state.open_cell_tag = cell_tag
                sb.open(cell_tag)
            case _:
                logger.debug("Ignoring unrecognized start tag %r", tag)

    # =========================================================================
    # End tags
    # =========================================================================

    def _end(self, tag: Tag) -> None:
        sb = self.sb
        state = self.state
        match tag:
            case Heading():
                if not state.in_heading:
                    logger.debug("Heading end without an open heading")
                sb.close(f"h{tag.level}", newline=True)
                state.in_heading = False
            case Paragraph():
                sb.close("p", newline=True)
            case Strong():
                sb.close("strong")
            case Emphasis():
                sb.close("em")
            case Strikethrough():
                sb.close("s")
            case Link():
                sb.close("a")
            case Image():
                pass
            case List():
                if state.list_stack:
                    sb.close(state.list_stack.pop(), newline=True)
                else:
                    logger.debug("List end with empty list stack; nothing emitted")
            case ListItem():
                sb.close("li", newline=True)
            case CodeBlock():
                sb.line("</code></pre>")
            case BlockQuote():
                sb.close("blockquote", newline=True)
            case Table():
                sb.close("table", newline=True)
                state.table_alignments = None
                state.in_table_head = False
            case TableHead():
                sb.line("</tr></thead>")
                state.in_table_head = False
            case TableRow():
                sb.close("tr", newline=True)
            case TableCell():
                cell_tag = state.open_cell_tag or self._cell_tag()
                sb.close(cell_tag)
                state.open_cell_tag = None
                state.cell_index += 1
            case _:
                logger.debug("Ignoring unrecognized end tag %r", tag)

    def _cell_tag(self) -> str:
        state = self.state
        is_header = self._cell_role(state.table_alignments, state.cell_index, state.in_table_head)
        return "th" if is_header else "td"


def render(
    events: Iterable[Event], config: RenderConfig | None = None
) -> tuple[str, list[HeadingRecord]]:
    """Render events with a one-off HtmlRenderer.

    Args:
        events: Ordered event stream for one document
        config: Render configuration (active context config when None)

    Returns:
        Tuple of (HTML body fragment, heading records)
    """
    return HtmlRenderer(config).render(events)
