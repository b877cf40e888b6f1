"""Event source backed by markdown-it-py.

markdown-it-py already produces a flat token stream of ``*_open`` /
``*_close`` pairs with inline content nested under ``inline`` tokens. This
adapter flattens that stream into marktoc events.

Translation Notes:
- Paragraphs that markdown-it hides (tight list items) produce no events.
- ``fence`` and ``code_block`` become Start(CodeBlock), Text, End(CodeBlock).
  The language is the whole stripped fence info string.
- ``image`` becomes a single Start(Image) carrying the plain alt text.
- Table alignments are read from the header cells' ``style`` attributes; the
  header row's ``tr`` tokens fold into TableHead and ``tbody`` is dropped.
- markdown-it leaves ``start`` off ordered lists that start at 1; the event
  always carries the start number.

Thread Safety:
The MarkdownIt instance is configured once in __init__ and only read by
parse(). Per-document state (open tag stacks, seen slugs) lives in locals of
events().
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from marktoc.errors import EventSourceError
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
from marktoc.utils.logger import get_logger
from marktoc.utils.text import slugify as default_slugify
from marktoc.utils.text import unique_slug

logger = get_logger(__name__)

# Token name (without _open/_close) -> attribute-free tag
_PAIRED_TAGS: dict[str, Tag] = {
    "blockquote": BlockQuote(),
    "list_item": ListItem(),
    "th": TableCell(),
    "td": TableCell(),
    "strong": Strong(),
    "em": Emphasis(),
    "s": Strikethrough(),
}

_ALIGNMENTS = {
    "left": Alignment.LEFT,
    "center": Alignment.CENTER,
    "right": Alignment.RIGHT,
}


def _plain_text(tokens: Sequence[Token] | None) -> str:
    """Concatenate the literal text of inline tokens, images included."""
    parts: list[str] = []
    for token in tokens or ():
        match token.type:
            case "text" | "text_special" | "code_inline":
                parts.append(token.content)
            case "softbreak" | "hardbreak":
                parts.append(" ")
            case "image":
                parts.append(_plain_text(token.children))
    return "".join(parts)


def _cell_alignment(token: Token) -> Alignment:
    style = str(token.attrGet("style") or "")
    _, _, value = style.partition("text-align:")
    return _ALIGNMENTS.get(value.strip(), Alignment.NONE)


def _table_alignments(tokens: Sequence[Token], table_index: int) -> tuple[Alignment, ...]:
    """Alignments of the first row following the table_open at ``table_index``."""
    alignments: list[Alignment] = []
    for token in tokens[table_index + 1 :]:
        if token.type == "tr_close":
            break
        if token.type in ("th_open", "td_open"):
            alignments.append(_cell_alignment(token))
    return tuple(alignments)


class MarkdownItSource:
    """Produce marktoc events from markdown text using markdown-it-py.

    Usage:
        >>> source = MarkdownItSource()
        >>> [type(e).__name__ for e in source.events("# Hi")]
        ['Start', 'Text', 'End']

    """

    __slots__ = ("_md", "_heading_ids", "_slugify")

    name = "markdown-it"

    def __init__(
        self,
        *,
        tables: bool = True,
        strikethrough: bool = True,
        heading_ids: bool = False,
        slugify: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            tables: Enable GFM table syntax
            strikethrough: Enable ~~strikethrough~~ syntax
            heading_ids: Give every heading an anchor id derived from its text
            slugify: Custom slug function for heading anchor ids
        """
        md = MarkdownIt("commonmark")
        extensions = [
            rule for rule, enabled in (("table", tables), ("strikethrough", strikethrough)) if enabled
        ]
        if extensions:
            md.enable(extensions)
        self._md = md
        self._heading_ids = heading_ids
        self._slugify = slugify or default_slugify

    def parse(self, source: str) -> list[Token]:
        """Run markdown-it and return its raw token stream.

        Raises:
            EventSourceError: If markdown-it fails on the input
        """
        try:
            return self._md.parse(source)
        except Exception as e:
            raise EventSourceError(self.name, str(e)) from e

    def events(self, source: str) -> Iterator[Event]:
        """Translate ``source`` into an event stream."""
        tokens = self.parse(source)
        seen_slugs: set[str] = set()
        open_tags: list[Tag] = []
        in_thead = False

        for index, token in enumerate(tokens):
            match token.type:
                case "inline":
                    yield from self._inline(token.children or [])
                case "heading_open":
                    anchor_id = None
                    if self._heading_ids and index + 1 < len(tokens):
                        text = _plain_text(tokens[index + 1].children)
                        anchor_id = unique_slug(self._slugify(text), seen_slugs)
                    tag: Tag = Heading(level=int(token.tag[1:]), anchor_id=anchor_id)
                    open_tags.append(tag)
                    yield Start(tag)
                case "paragraph_open" | "paragraph_close":
                    if not token.hidden:
                        yield Start(Paragraph()) if token.nesting == 1 else End(Paragraph())
                case "bullet_list_open":
                    tag = List(ordered=False)
                    open_tags.append(tag)
                    yield Start(tag)
                case "ordered_list_open":
                    start = token.attrGet("start")
                    tag = List(ordered=True, start_number=int(start) if start is not None else 1)
                    open_tags.append(tag)
                    yield Start(tag)
                case "table_open":
                    tag = Table(alignments=_table_alignments(tokens, index))
                    open_tags.append(tag)
                    yield Start(tag)
                case "heading_close" | "bullet_list_close" | "ordered_list_close" | "table_close":
                    if open_tags:
                        yield End(open_tags.pop())
                case "thead_open":
                    in_thead = True
                    yield Start(TableHead())
                case "thead_close":
                    in_thead = False
                    yield End(TableHead())
                case "tr_open" | "tr_close":
                    if not in_thead:
                        yield Start(TableRow()) if token.nesting == 1 else End(TableRow())
                case "tbody_open" | "tbody_close":
                    pass
                case "fence" | "code_block":
                    info = token.info.strip() if token.type == "fence" else ""
                    code_tag = CodeBlock(language=info or None)
                    yield Start(code_tag)
                    if token.content:
                        yield Text(token.content)
                    yield End(code_tag)
                case "hr":
                    yield Rule()
                case "html_block":
                    yield Html(token.content)
                case _:
                    yield from self._paired(token)

    def _inline(self, children: Sequence[Token]) -> Iterator[Event]:
        links: list[Link] = []
        for token in children:
            match token.type:
                case "text" | "text_special":
                    yield Text(token.content)
                case "code_inline":
                    yield Code(token.content)
                case "softbreak":
                    yield SoftBreak()
                case "hardbreak":
                    yield HardBreak()
                case "html_inline":
                    yield Html(token.content)
                case "link_open":
                    link = Link(url=str(token.attrGet("href") or ""))
                    links.append(link)
                    yield Start(link)
                case "link_close":
                    if links:
                        yield End(links.pop())
                case "image":
                    yield Start(
                        Image(
                            url=str(token.attrGet("src") or ""),
                            alt_text=_plain_text(token.children),
                        )
                    )
                case _:
                    yield from self._paired(token)

    def _paired(self, token: Token) -> Iterator[Event]:
        name, _, suffix = token.type.rpartition("_")
        tag = _PAIRED_TAGS.get(name)
        if tag is None or suffix not in ("open", "close"):
            logger.debug("Ignoring markdown-it token %r", token.type)
            return
        yield Start(tag) if suffix == "open" else End(tag)
