"""Tests for the markdown-it-py event source."""

from __future__ import annotations

import pytest

from marktoc.errors import EventSourceError
from marktoc.events import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
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
    Table,
    TableCell,
    TableHead,
    TableRow,
    Text,
)
from marktoc.protocols import EventSource
from marktoc.renderers.html import HtmlRenderer
from marktoc.sources.mdit import MarkdownItSource


@pytest.fixture
def source() -> MarkdownItSource:
    return MarkdownItSource()


def events_of(source: MarkdownItSource, text: str) -> list:
    return list(source.events(text))


class TestProtocol:
    def test_is_event_source(self, source: MarkdownItSource) -> None:
        assert isinstance(source, EventSource)


class TestBlocks:
    def test_heading(self, source: MarkdownItSource) -> None:
        assert events_of(source, "## Hello *World*") == [
            Start(Heading(2)),
            Text("Hello "),
            Start(Emphasis()),
            Text("World"),
            End(Emphasis()),
            End(Heading(2)),
        ]

    def test_paragraph(self, source: MarkdownItSource) -> None:
        assert events_of(source, "Hi") == [Start(Paragraph()), Text("Hi"), End(Paragraph())]

    def test_tight_list_has_no_paragraphs(self, source: MarkdownItSource) -> None:
        assert events_of(source, "- a\n- b\n") == [
            Start(List(ordered=False)),
            Start(ListItem()),
            Text("a"),
            End(ListItem()),
            Start(ListItem()),
            Text("b"),
            End(ListItem()),
            End(List(ordered=False)),
        ]

    def test_loose_list_keeps_paragraphs(self, source: MarkdownItSource) -> None:
        events = events_of(source, "- a\n\n- b\n")
        assert events.count(Start(Paragraph())) == 2

    def test_ordered_list_start(self, source: MarkdownItSource) -> None:
        assert events_of(source, "3. x\n")[0] == Start(List(ordered=True, start_number=3))

    def test_ordered_list_default_start(self, source: MarkdownItSource) -> None:
        assert events_of(source, "1. x\n")[0] == Start(List(ordered=True, start_number=1))

    def test_fenced_code(self, source: MarkdownItSource) -> None:
        assert events_of(source, "```python title=x\nx = 1\n```\n") == [
            Start(CodeBlock("python title=x")),
            Text("x = 1\n"),
            End(CodeBlock("python title=x")),
        ]

    def test_fence_without_info(self, source: MarkdownItSource) -> None:
        assert events_of(source, "```\nx\n```\n")[0] == Start(CodeBlock(None))

    def test_indented_code(self, source: MarkdownItSource) -> None:
        assert events_of(source, "    code\n") == [
            Start(CodeBlock(None)),
            Text("code\n"),
            End(CodeBlock(None)),
        ]

    def test_blockquote(self, source: MarkdownItSource) -> None:
        assert events_of(source, "> q\n") == [
            Start(BlockQuote()),
            Start(Paragraph()),
            Text("q"),
            End(Paragraph()),
            End(BlockQuote()),
        ]

    def test_rule(self, source: MarkdownItSource) -> None:
        assert Rule() in events_of(source, "a\n\n***\n")

    def test_html_block(self, source: MarkdownItSource) -> None:
        events = events_of(source, "<div>x</div>\n")
        assert len(events) == 1
        assert isinstance(events[0], Html)


class TestTables:
    TABLE = "| a | b | c |\n|:--|--:|:-:|\n| 1 | 2 | 3 |\n"

    def test_alignments_from_header(self, source: MarkdownItSource) -> None:
        first = events_of(source, self.TABLE)[0]
        assert first == Start(Table((Alignment.LEFT, Alignment.RIGHT, Alignment.CENTER)))

    def test_unaligned_columns(self, source: MarkdownItSource) -> None:
        first = events_of(source, "| a | b |\n|---|---|\n| 1 | 2 |\n")[0]
        assert first == Start(Table((Alignment.NONE, Alignment.NONE)))

    def test_structure(self, source: MarkdownItSource) -> None:
        events = events_of(source, self.TABLE)
        kinds = [e for e in events if not isinstance(e, Text)]
        assert kinds[1] == Start(TableHead())
        assert kinds[2] == Start(TableCell())
        head_end = kinds.index(End(TableHead()))
        assert kinds[head_end + 1] == Start(TableRow())
        assert kinds[-2] == End(TableRow())
        assert End(TableRow()) not in kinds[:head_end]
        assert isinstance(kinds[-1], End) and isinstance(kinds[-1].tag, Table)

    def test_tables_disabled(self) -> None:
        events = list(MarkdownItSource(tables=False).events(self.TABLE))
        assert not any(isinstance(e, Start) and isinstance(e.tag, Table) for e in events)


class TestInlines:
    def test_link(self, source: MarkdownItSource) -> None:
        events = events_of(source, "[x](http://a.test/)")
        assert events[1:4] == [Start(Link("http://a.test/")), Text("x"), End(Link("http://a.test/"))]

    def test_image_alt_is_plain_text(self, source: MarkdownItSource) -> None:
        events = events_of(source, "![A *fine* cat](cat.png)")
        assert events == [
            Start(Paragraph()),
            Start(Image("cat.png", "A fine cat")),
            End(Paragraph()),
        ]

    def test_code_span(self, source: MarkdownItSource) -> None:
        assert Code("x < y") in events_of(source, "`x < y`")

    def test_strikethrough(self, source: MarkdownItSource) -> None:
        assert Start(Strikethrough()) in events_of(source, "~~gone~~")

    def test_strikethrough_disabled(self) -> None:
        events = list(MarkdownItSource(strikethrough=False).events("~~gone~~"))
        assert Start(Strikethrough()) not in events

    def test_soft_break(self, source: MarkdownItSource) -> None:
        assert SoftBreak() in events_of(source, "a\nb")


class TestHeadingIds:
    def test_disabled_by_default(self, source: MarkdownItSource) -> None:
        assert events_of(source, "# Intro")[0] == Start(Heading(1, None))

    def test_slugs_are_unique(self) -> None:
        events = list(MarkdownItSource(heading_ids=True).events("# Intro\n\n## Intro\n\n# Set `up`\n"))
        anchors = [e.tag.anchor_id for e in events if isinstance(e, Start) and isinstance(e.tag, Heading)]
        assert anchors == ["intro", "intro-1", "set-up"]

    def test_end_tag_matches_start_tag(self) -> None:
        events = list(MarkdownItSource(heading_ids=True).events("# Intro"))
        assert events[0].tag == events[-1].tag

    def test_custom_slugify(self) -> None:
        source = MarkdownItSource(heading_ids=True, slugify=lambda text: text.upper())
        assert events_of(source, "# ab")[0] == Start(Heading(1, "AB"))

    def test_slugs_reset_per_document(self) -> None:
        source = MarkdownItSource(heading_ids=True)
        assert events_of(source, "# A")[0] == events_of(source, "# A")[0]


class TestRendering:
    """Adapter output through the renderer."""

    def test_entities_escaped_once(self, source: MarkdownItSource) -> None:
        html, _ = HtmlRenderer().render(source.events("a &amp; b &lt; c"))
        assert html == "<p>a &amp; b &lt; c</p>\n"

    def test_fence_info_string_kept_whole(self, source: MarkdownItSource) -> None:
        html, _ = HtmlRenderer().render(source.events("```py x\nprint()\n```\n"))
        assert html == '<pre><code class="language-py x">print()\n</code></pre>\n'

    def test_right_aligned_table_renders_header_cells(self, source: MarkdownItSource) -> None:
        html, _ = HtmlRenderer().render(source.events(TestTables.TABLE))
        assert html == (
            "<table>\n"
            "<thead>\n<tr><th>a</th><th>b</th><th>c</th></tr></thead>\n"
            "<tr><th>1</th><th>2</th><th>3</th></tr>\n"
            "</table>\n"
        )


class TestErrors:
    def test_parser_failure_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        class Broken:
            def parse(self, text: str) -> list:
                raise ValueError("bad input")

        source = MarkdownItSource()
        monkeypatch.setattr(source, "_md", Broken())
        with pytest.raises(EventSourceError, match="bad input") as excinfo:
            list(source.events("x"))
        assert excinfo.value.source_name == "markdown-it"
