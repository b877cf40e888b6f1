"""
marktoc: Markdown to HTML with a generated table of contents

Renders a stream of document events to HTML while collecting every heading,
then prepends a nested table of contents built from those headings. Markdown
text is turned into events by markdown-it-py; any other event source can be
plugged in.

Quick Start:
    >>> from marktoc import convert
    >>> print(convert("# Hello"))
    <nav>
    <h2>Table of Contents</h2>
    <ul>
    <li><a href="#">Hello</a></li>
    </ul>
    </nav>
    <h1>Hello</h1>
    <BLANKLINE>

    >>> # Or keep one configured processor around
    >>> from marktoc import Markdown, RenderConfig
    >>> md = Markdown(config=RenderConfig(heading_ids=True))
    >>> html = md("# Hello **World**")

Rendering events directly:
    >>> from marktoc import HtmlRenderer
    >>> from marktoc.events import End, Paragraph, Start, Text
    >>> HtmlRenderer().render([Start(Paragraph()), Text("a < b"), End(Paragraph())])
    ('<p>a &lt; b</p>\\n', [])
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from marktoc.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from marktoc.document import assemble, render_document
from marktoc.errors import ConfigError, EventSourceError, MarktocError
from marktoc.events import Alignment, Event
from marktoc.policies import CELL_ROLE_POLICIES
from marktoc.protocols import EventSource
from marktoc.renderers.html import HtmlRenderer
from marktoc.renderers.protocol import EventRenderer
from marktoc.sources.mdit import MarkdownItSource
from marktoc.toc import NESTING_STRATEGIES, HeadingRecord, build_toc

__version__ = "0.1.0"


def convert(
    source: str,
    *,
    config: RenderConfig | None = None,
    event_source: EventSource | None = None,
) -> str:
    """Convert markdown text to HTML with a table of contents.

    Args:
        source: Markdown source text
        config: Render configuration (active context config when None)
        event_source: Markdown-to-event producer (markdown-it-py when None)

    Returns:
        TOC fragment followed by the rendered body
    """
    return Markdown(config=config, event_source=event_source)(source)


class Markdown:
    """High-level processor combining an event source and the HTML renderer.

    Usage:
        >>> md = Markdown(config=RenderConfig(paragraph_class="body"))
        >>> md.render(md.events("Hi"))
        ('<p class="body">Hi</p>\\n', [])

    Thread Safety:
        Configuration is fixed at construction and installed in the
        ContextVar only for the duration of a call. Safe to share.

    """

    __slots__ = ("_config", "_event_source")

    def __init__(
        self,
        *,
        config: RenderConfig | None = None,
        event_source: EventSource | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            config: Render configuration. Defaults to the config active when
                the processor is created.
            event_source: Markdown-to-event producer. Defaults to
                MarkdownItSource, generating heading ids when the config asks
                for them.
        """
        self._config = config if config is not None else get_render_config()
        self._event_source = event_source or MarkdownItSource(
            heading_ids=self._config.heading_ids
        )

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Convert markdown text to the final HTML fragment."""
        with render_config_context(self._config):
            return render_document(self.events(source))

    def events(self, source: str) -> Iterator[Event]:
        """Event stream for ``source`` from the configured event source."""
        return self._event_source.events(source)

    def render(self, events: Iterable[Event]) -> tuple[str, list[HeadingRecord]]:
        """Render events to (body HTML, heading records) without a TOC."""
        return HtmlRenderer(self._config).render(events)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "convert",
    "render_document",
    "assemble",
    "build_toc",
    "Markdown",
    # Renderer
    "HtmlRenderer",
    "EventRenderer",
    "HeadingRecord",
    # Events
    "Alignment",
    "Event",
    "EventSource",
    "MarkdownItSource",
    # Policies
    "CELL_ROLE_POLICIES",
    "NESTING_STRATEGIES",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "MarktocError",
    "ConfigError",
    "EventSourceError",
]
