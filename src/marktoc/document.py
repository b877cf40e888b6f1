"""Document assembly: table of contents followed by the rendered body.

The TOC can only be built once every heading has been seen, so the whole
body is rendered first and the TOC is prepended afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable

from marktoc.config import RenderConfig, get_render_config
from marktoc.events import Event
from marktoc.renderers.html import HtmlRenderer
from marktoc.toc import build_toc
from marktoc.utils.logger import get_logger

logger = get_logger(__name__)


def assemble(toc_html: str, body_html: str) -> str:
    """Concatenate the TOC fragment and the body fragment, TOC first."""
    return toc_html + body_html


def render_document(events: Iterable[Event], config: RenderConfig | None = None) -> str:
    """Render events and prepend the table of contents.

    Args:
        events: Ordered event stream for one document
        config: Render configuration (active context config when None)

    Returns:
        Final HTML fragment. The TOC is always present, even with no headings.

    Example:
        >>> render_document([])
        '<nav>\\n<h2>Table of Contents</h2>\\n<ul>\\n</ul>\\n</nav>\\n'
    """
    config = config if config is not None else get_render_config()
    body, headings = HtmlRenderer(config).render(events)
    toc = build_toc(headings, nesting=config.toc_nesting, title=config.toc_title)
    logger.debug("Rendered document with %d headings", len(headings))
    return assemble(toc, body)
