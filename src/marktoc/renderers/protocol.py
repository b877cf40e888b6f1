"""EventRenderer protocol: stable interface for event renderers.

Any renderer that implements ``render(events) -> (str, headings)`` conforms to
this protocol and can be used by the document assembler. The built-in
``HtmlRenderer`` is the reference implementation.

Example:
    from marktoc.renderers.protocol import EventRenderer

    def render_page(renderer: EventRenderer, events: list[Event]) -> str:
        body, _ = renderer.render(events)
        return body

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from marktoc.events import Event
from marktoc.toc import HeadingRecord


class EventRenderer(Protocol):
    """Protocol for event renderers."""

    def render(self, events: Iterable[Event]) -> tuple[str, list[HeadingRecord]]:
        """Render an event stream.

        Args:
            events: Ordered event stream for one document.

        Returns:
            Rendered body and the heading records captured along the way.

        """
        ...
