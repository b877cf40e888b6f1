"""Protocols for marktoc.

Defines the contract for event sources: the external collaborators that turn
markdown text into the event stream the renderer consumes.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from marktoc.events import Event


@runtime_checkable
class EventSource(Protocol):
    """Protocol for markdown-to-event producers.

    Thread Safety:
        Implementations must be stateless between calls or keep per-call
        state in locals, so one instance can serve several threads.

    """

    def events(self, source: str) -> Iterator[Event]:
        """Produce the ordered event stream for one document.

        Args:
            source: Markdown source text

        Yields:
            Events in document order; the sequence is finite.
        """
        ...
