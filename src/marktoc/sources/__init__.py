"""Event sources: markdown text in, marktoc events out.

Available Sources:
- MarkdownItSource: CommonMark + GFM tables/strikethrough via markdown-it-py

Any object with an ``events(source) -> Iterator[Event]`` method satisfies
``marktoc.protocols.EventSource`` and can be used instead.
"""

from marktoc.sources.mdit import MarkdownItSource

__all__ = ["MarkdownItSource"]
