"""Feed the renderer from something other than markdown.

Any object with ``events(source) -> Iterator[Event]`` is an event source.
This one turns an outline ("level title" per line) into headings.
"""

from collections.abc import Iterator

from marktoc import Markdown
from marktoc.events import End, Event, Heading, Start, Text
from marktoc.utils.text import slugify


class OutlineSource:
    def events(self, source: str) -> Iterator[Event]:
        for line in source.splitlines():
            level, _, title = line.partition(" ")
            tag = Heading(int(level), slugify(title))
            yield Start(tag)
            yield Text(title)
            yield End(tag)


md = Markdown(event_source=OutlineSource())
print(md("1 Overview\n2 Install\n2 Use\n3 Flags\n1 FAQ"))
