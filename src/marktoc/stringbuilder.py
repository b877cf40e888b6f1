"""Append-only HTML output buffer.

Fragments are appended to a list and joined once at the end: O(n) total vs
O(n²) for repeated string concatenation.

Thread Safety:
HtmlBuffer instances are local to each render() or build_toc() call.
No shared mutable state.

"""

from __future__ import annotations


class HtmlBuffer:
    """Efficient accumulator for HTML fragments.

    Usage:
        >>> buf = HtmlBuffer()
        >>> _ = buf.open("h1").append("Hello").close("h1", newline=True)
        >>> buf.build()
        '<h1>Hello</h1>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> HtmlBuffer:
        """Append a raw fragment (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def line(self, s: str = "") -> HtmlBuffer:
        """Append a fragment followed by a newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def open(self, name: str, attrs: str = "", *, newline: bool = False) -> HtmlBuffer:
        """Append an opening tag.

        Args:
            name: Element name
            attrs: Pre-rendered attribute string, including its leading space
            newline: Follow the tag with a newline
        """
        self._parts.append(f"<{name}{attrs}>")
        if newline:
            self._parts.append("\n")
        return self

    def close(self, name: str, *, newline: bool = False) -> HtmlBuffer:
        """Append a closing tag, optionally followed by a newline."""
        self._parts.append(f"</{name}>")
        if newline:
            self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
