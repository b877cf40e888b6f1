"""marktoc renderers.

Renderers convert document event streams into output formats.

Available Renderers:
- HtmlRenderer: Renders events to HTML and captures headings for the TOC

Thread Safety:
All renderers keep their state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from marktoc.renderers.html import HtmlRenderer, RenderState, render
from marktoc.renderers.protocol import EventRenderer

__all__ = ["EventRenderer", "HtmlRenderer", "RenderState", "render"]
