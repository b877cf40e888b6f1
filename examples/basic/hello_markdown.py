"""Markdown to HTML with a table of contents in 3 lines."""

from marktoc import convert

html = convert("# Hello\n\n## World\n\nSome **bold** text.")
print(html)
