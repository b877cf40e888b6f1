"""Table cell roles and TOC nesting are selectable policies."""

from marktoc import RenderConfig, convert

source = """\
# Prices

| Item | Price |
|:-----|------:|
| Tea  |  2.50 |

#### Footnote level heading
"""

print("--- defaults (historical behavior) ---")
print(convert(source))

print("--- head-row cells, compact TOC ---")
print(convert(source, config=RenderConfig(cell_role="head-row", toc_nesting="compact")))
