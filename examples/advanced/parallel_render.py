"""Thread safe: render 1000 docs in parallel with one shared processor."""

from concurrent.futures import ThreadPoolExecutor

from marktoc import Markdown, RenderConfig

md = Markdown(config=RenderConfig(heading_ids=True))
docs = ["# Doc " + str(i) + "\n\n## Part\n\nContent for document " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(md, docs))

print(f"Rendered {len(results)} documents in parallel")
print("First doc:", results[0].count("<li>"), "TOC entries")
print("Last doc:", results[-1].count("<li>"), "TOC entries")
