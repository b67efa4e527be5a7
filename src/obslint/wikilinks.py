from __future__ import annotations

from typing import Optional


def extract_wikilinks(text: str) -> frozenset[str]:
    """Return the distinct link targets declared by ``[[target]]`` markup.

    Only the text before the first ``|`` is kept, so ``[[Foo|Bar]]`` declares
    ``Foo``. Unterminated links, stray brackets and empty targets contribute
    nothing.
    """
    depth = 0
    in_link = False
    pipe_at: Optional[int] = None
    start = 0
    links: set[str] = set()

    for i, ch in enumerate(text):
        if ch == "[":
            if depth == 0:
                depth = 1
                continue
            if depth == 1:
                depth = 2
                in_link = True
                start = i + 1
                continue
            # A third "[" is plain text inside the link.

        elif ch == "]":
            if depth == 2:
                depth = 1
                continue
            if depth == 1:
                depth = 0
                if in_link:
                    # The closing pair is "]]", so the target ends at the first "]".
                    # A pipe from before a reopening "[" does not bound this target.
                    end = pipe_at if pipe_at is not None and pipe_at >= start else i - 1
                    if end > start:
                        links.add(text[start:end])
                    in_link = False
                    pipe_at = None
                continue

        if in_link and ch == "|" and pipe_at is None:
            pipe_at = i

    return frozenset(links)
