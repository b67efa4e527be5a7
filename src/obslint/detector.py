from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import AbstractSet, Iterable, Optional

from .boundary import is_isolated
from .corpus import CorpusIndex
from .matcher import MentionMatcher
from .models import Document, ReportEntry

logger = logging.getLogger(__name__)


def find_mentions(content: str, matcher: MentionMatcher) -> set[str]:
    """Return every distinct vocabulary hit in ``content`` that stands alone as a word."""
    data = content.encode("utf-8")
    found: set[str] = set()
    for m in matcher.find_iter(data):
        if not is_isolated(data, m.start, m.end):
            continue
        found.add(data[m.start : m.end].decode("utf-8"))
    return found


def find_unlinked(
    content: str,
    declared: AbstractSet[str],
    matcher: MentionMatcher,
) -> list[str]:
    return sorted(find_mentions(content, matcher) - declared)


def detect_document(document: Document, index: CorpusIndex) -> Optional[ReportEntry]:
    unlinked = find_unlinked(document.content, index.targets_for(document.rel_path), index.matcher)
    if not unlinked:
        return None
    logger.debug(f"{document.rel_path}: {len(unlinked)} unlinked mention(s)")
    return ReportEntry(path=document.path, rel_path=document.rel_path, unlinked=tuple(unlinked))


def detect_unlinked(
    documents: Iterable[Document],
    index: CorpusIndex,
    *,
    workers: Optional[int] = None,
) -> list[ReportEntry]:
    """Run detection for every document and return reports sorted by path.

    Documents without findings are left out.
    """
    docs = list(documents)
    if workers == 1:
        results = [detect_document(d, index) for d in docs]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(lambda d: detect_document(d, index), docs))
    reports = [r for r in results if r is not None]
    reports.sort(key=lambda r: r.rel_path)
    return reports
