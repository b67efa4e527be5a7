from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .matcher import MentionMatcher
from .models import Document
from .wikilinks import extract_wikilinks

logger = logging.getLogger(__name__)


def build_vocabulary(targets_by_path: Mapping[str, Iterable[str]]) -> frozenset[str]:
    vocabulary: set[str] = set()
    for targets in targets_by_path.values():
        vocabulary.update(t for t in targets if t)
    return frozenset(vocabulary)


def extract_targets(
    documents: Iterable[Document],
    *,
    workers: Optional[int] = None,
) -> dict[str, frozenset[str]]:
    """Map each document's relative path to the link targets it declares."""
    docs = list(documents)
    if workers == 1:
        extracted = [extract_wikilinks(d.content) for d in docs]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            extracted = list(executor.map(lambda d: extract_wikilinks(d.content), docs))
    return {d.rel_path: targets for d, targets in zip(docs, extracted)}


@dataclass(frozen=True)
class CorpusIndex:
    targets: Mapping[str, frozenset[str]]
    vocabulary: frozenset[str]
    matcher: MentionMatcher

    @classmethod
    def from_targets(cls, targets: Mapping[str, frozenset[str]]) -> "CorpusIndex":
        vocabulary = build_vocabulary(targets)
        # Sorted so automaton layout is stable from run to run.
        matcher = MentionMatcher(sorted(vocabulary))
        logger.debug(f"Built matcher over {len(vocabulary)} link targets from {len(targets)} documents")
        return cls(targets=dict(targets), vocabulary=vocabulary, matcher=matcher)

    @classmethod
    def from_documents(
        cls,
        documents: Iterable[Document],
        *,
        workers: Optional[int] = None,
    ) -> "CorpusIndex":
        return cls.from_targets(extract_targets(documents, workers=workers))

    def targets_for(self, rel_path: str) -> frozenset[str]:
        return self.targets.get(rel_path, frozenset())
