from __future__ import annotations

import logging

from .config import LintConfig
from .corpus import CorpusIndex
from .detector import detect_unlinked
from .loader import load_documents
from .models import LintResult

logger = logging.getLogger(__name__)


def lint_vault(cfg: LintConfig) -> LintResult:
    """Load the vault, build the shared matcher once, then detect per document.

    Raises:
        DocumentReadError: If any document cannot be read
    """
    documents = load_documents(
        cfg.root,
        cfg.extensions,
        cfg.exclude_globs,
        workers=cfg.workers,
    )

    # Every document must be parsed before the vocabulary is frozen.
    index = CorpusIndex.from_documents(documents, workers=cfg.workers)
    logger.info(f"Vocabulary has {len(index.vocabulary)} link targets")

    reports = detect_unlinked(documents, index, workers=cfg.workers)
    logger.info(f"{len(reports)} of {len(documents)} documents have unlinked mentions")

    return LintResult(
        root=cfg.root,
        scanned=len(documents),
        vocabulary_size=len(index.vocabulary),
        reports=reports,
    )
