from __future__ import annotations

import fnmatch
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from .errors import DocumentReadError
from .models import Document

logger = logging.getLogger(__name__)


def _is_excluded(rel_posix: str, exclude_globs: list[str]) -> bool:
    for pat in exclude_globs:
        if fnmatch.fnmatchcase(rel_posix, pat):
            return True
    return False


def _has_extension(name: str, extensions: list[str]) -> bool:
    return any(name.endswith(ext) for ext in extensions)


def iter_document_paths(root: Path, extensions: list[str], exclude_globs: list[str]) -> list[Path]:
    paths: list[Path] = []
    for p in root.rglob("*"):
        if not _has_extension(p.name, extensions) or not p.is_file():
            continue
        rel_posix = p.relative_to(root).as_posix()
        if _is_excluded(rel_posix, exclude_globs):
            continue
        paths.append(p)
    paths.sort(key=lambda p: p.relative_to(root).as_posix())
    return paths


def read_document(root: Path, path: Path) -> Document:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, str(e)) from e
    return Document(
        path=path,
        rel_path=path.relative_to(root).as_posix(),
        name=path.name,
        content=content,
    )


def load_documents(
    root: Path,
    extensions: list[str],
    exclude_globs: list[str],
    *,
    workers: Optional[int] = None,
) -> list[Document]:
    """Read every matching file under ``root``.

    Raises:
        DocumentReadError: on the first file that cannot be read; no partial
            corpus is returned.
    """
    paths = iter_document_paths(root, extensions, exclude_globs)
    logger.info(f"Loading {len(paths)} documents from {root}")
    if workers == 1:
        return [read_document(root, p) for p in paths]
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # list() re-raises the first failure in path order.
        return list(executor.map(lambda p: read_document(root, p), paths))
