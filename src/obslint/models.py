from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Document:
    path: Path
    rel_path: str
    name: str
    content: str


@dataclass(frozen=True)
class ReportEntry:
    path: Path
    rel_path: str
    unlinked: tuple[str, ...]


@dataclass(frozen=True)
class LintResult:
    root: Path
    scanned: int
    vocabulary_size: int
    reports: list[ReportEntry] = field(default_factory=list)

    @property
    def findings(self) -> int:
        return sum(len(r.unlinked) for r in self.reports)
