"""End-to-end tests for a lint run over a vault on disk."""

from obslint.config import LintConfig
from obslint.lint import lint_vault


def test_lint_vault_reports_unlinked_mentions(temp_vault, write_note):
    write_note("garden/compost.md", "# Compost\nFeeds the [[Tomatoes]].")
    write_note("garden/tomatoes.md", "# Tomatoes\nNeed Compost and sun.")
    write_note("journal/2026-01-02.md", "Turned the [[Compost]]. Tomatoes look good. Composting is fun.")
    write_note("index.md", "[[Compost]] [[Tomatoes]]")

    result = lint_vault(LintConfig(root=temp_vault, workers=2))

    assert result.scanned == 4
    assert result.vocabulary_size == 2
    # A note's own heading counts as a mention when it is not linked.
    assert [(r.rel_path, r.unlinked) for r in result.reports] == [
        ("garden/compost.md", ("Compost",)),
        ("garden/tomatoes.md", ("Compost", "Tomatoes")),
        ("journal/2026-01-02.md", ("Tomatoes",)),
    ]
    assert result.findings == 4


def test_lint_vault_empty_directory(temp_vault):
    result = lint_vault(LintConfig(root=temp_vault))
    assert result.scanned == 0
    assert result.vocabulary_size == 0
    assert result.reports == []
