"""Tests for walking and reading the vault."""

import pytest

from obslint.errors import DocumentReadError
from obslint.loader import iter_document_paths, load_documents


def test_walk_filters_by_extension_and_excludes(temp_vault, write_note):
    write_note("a.md", "A")
    write_note("sub/b.md", "B")
    write_note("notes.txt", "not markdown")
    write_note(".obsidian/workspace.md", "config")
    write_note(".trash/old.md", "deleted")
    (temp_vault / "folder.md").mkdir()

    paths = iter_document_paths(temp_vault, [".md"], [".obsidian/**", ".trash/**"])
    assert [p.relative_to(temp_vault).as_posix() for p in paths] == ["a.md", "sub/b.md"]


def test_load_documents_reads_text_and_relative_paths(temp_vault, write_note):
    write_note("z.md", "Zed [[東京]]")
    write_note("dir/y.markdown", "Why")

    docs = load_documents(temp_vault, [".md", ".markdown"], [], workers=1)
    assert [d.rel_path for d in docs] == ["dir/y.markdown", "z.md"]
    assert docs[1].name == "z.md"
    assert docs[1].content == "Zed [[東京]]"
    assert docs[1].path == temp_vault / "z.md"


def test_unreadable_document_aborts_the_run(temp_vault, write_note):
    write_note("good.md", "fine")
    bad = temp_vault / "bad.md"
    bad.write_bytes(b"\xff\xfe not utf-8 \xc3")

    with pytest.raises(DocumentReadError) as exc_info:
        load_documents(temp_vault, [".md"], [])
    assert exc_info.value.path == bad
