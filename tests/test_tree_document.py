"""Unit tests for the TreeDocument facade."""

from datetime import datetime

import pytest

from dir2tree.document_formatter import DocumentFormatter
from dir2tree.exceptions import AccessError
from dir2tree.ignore_rules.git_rules import GitIgnoreRules
from dir2tree.options import GeneratorOptions
from dir2tree.tree_document import TreeDocument


@pytest.fixture
def proj(tmp_path):
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "src" / "a.ts").touch()
    (root / "node_modules").mkdir()
    (root / "readme.md").touch()
    return root


@pytest.fixture
def formatter():
    return DocumentFormatter(clock=lambda: datetime(2026, 1, 1), timestamp_format="%Y-%m-%d")


def test_document_for_example_tree(proj, formatter):
    document = TreeDocument(proj, GeneratorOptions(ignore_patterns=["node_modules"]), formatter=formatter)

    assert document.folder_name == "proj"
    assert document.tree_text == "├── src/\n│   └── a.ts\n└── readme.md\n"
    assert document.document_text == (
        "# File Tree for: proj\n"
        "Generated on: 2026-01-01\n"
        f"Path: {proj}\n"
        "Max Depth: Unlimited\n"
        "Ignored Patterns: node_modules\n"
        "\n"
        "```\n"
        "├── src/\n"
        "│   └── a.ts\n"
        "└── readme.md\n"
        "```\n"
    )


def test_counts(proj, formatter):
    document = TreeDocument(proj, GeneratorOptions(max_depth=1), formatter=formatter)

    assert document.directory_count == 2
    assert document.file_count == 1
    assert document.truncated_count == 2
    assert "Max Depth: 1\n" in document.document_text


def test_default_options(proj):
    document = TreeDocument(proj)
    assert document.options == GeneratorOptions()
    assert "node_modules/" in document.tree_text


def test_exclusion_rules(proj, formatter):
    rules = GitIgnoreRules()
    rules.add_rule("*.md")

    document = TreeDocument(proj, exclusion_rules=rules, formatter=formatter)

    assert "readme.md" not in document.tree_text


def test_errors_propagate(tmp_path, proj):
    with pytest.raises(FileNotFoundError):
        TreeDocument(tmp_path / "missing")
    with pytest.raises(NotADirectoryError):
        TreeDocument(proj / "readme.md")


def test_access_error_propagates(proj, monkeypatch):
    def refuse(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("dir2tree.file_system_tree.tree_builder.os.scandir", refuse)
    with pytest.raises(AccessError):
        TreeDocument(proj)
