from __future__ import annotations

from pathlib import Path

import pytest

from utils.crawl_local_files import crawl_local_files


def _write(root: Path, relpath: str, content: str = "x") -> None:
    path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    _write(root, "main.py", "print('hi')")
    _write(root, "pkg/core.py", "class Core: ...")
    _write(root, "pkg/notes.txt", "notes")
    _write(root, "build/generated.py", "generated")
    _write(root, "secret/keys.py", "KEY = 1")
    _write(root, "big.py", "x" * 500)
    _write(root, ".gitignore", "secret/\n")
    return root


def test_include_exclude_gitignore_and_size(project: Path) -> None:
    result = crawl_local_files(
        project,
        include_patterns={"*.py"},
        exclude_patterns={"build/*"},
        max_file_size=100,
    )

    assert list(result["files"]) == ["main.py", "pkg/core.py"]
    assert result["files"]["pkg/core.py"] == "class Core: ..."


def test_no_patterns_includes_everything_not_ignored(project: Path) -> None:
    files = crawl_local_files(project)["files"]

    assert "pkg/notes.txt" in files
    assert "big.py" in files
    assert "secret/keys.py" not in files


def test_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Directory does not exist"):
        crawl_local_files(tmp_path / "nope")
