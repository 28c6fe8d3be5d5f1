import os
import sys
from pathlib import Path

import pytest

from integration_env.tree import list_tree, render_tree


def test_list_tree_empty(tmp_path: Path) -> None:
    assert list_tree(tmp_path) == []


def test_list_tree_sorted(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "z.txt").write_text("z")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "c").mkdir()

    assert list_tree(tmp_path) == [
        Path("a.txt"),
        Path("b"),
        Path("b/z.txt"),
        Path("c"),
    ]


@pytest.mark.skipif(sys.platform == "win32", reason="needs symlinks")
def test_list_tree_symlink_not_followed(tmp_path: Path) -> None:
    target = tmp_path / "target"
    (target / "inner").mkdir(parents=True)
    root = tmp_path / "root"
    root.mkdir()
    os.symlink(target, root / "link")

    assert list_tree(root) == [Path("link")]


def test_render_tree() -> None:
    paths = [Path("dir"), Path("dir/file2"), Path("file1")]

    assert render_tree(paths) == "dir\ndir/file2\nfile1\n"
    assert render_tree([]) == ""
