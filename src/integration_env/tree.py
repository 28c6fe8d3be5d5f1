from collections.abc import Iterable, Iterator
from pathlib import Path


def list_tree(root: Path) -> list[Path]:
    tree = list(iter_tree(root))
    tree.sort()
    return tree


def iter_tree(root: Path) -> Iterator[Path]:
    # Symlinks end up in filenames, so they are listed but never walked into
    for dirpath, dirnames, filenames in root.walk():
        for name in dirnames + filenames:
            yield (dirpath / name).relative_to(root)


def render_tree(paths: Iterable[Path]) -> str:
    return "".join(f"{path}\n" for path in paths)
