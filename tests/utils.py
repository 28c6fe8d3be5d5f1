import stat
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ExecFile:
    text: str


class Dir:
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Dir)

    def __repr__(self) -> str:
        return "Dir()"


type EntrySpec = str | ExecFile | Dir
type TreeSpec = dict[str, EntrySpec]


def read_spec(root: Path) -> TreeSpec:
    tree_spec: TreeSpec = {}

    for dirpath, dirnames, filenames in root.walk():
        for name in dirnames:
            tree_spec[str((dirpath / name).relative_to(root))] = Dir()

        for name in filenames:
            path = dirpath / name
            text = path.read_text()
            if path.stat().st_mode & stat.S_IXUSR:
                tree_spec[str(path.relative_to(root))] = ExecFile(text)
            else:
                tree_spec[str(path.relative_to(root))] = text

    return tree_spec
