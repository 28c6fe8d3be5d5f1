import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .entry import DirMarker, Entry, FileContent
from .errors import MaterializeError
from .logger import log


@dataclass
class ChmodResult:
    path: Path
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def materialize(
    root: Path,
    entries: Mapping[Path, Entry],
    *,
    encoding: str = "utf-8",
    exec_mode: int = 0o755,
) -> None:
    root = root.resolve()

    # Sorted so parents always come before their children
    for path in sorted(entries):
        full_path = resolve_inside(root, path)

        match entries[path]:
            case FileContent(text, is_exec):
                write_file(full_path, text, encoding)
                if is_exec:
                    try:
                        full_path.chmod(exec_mode)
                    except OSError as e:
                        raise MaterializeError("set permissions of", full_path) from e

            case DirMarker():
                make_dir(full_path)

    log.debug("materialized %d entries in %s", len(entries), root)


def resolve_inside(root: Path, path: Path) -> Path:
    full_path = root / os.path.normpath(path)
    resolved = full_path.resolve()
    try:
        resolved.relative_to(root)
    except ValueError:
        raise MaterializeError("create outside of workspace", full_path) from None
    if resolved == root:
        raise MaterializeError("replace workspace root with", full_path)
    return full_path


def write_file(path: Path, text: str, encoding: str) -> None:
    ensure_dir(path.parent)

    # A directory left over from a previous setup is replaced by the file
    if path.is_dir() and not path.is_symlink():
        log.debug("replacing directory %s with a file", path)
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise MaterializeError("remove directory", path) from e

    try:
        with path.open("w", encoding=encoding, newline="") as f:
            f.write(text)
    except (OSError, UnicodeEncodeError) as e:
        raise MaterializeError("create file", path) from e


def make_dir(path: Path) -> None:
    # A file left over from a previous setup is replaced by the directory
    if path.is_symlink() or (path.exists() and not path.is_dir()):
        log.debug("replacing file %s with a directory", path)
        try:
            path.unlink()
        except OSError as e:
            raise MaterializeError("remove file", path) from e

    ensure_dir(path)


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MaterializeError("create directory", path) from e


def set_exec_permission(path: Path, mode: int = 0o755) -> ChmodResult:
    try:
        path.chmod(mode)
    except OSError as e:
        log.warning("fail to set permissions %o on %s: %s", mode, path, e)
        return ChmodResult(path, e)
    return ChmodResult(path)
