import tempfile
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Self

from .command import Command, StrPath, resolve_executable
from .config import Settings, get_settings
from .entry import DirMarker, Entry, FileContent
from .errors import ReadError, WorkspaceError
from .logger import log
from .materialize import ChmodResult, materialize, set_exec_permission
from .tree import list_tree, render_tree

# Only configures the command, it must neither run it nor touch the environment
type CommandCallback = Callable[[Path, Command], Command]


def identity_callback(_: Path, command: Command) -> Command:
    return command


class Environment:
    """
    An isolated temporary workspace with a declarative file layout.

    Files and directories are only recorded by ``add_file`` and ``add_dir``,
    ``setup`` writes them to disk. The workspace is removed by ``cleanup``,
    when leaving the ``with`` block, or at the latest when the environment is
    garbage collected.
    """

    label: str
    settings: Settings
    entries: dict[Path, Entry]
    cfg_command_callback: CommandCallback

    _tmp_dir: tempfile.TemporaryDirectory[str]
    _path: Path

    def __init__(self, label: str, settings: Settings | None = None):
        self.label = label
        self.settings = settings if settings is not None else get_settings()
        self.entries = {}
        self.cfg_command_callback = identity_callback

        try:
            self._tmp_dir = tempfile.TemporaryDirectory(
                prefix=f"{label}.",
                dir=self.settings.tmp_root,
            )
        except OSError as e:
            tmp_root = self.settings.tmp_root or Path(tempfile.gettempdir())
            raise WorkspaceError("create tmp directory in", tmp_root) from e

        self._path = Path(self._tmp_dir.name)
        log.debug("created workspace %s for %r", self._path, label)

    def __repr__(self) -> str:
        return f"Environment({self.label!r}, path={str(self._path)!r})"

    def __str__(self) -> str:
        return render_tree(self.tree())

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.cleanup()

    @property
    def path(self) -> Path:
        return self._path

    def cleanup(self) -> None:
        if self._path.exists():
            log.debug("removing workspace %s", self._path)
        self._tmp_dir.cleanup()

    def set_cfg_command_callback(self, callback: CommandCallback) -> None:
        self.cfg_command_callback = callback

    def add_file(
        self,
        path: StrPath,
        content: str,
        *,
        executable: bool = False,
    ) -> None:
        self.entries[Path(path)] = FileContent(content, executable)

    def add_dir(self, path: StrPath) -> None:
        self.entries[Path(path)] = DirMarker()

    def setup(self) -> None:
        materialize(
            self._path,
            self.entries,
            encoding=self.settings.encoding,
            exec_mode=self.settings.exec_mode,
        )

    def set_exec_permission(self, path: StrPath) -> ChmodResult:
        return set_exec_permission(self._path / path, self.settings.exec_mode)

    def read_file(self, path: StrPath) -> str:
        full_path = self._path / path
        try:
            with full_path.open(encoding=self.settings.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError("read file", full_path) from e

    def tree(self) -> list[Path]:
        return list_tree(self._path)

    def command(self, name: str) -> Command:
        program = resolve_executable(name, self.settings.bin_dirs)
        command = Command(program).current_dir(self._path)
        log.debug("prepared %s in %s", program, self._path)
        return self.cfg_command_callback(self._path, command)
