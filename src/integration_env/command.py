import os
import shutil
import subprocess
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Self

from .errors import ExecutableNotFoundError

type StrPath = str | os.PathLike[str]


class Command:
    """
    A process invocation that has been configured but not run yet.

    Every builder method returns the command itself so calls can be chained:

    ```python
    output = env.command("mytool").arg("--verbose").env("LANG", "C").output()
    ```
    """

    program: Path
    arguments: list[str]
    env_overrides: dict[str, str | None]
    clear_env: bool
    cwd: Path | None
    stdin: bytes | None

    def __init__(self, program: StrPath):
        self.program = Path(program)
        self.arguments = []
        self.env_overrides = {}
        self.clear_env = False
        self.cwd = None
        self.stdin = None

    def __repr__(self) -> str:
        return f"Command({self.argv!r}, cwd={self.cwd!r})"

    def arg(self, arg: StrPath) -> Self:
        self.arguments.append(os.fspath(arg))
        return self

    def args(self, args: Iterable[StrPath]) -> Self:
        for arg in args:
            self.arg(arg)
        return self

    def env(self, key: str, value: StrPath) -> Self:
        self.env_overrides[key] = os.fspath(value)
        return self

    def envs(self, env: Mapping[str, StrPath]) -> Self:
        for key, value in env.items():
            self.env(key, value)
        return self

    def env_remove(self, key: str) -> Self:
        self.env_overrides[key] = None
        return self

    def env_clear(self) -> Self:
        self.clear_env = True
        self.env_overrides.clear()
        return self

    def current_dir(self, cwd: StrPath) -> Self:
        self.cwd = Path(cwd)
        return self

    def write_stdin(self, data: str | bytes) -> Self:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.stdin = data
        return self

    @property
    def argv(self) -> Sequence[str]:
        return [os.fspath(self.program), *self.arguments]

    def build_env(self) -> dict[str, str]:
        env = {} if self.clear_env else dict(os.environ)
        for key, value in self.env_overrides.items():
            if value is None:
                env.pop(key, None)
            else:
                env[key] = value
        return env

    def output(self) -> subprocess.CompletedProcess[bytes]:
        return subprocess.run(
            self.argv,
            cwd=self.cwd,
            env=self.build_env(),
            input=self.stdin,
            capture_output=True,
            check=False,
        )

    def status(self) -> int:
        process = subprocess.run(
            self.argv,
            cwd=self.cwd,
            env=self.build_env(),
            input=self.stdin,
            check=False,
        )
        return process.returncode


def resolve_executable(name: str, bin_dirs: Iterable[Path]) -> Path:
    # Only bare names, a path would bypass the search directories
    if not name or Path(name).name != name:
        raise ExecutableNotFoundError("find executable", Path(name))

    search_path = os.pathsep.join(os.fspath(bin_dir) for bin_dir in bin_dirs)
    program = shutil.which(name, path=search_path) if search_path else None
    if program is None:
        raise ExecutableNotFoundError("find executable", Path(name))

    return Path(program)
