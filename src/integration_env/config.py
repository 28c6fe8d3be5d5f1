import sys
import sysconfig
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field


def default_bin_dirs() -> list[Path]:
    # Console scripts of the current environment, then the interpreter itself
    bin_dirs: list[Path] = []

    for bin_dir in (
        sysconfig.get_path("scripts"),
        Path(sys.executable).parent,
    ):
        bin_dir = Path(bin_dir)
        if bin_dir not in bin_dirs:
            bin_dirs.append(bin_dir)

    return bin_dirs


class Settings(BaseModel):
    exec_mode: int = Field(default=0o755, ge=0, le=0o7777)
    encoding: str = "utf-8"
    bin_dirs: list[Path] = Field(default_factory=default_bin_dirs)
    tmp_root: Path | None = None


@lru_cache(1)
def get_settings() -> Settings:
    return Settings()
