import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from integration_env.config import Settings, default_bin_dirs, get_settings


def test_default_settings() -> None:
    settings = Settings()

    assert settings.exec_mode == 0o755
    assert settings.encoding == "utf-8"
    assert settings.tmp_root is None
    assert Path(sys.executable).parent in settings.bin_dirs


def test_default_bin_dirs_unique() -> None:
    bin_dirs = default_bin_dirs()

    assert len(bin_dirs) == len(set(bin_dirs))


def test_get_settings_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.parametrize("exec_mode", [-1, 0o10000])
def test_invalid_exec_mode(exec_mode: int) -> None:
    with pytest.raises(ValidationError):
        Settings(exec_mode=exec_mode)


def test_settings_from_strings() -> None:
    settings = Settings.model_validate({"bin_dirs": ["/opt/bin"], "tmp_root": "/scratch"})

    assert settings.bin_dirs == [Path("/opt/bin")]
    assert settings.tmp_root == Path("/scratch")
