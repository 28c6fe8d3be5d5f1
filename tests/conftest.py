from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from integration_env.config import Settings
from integration_env.pytest_plugin import (  # noqa: F401
    integration_env,
    integration_env_factory,
)

# Keep every workspace below the pytest tmp dir


@pytest.fixture(autouse=True)
def settings(tmp_path: Path) -> Iterator[Settings]:
    settings = Settings(tmp_root=tmp_path)
    with patch("integration_env.environment.get_settings", return_value=settings):
        yield settings
