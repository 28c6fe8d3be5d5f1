"""
Pytest fixtures binding environments to the scope of a test.

Enable them from a ``conftest.py``:

```python
pytest_plugins = ["integration_env.pytest_plugin"]
```
"""

import re
from collections.abc import Callable, Iterator
from contextlib import ExitStack

import pytest

from .config import Settings
from .environment import Environment

type EnvironmentFactory = Callable[..., Environment]


@pytest.fixture
def integration_env_factory() -> Iterator[EnvironmentFactory]:
    stack = ExitStack()

    def integration_env_factory(
        label: str,
        settings: Settings | None = None,
    ) -> Environment:
        return stack.enter_context(Environment(label, settings))

    with stack:
        yield integration_env_factory


@pytest.fixture
def integration_env(
    request: pytest.FixtureRequest,
    integration_env_factory: EnvironmentFactory,
) -> Environment:
    # Parametrized test names contain characters that are not valid in paths
    label = re.sub(r"[^\w.-]+", "_", request.node.name)
    return integration_env_factory(label)
