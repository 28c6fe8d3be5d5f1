from pathlib import Path


class IntegrationEnvError(Exception):
    operation: str
    path: Path

    def __init__(self, operation: str, path: Path):
        super().__init__(f"fail to {operation} {str(path)!r}")
        self.operation = operation
        self.path = path


class WorkspaceError(IntegrationEnvError):
    """The temporary workspace could not be allocated."""


class MaterializeError(IntegrationEnvError):
    """A recorded directory or file could not be created in the workspace."""


class ReadError(IntegrationEnvError):
    """A workspace file could not be read back as text."""


class ExecutableNotFoundError(IntegrationEnvError):
    """The executable under test is not installed alongside the interpreter."""
