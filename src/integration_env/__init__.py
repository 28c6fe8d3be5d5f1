from .command import Command, resolve_executable
from .config import Settings, get_settings
from .entry import DirMarker, Entry, FileContent
from .environment import CommandCallback, Environment
from .errors import (
    ExecutableNotFoundError,
    IntegrationEnvError,
    MaterializeError,
    ReadError,
    WorkspaceError,
)
from .materialize import ChmodResult
from .output import print_output, print_result_output

__all__ = [
    "ChmodResult",
    "Command",
    "CommandCallback",
    "DirMarker",
    "Entry",
    "Environment",
    "ExecutableNotFoundError",
    "FileContent",
    "IntegrationEnvError",
    "MaterializeError",
    "ReadError",
    "Settings",
    "WorkspaceError",
    "get_settings",
    "print_output",
    "print_result_output",
    "resolve_executable",
]
