from dataclasses import dataclass


@dataclass(frozen=True)
class FileContent:
    text: str
    is_exec: bool = False


@dataclass(frozen=True)
class DirMarker:
    pass


type Entry = FileContent | DirMarker
