import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Union

from safewalk.core.common.enums import EntryAttributes, TraversalMode

@dataclass(frozen=True)
class Entry:
    """
    Read-only view of one filesystem entry, captured at listing time.
    """
    path: Path
    name: str
    created: datetime
    modified: datetime
    accessed: datetime
    attributes: EntryAttributes

    @property
    def is_directory(self) -> bool:
        return bool(self.attributes & EntryAttributes.DIRECTORY)

    def __fspath__(self) -> str:
        return str(self.path)

@dataclass(frozen=True)
class FileEntry(Entry):
    size: int = 0

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def extension(self) -> str:
        return self.path.suffix

@dataclass(frozen=True)
class DirectoryEntry(Entry):
    pass

@dataclass(frozen=True)
class Children:
    """Result of listing one directory, already split by kind."""
    files: List[FileEntry] = field(default_factory=list)
    directories: List[DirectoryEntry] = field(default_factory=list)

@dataclass(frozen=True)
class WalkError:
    """
    One directory that could not be listed.
    Handed to the on_error callback once and then dropped.
    """
    message: str
    path: Path

RootLike = Union[str, os.PathLike, DirectoryEntry]

@dataclass(frozen=True)
class TraversalRequest:
    """
    Validated walk target. Building one fails fast, before any listing.
    """
    root: RootLike
    mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY

    def __post_init__(self):
        if self.root is None:
            raise ValueError("`root` cannot be None")

        raw = self.root.path if isinstance(self.root, DirectoryEntry) else self.root
        if not isinstance(raw, (str, os.PathLike)):
            raise TypeError(f"`root` must be a path or DirectoryEntry, got {type(raw).__name__}")
        if str(os.fspath(raw)).strip() == "":
            raise ValueError("`root` cannot be empty")

        root_path = Path(raw).absolute()
        if not root_path.exists():
            raise FileNotFoundError(f"Traversal root not found: {root_path}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Traversal root is not a directory: {root_path}")

        # Normalised forms; frozen dataclasses need object.__setattr__
        object.__setattr__(self, "root", root_path)
        object.__setattr__(self, "mode", TraversalMode(self.mode))

    @property
    def root_path(self) -> Path:
        return self.root

@dataclass
class ScanSummary:
    """
    Report returned after a scan drains its walks.
    """
    files_found: int = 0
    directories_found: int = 0
    errors: List[str] = field(default_factory=list)
