from abc import ABC, abstractmethod
from pathlib import Path
from threading import Event
from typing import Callable, Iterator, Optional

from safewalk.core.common.enums import TraversalMode
from .models import Children, DirectoryEntry, FileEntry, WalkError

FilePredicate = Callable[[FileEntry], bool]
DirectoryPredicate = Callable[[DirectoryEntry], bool]
ErrorCallback = Callable[[WalkError], None]

class IDirectoryLister(ABC):
    """
    Contract for the platform's list-children capability.
    Abstracts os.scandir so walks can run against fakes.
    """
    @abstractmethod
    def list_children(self, directory: Path) -> Children:
        """
        Lists the immediate children of `directory`, split into files and
        sub-directories, in whatever order the platform returns them.
        Raises whatever the platform raises when the directory can't be read.
        """
        pass

class IWalker(ABC):
    """
    Contract for lazy traversal of a directory tree.
    """
    @abstractmethod
    def walk_files(
        self,
        root: Path,
        mode: TraversalMode,
        predicate: Optional[FilePredicate] = None,
        on_error: Optional[ErrorCallback] = None,
        cancel_event: Optional[Event] = None,
    ) -> Iterator[FileEntry]:
        """Yields matching files one by one."""
        pass

    @abstractmethod
    def walk_directories(
        self,
        root: Path,
        mode: TraversalMode,
        predicate: Optional[DirectoryPredicate] = None,
        on_error: Optional[ErrorCallback] = None,
        cancel_event: Optional[Event] = None,
    ) -> Iterator[DirectoryEntry]:
        """Yields matching directories one by one. The root itself is never yielded."""
        pass
