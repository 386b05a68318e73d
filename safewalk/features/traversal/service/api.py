from threading import Event
from typing import Iterator, Optional

from safewalk.core.common.enums import TraversalMode
from safewalk.features.matching.service.translator import Filter, build_predicate
from ..data.bfs_walker import BreadthFirstWalker
from ..domain.interfaces import ErrorCallback, IWalker
from ..domain.models import DirectoryEntry, FileEntry, RootLike, TraversalRequest

class SafeTraversal:
    """
    Facade for the Traversal Feature.
    Validates the root and the filter up front, then hands back a lazy walk.
    """
    def __init__(self, walker: IWalker = None):
        self.walker = walker or BreadthFirstWalker()

    def traverse_files(
        self,
        root: RootLike,
        mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
        criteria: Optional[Filter] = None,
        *,
        on_error: Optional[ErrorCallback] = None,
        cancel_event: Optional[Event] = None,
    ) -> Iterator[FileEntry]:
        """
        Iterates files under `root`.

        Args:
            root: Directory to walk, as a path or a DirectoryEntry.
            mode: Only the root's own files, or the whole subtree breadth-first.
            criteria: A callable, FileSearchOptions, or a single criterion
                such as ExtensionOption or CommonSize. None walks unfiltered.
            on_error: Called once with a WalkError per directory that can't be listed.
            cancel_event: Stops the walk before the next directory once set.

        Raises (immediately, not on first iteration):
            ValueError / TypeError: bad `root` or unsupported `criteria`.
            FileNotFoundError / NotADirectoryError: `root` is not an existing directory.
        """
        request = TraversalRequest(root=root, mode=mode)
        predicate = None if criteria is None else build_predicate(criteria, for_directories=False)
        return self.walker.walk_files(request.root_path, request.mode, predicate, on_error, cancel_event)

    def traverse_directories(
        self,
        root: RootLike,
        mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
        criteria: Optional[Filter] = None,
        *,
        on_error: Optional[ErrorCallback] = None,
        cancel_event: Optional[Event] = None,
    ) -> Iterator[DirectoryEntry]:
        """
        Iterates directories under `root` (never `root` itself).
        Same arguments and failures as traverse_files, with
        DirectorySearchOptions in place of FileSearchOptions.
        Directories that don't match are still descended into.
        """
        request = TraversalRequest(root=root, mode=mode)
        predicate = None if criteria is None else build_predicate(criteria, for_directories=True)
        return self.walker.walk_directories(request.root_path, request.mode, predicate, on_error, cancel_event)

    def traverse_file_paths(self, root: RootLike, mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
                            criteria: Optional[Filter] = None, **kwargs) -> Iterator[str]:
        """Like traverse_files, yielding full path strings."""
        entries = self.traverse_files(root, mode, criteria, **kwargs)
        return (str(entry.path) for entry in entries)

    def traverse_directory_paths(self, root: RootLike, mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
                                 criteria: Optional[Filter] = None, **kwargs) -> Iterator[str]:
        """Like traverse_directories, yielding full path strings."""
        entries = self.traverse_directories(root, mode, criteria, **kwargs)
        return (str(entry.path) for entry in entries)

# Singleton Instance for easy import
traversal = SafeTraversal()

def traverse_files(root: RootLike, mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
                   criteria: Optional[Filter] = None, **kwargs) -> Iterator[FileEntry]:
    return traversal.traverse_files(root, mode, criteria, **kwargs)

def traverse_directories(root: RootLike, mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
                         criteria: Optional[Filter] = None, **kwargs) -> Iterator[DirectoryEntry]:
    return traversal.traverse_directories(root, mode, criteria, **kwargs)

def traverse_file_paths(root: RootLike, mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
                        criteria: Optional[Filter] = None, **kwargs) -> Iterator[str]:
    return traversal.traverse_file_paths(root, mode, criteria, **kwargs)

def traverse_directory_paths(root: RootLike, mode: TraversalMode = TraversalMode.TOP_LEVEL_ONLY,
                             criteria: Optional[Filter] = None, **kwargs) -> Iterator[str]:
    return traversal.traverse_directory_paths(root, mode, criteria, **kwargs)
