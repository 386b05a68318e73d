import logging
from collections import deque
from pathlib import Path
from threading import Event
from typing import Callable, Iterator, Optional

from safewalk.core.common.enums import EntryAttributes, TraversalMode
from safewalk.core.config.settings import settings
from ..domain.interfaces import (
    DirectoryPredicate, ErrorCallback, FilePredicate, IDirectoryLister, IWalker,
)
from ..domain.models import Children, DirectoryEntry, Entry, FileEntry, WalkError
from .local_lister import LocalDirectoryLister

logger = logging.getLogger(__name__)

class BreadthFirstWalker(IWalker):
    """
    Lazy breadth-first traversal that survives unreadable directories.

    Each walk is a generator owning its own queue, so nothing is listed
    until the consumer asks for the next entry, and stopping early costs
    nothing. A directory that fails to list is reported through `on_error`
    and treated as empty; the rest of the queue carries on.
    """

    def __init__(self, lister: IDirectoryLister = None, follow_symlinks: bool = None):
        self.lister = lister or LocalDirectoryLister()
        self.follow_symlinks = settings.FOLLOW_SYMLINKS if follow_symlinks is None else follow_symlinks

    def walk_files(
        self,
        root: Path,
        mode: TraversalMode,
        predicate: Optional[FilePredicate] = None,
        on_error: Optional[ErrorCallback] = None,
        cancel_event: Optional[Event] = None,
    ) -> Iterator[FileEntry]:
        if mode == TraversalMode.TOP_LEVEL_ONLY:
            if _cancelled(cancel_event):
                return
            children = self._list(root, on_error)
            for file_entry in children.files:
                if _passes(file_entry, predicate):
                    yield file_entry
            return

        pending = deque([root])
        while pending:
            if _cancelled(cancel_event):
                logger.debug(f"File walk under {root} cancelled with {len(pending)} directories pending")
                return

            current = pending.popleft()
            children = self._list(current, on_error)

            # 1. This directory's files first
            for file_entry in children.files:
                if _passes(file_entry, predicate):
                    yield file_entry

            # 2. Then every sub-directory joins the queue; file walks never filter them.
            # Symlinked directories only join when links are followed.
            pending.extend(d.path for d in children.directories if self._descends(d))

    def walk_directories(
        self,
        root: Path,
        mode: TraversalMode,
        predicate: Optional[DirectoryPredicate] = None,
        on_error: Optional[ErrorCallback] = None,
        cancel_event: Optional[Event] = None,
    ) -> Iterator[DirectoryEntry]:
        if mode == TraversalMode.TOP_LEVEL_ONLY:
            if _cancelled(cancel_event):
                return
            children = self._list(root, on_error)
            for dir_entry in children.directories:
                if _passes(dir_entry, predicate):
                    yield dir_entry
            return

        pending = deque([root])
        while pending:
            if _cancelled(cancel_event):
                logger.debug(f"Directory walk under {root} cancelled with {len(pending)} directories pending")
                return

            current = pending.popleft()
            children = self._list(current, on_error)

            for dir_entry in children.directories:
                # Matching and descending are independent: excluded
                # directories are still walked into.
                if self._descends(dir_entry):
                    pending.append(dir_entry.path)
                if _passes(dir_entry, predicate):
                    yield dir_entry

    def _descends(self, directory: DirectoryEntry) -> bool:
        return self.follow_symlinks or not directory.attributes & EntryAttributes.REPARSE_POINT

    def _list(self, directory: Path, on_error: Optional[ErrorCallback]) -> Children:
        try:
            return self.lister.list_children(directory)
        except Exception as e:
            message = str(e) or e.__class__.__name__
            logger.warning(f"Could not list {directory}: {message}")
            if on_error is not None:
                on_error(WalkError(message=message, path=directory))
            return Children()

def _passes(entry: Entry, predicate: Optional[Callable[[Entry], bool]]) -> bool:
    if predicate is None:
        return True
    try:
        return bool(predicate(entry))
    except Exception as e:
        # A failing filter is a non-match, never the end of the walk
        logger.debug(f"Filter raised on {entry.path}: {e!r}")
        return False

def _cancelled(cancel_event: Optional[Event]) -> bool:
    return cancel_event is not None and cancel_event.is_set()
