import logging
import os
import stat
from datetime import datetime
from pathlib import Path

from safewalk.core.common.enums import EntryAttributes
from safewalk.core.config.settings import settings
from ..domain.interfaces import IDirectoryLister
from ..domain.models import Children, DirectoryEntry, Entry, FileEntry

logger = logging.getLogger(__name__)

class LocalDirectoryLister(IDirectoryLister):
    """
    Concrete implementation using os.scandir, one call per directory.

    Links are classified by their target: a link to a directory is listed
    as a directory carrying REPARSE_POINT. Whether it gets descended into
    is the walker's decision.
    """

    def list_children(self, directory: Path) -> Children:
        files, directories = [], []

        # The whole listing happens inside the scandir context so a failure
        # midway surfaces to the caller as a single error.
        with os.scandir(directory) as it:
            for item in it:
                try:
                    entry = self._to_entry(item)
                except (OSError, ValueError, OverflowError) as e:
                    # Entry vanished, dangling link, or timestamps the platform can't represent
                    logger.debug(f"Skipping unreadable entry {item.path}: {e}")
                    continue

                if isinstance(entry, DirectoryEntry):
                    directories.append(entry)
                else:
                    files.append(entry)

        return Children(files=files, directories=directories)

    def _to_entry(self, item: os.DirEntry) -> Entry:
        is_dir = item.is_dir()
        st = item.stat()
        common = dict(
            path=Path(item.path).absolute(),
            name=item.name,
            created=_creation_time(st),
            modified=datetime.fromtimestamp(st.st_mtime),
            accessed=datetime.fromtimestamp(st.st_atime),
            attributes=self._attributes(item, st, is_dir),
        )
        if is_dir:
            return DirectoryEntry(**common)
        return FileEntry(size=st.st_size, **common)

    def _attributes(self, item: os.DirEntry, st: os.stat_result, is_dir: bool) -> EntryAttributes:
        native = getattr(st, "st_file_attributes", None)
        if native is not None:
            attrs = EntryAttributes(native & _KNOWN_ATTRIBUTES)
        else:
            attrs = EntryAttributes.NONE
            if not st.st_mode & stat.S_IWUSR:
                attrs |= EntryAttributes.READ_ONLY
            if settings.HIDDEN_PREFIX and item.name.startswith(settings.HIDDEN_PREFIX):
                attrs |= EntryAttributes.HIDDEN

        # st describes the target, so the link itself is checked separately
        if item.is_symlink():
            attrs |= EntryAttributes.REPARSE_POINT

        if is_dir:
            attrs |= EntryAttributes.DIRECTORY
        elif attrs == EntryAttributes.NONE:
            attrs = EntryAttributes.NORMAL

        return attrs

_KNOWN_ATTRIBUTES = 0
for _flag in EntryAttributes:
    _KNOWN_ATTRIBUTES |= _flag.value

def _creation_time(st: os.stat_result) -> datetime:
    # st_birthtime exists on macOS/BSD (and Windows on 3.12+); st_ctime is
    # creation time on older Windows and inode change time elsewhere.
    return datetime.fromtimestamp(getattr(st, "st_birthtime", st.st_ctime))
