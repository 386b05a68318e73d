# File: tests/conftest.py

import os
import sys
import logging
from datetime import datetime
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from safewalk.core.common.enums import EntryAttributes
from safewalk.features.traversal.data.local_lister import LocalDirectoryLister
from safewalk.features.traversal.domain.interfaces import IDirectoryLister
from safewalk.features.traversal.domain.models import DirectoryEntry, FileEntry

NOON = datetime(2024, 1, 1, 12, 0, 0)


def make_file_entry(name="report.txt", size=0, created=NOON, modified=NOON, accessed=NOON,
                    attributes=EntryAttributes.NORMAL, parent=Path("/data")):
    return FileEntry(
        path=parent / name,
        name=name,
        created=created,
        modified=modified,
        accessed=accessed,
        attributes=attributes,
        size=size,
    )


def make_dir_entry(name="docs", created=NOON, modified=NOON, accessed=NOON,
                   attributes=EntryAttributes.DIRECTORY, parent=Path("/data")):
    return DirectoryEntry(
        path=parent / name,
        name=name,
        created=created,
        modified=modified,
        accessed=accessed,
        attributes=attributes,
    )


class FailingLister(IDirectoryLister):
    """
    Real listings, except for the directories named in `broken`,
    which raise PermissionError the way an unreadable folder would.
    Running as root ignores permission bits, so tests can't rely on chmod.
    """

    def __init__(self, broken):
        self.inner = LocalDirectoryLister()
        self.broken = {Path(p).absolute() for p in broken}
        self.calls = []

    def list_children(self, directory):
        self.calls.append(Path(directory))
        if Path(directory).absolute() in self.broken:
            raise PermissionError(13, "Permission denied", str(directory))
        return self.inner.list_children(directory)


@pytest.fixture(scope="session", autouse=True)
def quiet_logs():
    """Keeps expected WARNINGs for broken directories out of the test output."""
    logging.getLogger("safewalk").setLevel(logging.ERROR)
    yield


@pytest.fixture
def data_tree(tmp_path):
    """
    /data
      a.txt      5 000 bytes, modified 2024-01-01
      b.log     50 000 bytes, modified 2024-06-01
      sub/
        c.txt    5 000 bytes
        deeper/
          d.TXT  10 bytes
      empty/
    """
    root = tmp_path / "data"
    root.mkdir()

    a = root / "a.txt"
    a.write_bytes(b"a" * 5000)
    b = root / "b.log"
    b.write_bytes(b"b" * 50000)

    ts_a = datetime(2024, 1, 1, 9, 30).timestamp()
    ts_b = datetime(2024, 6, 1, 18, 45).timestamp()
    os.utime(a, (ts_a, ts_a))
    os.utime(b, (ts_b, ts_b))

    sub = root / "sub"
    sub.mkdir()
    (sub / "c.txt").write_bytes(b"c" * 5000)

    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "d.TXT").write_bytes(b"d" * 10)

    (root / "empty").mkdir()

    return root
