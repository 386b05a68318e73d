import os
import stat
from datetime import datetime

import pytest

from safewalk.core.common.enums import EntryAttributes, TraversalMode
from safewalk.features.traversal.data import local_lister
from safewalk.features.traversal.data.bfs_walker import BreadthFirstWalker
from safewalk.features.traversal.data.local_lister import LocalDirectoryLister


def test_children_are_split_by_kind(data_tree):
    children = LocalDirectoryLister().list_children(data_tree)

    assert sorted(f.name for f in children.files) == ["a.txt", "b.log"]
    assert sorted(d.name for d in children.directories) == ["empty", "sub"]


def test_file_metadata(data_tree):
    children = LocalDirectoryLister().list_children(data_tree)
    a = next(f for f in children.files if f.name == "a.txt")

    assert a.size == 5000
    assert a.path == (data_tree / "a.txt").absolute()
    assert a.stem == "a"
    assert a.extension == ".txt"
    assert a.modified == datetime(2024, 1, 1, 9, 30)
    assert not a.is_directory


def test_directory_attributes(data_tree):
    children = LocalDirectoryLister().list_children(data_tree)

    for d in children.directories:
        assert d.is_directory
        assert d.attributes & EntryAttributes.DIRECTORY


@pytest.mark.skipif(os.name == "nt", reason="derived attributes are POSIX-only")
def test_derived_posix_attributes(tmp_path):
    (tmp_path / "plain.txt").write_text("x")
    (tmp_path / ".hidden").write_text("x")
    locked = tmp_path / "locked.txt"
    locked.write_text("x")
    locked.chmod(stat.S_IRUSR | stat.S_IRGRP)

    files = {f.name: f for f in LocalDirectoryLister().list_children(tmp_path).files}

    assert files["plain.txt"].attributes == EntryAttributes.NORMAL
    assert files[".hidden"].attributes & EntryAttributes.HIDDEN
    assert files["locked.txt"].attributes & EntryAttributes.READ_ONLY

    locked.chmod(stat.S_IRUSR | stat.S_IWUSR)


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="needs POSIX symlinks")
def test_symlinked_directory_is_listed_as_a_directory(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (tmp_path / "link").symlink_to(target, target_is_directory=True)

    children = LocalDirectoryLister().list_children(tmp_path)

    assert children.files == []
    dirs = {d.name: d for d in children.directories}
    assert sorted(dirs) == ["link", "target"]
    assert dirs["link"].attributes & EntryAttributes.REPARSE_POINT
    assert not dirs["target"].attributes & EntryAttributes.REPARSE_POINT


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="needs POSIX symlinks")
def test_symlinked_file_reports_target_size(tmp_path):
    (tmp_path / "real.txt").write_bytes(b"x" * 300)
    (tmp_path / "alias.txt").symlink_to(tmp_path / "real.txt")

    files = {f.name: f for f in LocalDirectoryLister().list_children(tmp_path).files}

    assert files["alias.txt"].size == 300
    assert files["alias.txt"].attributes & EntryAttributes.REPARSE_POINT
    assert files["real.txt"].attributes == EntryAttributes.NORMAL


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="needs POSIX symlinks")
def test_dangling_link_is_skipped(tmp_path):
    (tmp_path / "ghost").symlink_to(tmp_path / "nowhere")
    (tmp_path / "real.txt").write_text("x")

    children = LocalDirectoryLister().list_children(tmp_path)
    assert [f.name for f in children.files] == ["real.txt"]
    assert children.directories == []


def test_unrepresentable_timestamp_skips_only_that_entry(tmp_path, monkeypatch):
    """
    Verifies:
    1. An entry whose timestamps can't be converted is dropped.
    2. Its siblings are still listed.
    3. Nothing is raised, so the walker never sees a failed directory.
    """
    (tmp_path / "good.txt").write_text("fine")
    bad = tmp_path / "bad.txt"
    bad.write_text("far future")
    bad_ts = datetime(2001, 2, 3).timestamp()
    os.utime(bad, (bad_ts, bad_ts))

    class FarFutureDatetime(datetime):
        @classmethod
        def fromtimestamp(cls, ts, tz=None):
            if ts == bad_ts:
                raise ValueError("year 33658 is out of range")
            return datetime.fromtimestamp(ts, tz)

    monkeypatch.setattr(local_lister, "datetime", FarFutureDatetime)

    children = LocalDirectoryLister().list_children(tmp_path)

    assert [f.name for f in children.files] == ["good.txt"]


def test_unrepresentable_timestamp_does_not_fail_the_walk(data_tree, monkeypatch):
    bad_ts = datetime(2024, 6, 1, 18, 45).timestamp()

    class FarFutureDatetime(datetime):
        @classmethod
        def fromtimestamp(cls, ts, tz=None):
            if ts == bad_ts:
                raise OverflowError("timestamp out of range for platform time_t")
            return datetime.fromtimestamp(ts, tz)

    monkeypatch.setattr(local_lister, "datetime", FarFutureDatetime)
    errors = []

    found = BreadthFirstWalker().walk_files(data_tree, TraversalMode.FULL_SUBTREE, on_error=errors.append)

    # Only b.log carries the bad timestamp; the rest of the tree is intact
    assert sorted(f.name for f in found) == ["a.txt", "c.txt", "d.TXT"]
    assert errors == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalDirectoryLister().list_children(tmp_path / "gone")
