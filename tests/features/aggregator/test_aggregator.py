import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from dirstat.core.common.errors import AggregationError
from dirstat.core.filesystem.walker import LocalFileWalker
from dirstat.features.aggregator.service.aggregator import DirectoryAggregator


class FailingWalker(LocalFileWalker):
    """Raises a permission error once the walk reaches `fail_at`."""

    def __init__(self, fail_at: Path):
        super().__init__(follow_symlinks=False)
        self.fail_at = fail_at

    def walk(self, root):
        for entry in super().walk(root):
            if entry.path == self.fail_at:
                raise PermissionError(13, "Permission denied", str(self.fail_at))
            yield entry


@pytest.fixture
def aggregator():
    return DirectoryAggregator(walker=LocalFileWalker(follow_symlinks=False))


@pytest.fixture
def project_tree(tmp_path):
    """
    /project
      readme.md            (5 bytes)
      /src
        main.py            (10 bytes)
        /pkg
          util.py          (7 bytes)
      /empty
    """
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "readme.md").write_bytes(b"hello")
    (root / "src" / "main.py").write_bytes(b"print('x')")
    (root / "src" / "pkg" / "util.py").write_bytes(b"pass  \n")
    return root


def test_aggregate_counts_whole_subtree(aggregator, project_tree):
    record = aggregator.aggregate(project_tree)

    assert record.path == project_tree
    assert record.size_bytes == 5 + 10 + 7
    assert record.file_count == 3
    # src, src/pkg, empty -- never the root itself
    assert record.subdir_count == 3


def test_aggregate_excludes_root_from_subdir_count(aggregator, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()

    record = aggregator.aggregate(empty)

    assert record.subdir_count == 0
    assert record.file_count == 0
    assert record.size_bytes == 0


def test_last_modified_is_the_directory_own_mtime(aggregator, project_tree):
    expected = datetime.fromtimestamp(os.stat(project_tree).st_mtime, tz=timezone.utc)

    record = aggregator.aggregate(project_tree)

    assert record.last_modified == expected


def test_symlinks_are_not_counted(aggregator, project_tree, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "big.bin").write_bytes(b"x" * 100)
    (project_tree / "dir_link").symlink_to(outside, target_is_directory=True)
    (project_tree / "file_link").symlink_to(project_tree / "readme.md")

    record = aggregator.aggregate(project_tree)

    assert record.size_bytes == 22
    assert record.file_count == 3
    assert record.subdir_count == 3


def test_walk_failure_raises_aggregation_error(project_tree):
    locked = project_tree / "src" / "pkg"
    aggregator = DirectoryAggregator(walker=FailingWalker(locked))

    with pytest.raises(AggregationError) as exc_info:
        aggregator.aggregate(project_tree)

    assert exc_info.value.path == project_tree
    assert isinstance(exc_info.value.cause, PermissionError)
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_vanished_directory_raises_aggregation_error(aggregator, tmp_path):
    with pytest.raises(AggregationError) as exc_info:
        aggregator.aggregate(tmp_path / "gone")

    assert isinstance(exc_info.value.cause, FileNotFoundError)
