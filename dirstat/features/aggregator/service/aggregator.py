import logging
from pathlib import Path
from typing import Optional

from dirstat.core.common.errors import AggregationError
from dirstat.core.filesystem.interfaces import IFileWalker
from dirstat.core.filesystem.walker import LocalFileWalker, stat_entry

from ..domain.interfaces import IDirectoryAggregator
from ..domain.models import DirectoryRecord

logger = logging.getLogger(__name__)

class DirectoryAggregator(IDirectoryAggregator):
    """
    Computes size, file count and subdirectory count for a single subtree.
    Holds no state between calls, so one instance is safe to share across worker threads.
    """

    def __init__(self, walker: Optional[IFileWalker] = None):
        self.walker = walker or LocalFileWalker()

    def aggregate(self, path: Path) -> DirectoryRecord:
        path = Path(path)
        total_size = 0
        file_count = 0
        subdir_count = 0

        try:
            # 1. Modification time of the directory entry itself
            last_modified = stat_entry(path).modified_at

            # 2. Full walk of the subtree
            for entry in self.walker.walk(path):
                # The root is the container, not a subdirectory of itself
                if entry.path == path:
                    continue

                if entry.is_dir:
                    subdir_count += 1
                elif entry.is_file:
                    total_size += entry.size_bytes
                    file_count += 1

        except OSError as e:
            raise AggregationError(path, e) from e

        logger.debug(
            f"Aggregated {path}: {total_size} bytes, {file_count} files, {subdir_count} dirs"
        )
        return DirectoryRecord(
            path=path,
            size_bytes=total_size,
            file_count=file_count,
            subdir_count=subdir_count,
            last_modified=last_modified,
        )
