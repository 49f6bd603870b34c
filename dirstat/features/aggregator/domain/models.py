from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

@dataclass(frozen=True)
class DirectoryRecord:
    """
    Aggregate statistics for one matched directory.
    Counts cover the whole subtree; subdir_count never includes the directory itself.
    """
    path: Path
    size_bytes: int
    file_count: int
    subdir_count: int
    last_modified: datetime
