# File: dirstat/core/filesystem/types.py

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from dirstat.core.common.enums import EntryKind

@dataclass(frozen=True)
class WalkEntry:
    """
    Metadata for one filesystem entry visited by a walk.
    size_bytes is only meaningful for regular files.
    """
    path: Path
    kind: EntryKind
    size_bytes: int
    modified_at: datetime

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE
