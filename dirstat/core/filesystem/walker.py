# File: dirstat/core/filesystem/walker.py

import os
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from dirstat.core.common.enums import EntryKind
from dirstat.core.config.settings import settings
from .interfaces import IFileWalker
from .types import WalkEntry


def stat_entry(path: Path, follow_symlinks: bool = True) -> WalkEntry:
    """
    Stats a single path. Raises the underlying OSError on failure.
    With follow_symlinks=False a link is reported as EntryKind.OTHER,
    and so is a dangling link when following.
    """
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except FileNotFoundError:
        if not (follow_symlinks and os.path.islink(path)):
            raise
        st = os.lstat(path)

    if stat.S_ISDIR(st.st_mode):
        kind = EntryKind.DIRECTORY
    elif stat.S_ISREG(st.st_mode):
        kind = EntryKind.FILE
    else:
        kind = EntryKind.OTHER

    return WalkEntry(
        path=path,
        kind=kind,
        size_bytes=st.st_size if kind == EntryKind.FILE else 0,
        modified_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
    )


def _raise_walk_error(error: OSError) -> None:
    # os.walk swallows listing errors unless onerror re-raises them
    raise error


class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    """

    def __init__(self, follow_symlinks: Optional[bool] = None):
        if follow_symlinks is None:
            follow_symlinks = settings.FOLLOW_SYMLINKS
        self.follow_symlinks = follow_symlinks

    def walk(self, root: Path) -> Iterator[WalkEntry]:
        root = Path(root)
        yield stat_entry(root)

        for dirpath, dirnames, filenames in os.walk(
            root, onerror=_raise_walk_error, followlinks=self.follow_symlinks
        ):
            parent = Path(dirpath)
            # Subdirectories are reported when their parent is listed,
            # before os.walk descends into them
            for name in dirnames:
                yield stat_entry(parent / name, follow_symlinks=self.follow_symlinks)
            for name in filenames:
                yield stat_entry(parent / name, follow_symlinks=self.follow_symlinks)
