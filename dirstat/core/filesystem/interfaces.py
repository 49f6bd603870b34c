# File: dirstat/core/filesystem/interfaces.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from .types import WalkEntry

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk so services can be tested against fake trees.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[WalkEntry]:
        """
        Yields the root entry first, then every entry below it at any depth.
        Errors listing or stat'ing an entry must propagate and end the walk.
        """
        pass
