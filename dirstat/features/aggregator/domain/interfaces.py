from abc import ABC, abstractmethod
from pathlib import Path

from .models import DirectoryRecord

class IDirectoryAggregator(ABC):
    """
    Contract for computing one directory's recursive statistics.
    """
    @abstractmethod
    def aggregate(self, path: Path) -> DirectoryRecord:
        """
        Walks the full subtree of `path` and returns its totals.
        Raises AggregationError if any entry cannot be listed or stat'd;
        a partial record is never returned.
        """
        pass
