import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

from dirstat.core.common.errors import (
    AggregationError,
    AggregationErrorList,
    InvalidRootError,
    NotADirectoryRootError,
)
from dirstat.features.aggregator.domain.models import DirectoryRecord

@dataclass(frozen=True)
class MatchCriterion:
    """
    Set of directory names that trigger aggregation.
    An empty set matches every directory.
    """
    keywords: FrozenSet[str] = frozenset()

    @classmethod
    def from_keywords(cls, *keywords: str) -> "MatchCriterion":
        return cls(keywords=frozenset(keywords))

    @property
    def is_wildcard(self) -> bool:
        return not self.keywords

    def matches(self, name: str) -> bool:
        """Exact base-name equality, no globbing or substring matching."""
        return self.is_wildcard or name in self.keywords

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to scan a directory tree for matching directories.
    """
    root_path: Path
    criterion: MatchCriterion = field(default_factory=MatchCriterion)

    def __post_init__(self):
        # Absolute and lexically normalized: "x/.." collapses to its parent
        object.__setattr__(self, "root_path", Path(os.path.normpath(Path(self.root_path).absolute())))

        # os.stat rather than Path.exists() so permission errors are not hidden
        try:
            st = os.stat(self.root_path)
        except OSError as e:
            raise InvalidRootError(self.root_path, e) from e

        if not stat.S_ISDIR(st.st_mode):
            raise NotADirectoryRootError(self.root_path)

@dataclass
class ScanReport:
    """
    Report returned after scanning completes.
    Records arrive in completion order; treat them as a set keyed by path.
    """
    records: List[DirectoryRecord] = field(default_factory=list)
    errors: List[AggregationError] = field(default_factory=list)

    @property
    def error(self) -> Optional[AggregationErrorList]:
        """Composite of every aggregation failure, or None if all succeeded."""
        if not self.errors:
            return None
        return AggregationErrorList(self.errors)

    def records_by_path(self) -> Dict[Path, DirectoryRecord]:
        return {record.path: record for record in self.records}
