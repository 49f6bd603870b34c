from pathlib import Path
from typing import List, Optional, Tuple, Union

from dirstat.core.common.errors import AggregationErrorList
from dirstat.features.aggregator.domain.models import DirectoryRecord

from ..domain.models import MatchCriterion, ScanRequest
from .scanner import TreeScanner

def list_dir_stat(
    root_path: Union[str, Path], *keywords: str
) -> Tuple[List[DirectoryRecord], Optional[AggregationErrorList]]:
    """
    Lists directories under root_path whose name is one of `keywords`
    (every directory when none are given) along with their statistics.

    Raises InvalidRootError, NotADirectoryRootError or DiscoveryWalkError on
    fatal failures. Per-directory failures come back as the second element,
    next to every record that did succeed.
    """
    request = ScanRequest(
        root_path=Path(root_path),
        criterion=MatchCriterion.from_keywords(*keywords),
    )
    report = scanner.scan(request)
    return report.records, report.error

# Singleton Instance for easy import
scanner = TreeScanner()
