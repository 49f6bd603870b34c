import logging
from pathlib import Path
from typing import Optional

from dirstat.core.common.errors import DiscoveryWalkError
from dirstat.core.config.settings import settings
from dirstat.core.filesystem.interfaces import IFileWalker
from dirstat.core.filesystem.walker import LocalFileWalker
from dirstat.features.aggregator.domain.interfaces import IDirectoryAggregator
from dirstat.features.aggregator.service.aggregator import DirectoryAggregator

from ..domain.models import ScanRequest, ScanReport
from .dispatcher import AggregationPool

logger = logging.getLogger(__name__)

class TreeScanner:
    """
    Service responsible for discovering matching directories and
    aggregating each of them concurrently.
    """

    def __init__(
        self,
        walker: Optional[IFileWalker] = None,
        aggregator: Optional[IDirectoryAggregator] = None,
        workers: Optional[int] = None,
        queue_size: Optional[int] = None,
    ):
        self.walker = walker or LocalFileWalker()
        self.aggregator = aggregator or DirectoryAggregator()
        # None defers to settings at scan time
        self.workers = workers
        self.queue_size = queue_size

    def scan(self, request: ScanRequest) -> ScanReport:
        """
        Walks request.root_path once and dispatches every matching directory,
        the root included, to the worker pool.

        Matched directories are still descended, so nested matches get their
        own independent record.

        Raises:
            DiscoveryWalkError: the discovery walk itself failed. Already
                dispatched aggregations are drained first and their results dropped.

        Returns:
            ScanReport with every successful record and every aggregation failure.
        """
        criterion = request.criterion
        keywords = "*" if criterion.is_wildcard else ", ".join(sorted(criterion.keywords))
        logger.info(f"Starting scan of: {request.root_path} (keywords: {keywords})")

        pool = AggregationPool(
            self.aggregator,
            workers=self.workers if self.workers is not None else settings.SCAN_WORKERS,
            queue_size=self.queue_size if self.queue_size is not None else settings.DISPATCH_QUEUE_SIZE,
        )
        dispatched = 0

        pool.start()
        try:
            for entry in self.walker.walk(request.root_path):
                if entry.is_dir and criterion.matches(entry.path.name):
                    logger.debug(f"Dispatching {entry.path}")
                    pool.submit(entry.path)
                    dispatched += 1
        except OSError as e:
            failed_path = Path(e.filename) if e.filename else request.root_path
            logger.error(f"Discovery walk failed at {failed_path}: {e}")
            raise DiscoveryWalkError(failed_path, e) from e
        finally:
            report = pool.close()

        logger.info(
            f"Scan complete. Aggregated: {len(report.records)}/{dispatched} "
            f"(failures: {len(report.errors)})"
        )
        return report
