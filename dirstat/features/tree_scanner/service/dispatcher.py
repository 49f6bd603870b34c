# File: dirstat/features/tree_scanner/service/dispatcher.py

import logging
import queue
import threading
from pathlib import Path
from typing import List

from dirstat.core.common.errors import AggregationError
from dirstat.core.config.settings import settings
from dirstat.features.aggregator.domain.interfaces import IDirectoryAggregator

from ..domain.models import ScanReport

logger = logging.getLogger(__name__)

# Sentinel telling a worker or the collector to exit
_STOP = object()

class AggregationPool:
    """
    Fixed set of worker threads fed by a bounded work queue.

    Workers never touch the report. They push each outcome onto a results queue
    and a single collector thread, the only writer, appends it to the report.
    """

    def __init__(self, aggregator: IDirectoryAggregator, workers: int, queue_size: int):
        settings.validate_pool(workers, queue_size)
        self.aggregator = aggregator
        self.report = ScanReport()

        self._work: "queue.Queue" = queue.Queue(maxsize=queue_size)
        self._results: "queue.Queue" = queue.Queue()
        self._workers: List[threading.Thread] = [
            threading.Thread(target=self._work_loop, name=f"dirstat-worker-{i}", daemon=True)
            for i in range(workers)
        ]
        self._collector = threading.Thread(
            target=self._collect_loop, name="dirstat-collector", daemon=True
        )
        self._started = False
        self._closed = False

    def start(self) -> "AggregationPool":
        if self._started:
            raise RuntimeError("Aggregation pool already started.")
        self._started = True
        self._collector.start()
        for worker in self._workers:
            worker.start()
        return self

    def submit(self, path: Path) -> None:
        """
        Queues a directory for aggregation.
        Blocks only while the work queue is full, never on a running aggregation.
        """
        if not self._started or self._closed:
            raise RuntimeError("Aggregation pool is not accepting work.")
        self._work.put(path)

    def close(self) -> ScanReport:
        """
        Join barrier: waits for every queued aggregation, then for the collector.
        Safe to call more than once.
        """
        if self._started and not self._closed:
            self._closed = True
            for _ in self._workers:
                self._work.put(_STOP)
            for worker in self._workers:
                worker.join()

            # Every worker has exited, so nothing else can land on the results queue
            self._results.put(_STOP)
            self._collector.join()
        return self.report

    def __enter__(self) -> "AggregationPool":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _work_loop(self) -> None:
        while True:
            path = self._work.get()
            if path is _STOP:
                return

            try:
                outcome = self.aggregator.aggregate(path)
            except AggregationError as e:
                outcome = e
            except Exception as e:
                # A crashed worker would shrink the pool and could stall submit()
                logger.exception(f"Unexpected failure aggregating {path}: {e}")
                outcome = AggregationError(path, e)

            self._results.put(outcome)

    def _collect_loop(self) -> None:
        while True:
            outcome = self._results.get()
            if outcome is _STOP:
                return

            if isinstance(outcome, AggregationError):
                logger.error(f"Aggregation failed for {outcome.path}: {outcome.cause}")
                self.report.errors.append(outcome)
            else:
                self.report.records.append(outcome)
