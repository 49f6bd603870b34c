# File: dirstat/core/common/errors.py

from pathlib import Path
from typing import Iterable, Iterator, List


class DirStatError(Exception):
    """Base class for every error raised by dirstat."""


class InvalidRootError(DirStatError):
    """
    The scan root does not exist or cannot be stat'd.
    The underlying OSError is chained as __cause__.
    """
    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Scan root is not accessible: {path} ({cause})")


class NotADirectoryRootError(DirStatError, NotADirectoryError):
    """The scan root exists but is not a directory."""
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Scan root is not a directory: {path}")


class DiscoveryWalkError(DirStatError):
    """
    The outer discovery walk failed.
    Fatal: an incomplete discovery pass cannot be trusted to have found every match.
    """
    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Discovery walk of {path} failed: {cause}")


class AggregationError(DirStatError):
    """A single matched directory could not be fully aggregated."""
    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class AggregationErrorList(DirStatError):
    """
    Composite of every AggregationError collected during one scan,
    kept in collection order.
    """
    def __init__(self, errors: Iterable[AggregationError]):
        self.errors: List[AggregationError] = list(errors)
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.errors:
            return ""
        lines = [f"{len(self.errors)} errors occurred:"]
        lines.extend(f"\t- {err}" for err in self.errors)
        return "\n".join(lines) + "\n"

    @property
    def paths(self) -> List[Path]:
        return [err.path for err in self.errors]

    def __iter__(self) -> Iterator[AggregationError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)
