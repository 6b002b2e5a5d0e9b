"""
Reconcile a directory's name with the dates of the files it contains.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .constants import get_logger
from .errors import EmptyDirectoryError, IntervalTooLargeError
from .files import FileCollection
from .interval import Interval


class NameStatus(Enum):
    """How the date range in a directory name relates to its files."""
    VALID = "valid"
    INVALID = "invalid"
    SUPERSET = "superset"
    NONE = "none"


@dataclass(frozen=True)
class DirectoryRename:
    """Proposed new path for a directory."""
    status: NameStatus
    source: Path
    destination: Path

    @property
    def needs_rename(self) -> bool:
        return self.source != self.destination


def get_status(interval: Interval, name: str) -> NameStatus:
    """Classify the date range a name starts with against an actual interval."""
    named = Interval.from_name(name)
    if named is None:
        return NameStatus.NONE
    # Exact match must win over containment
    if named.same_days(interval):
        return NameStatus.VALID
    if named.contains(interval):
        return NameStatus.SUPERSET
    return NameStatus.INVALID


class Directory:
    """A directory and the dated files found beneath it."""

    def __init__(self, path: Path, files: FileCollection):
        self.path = Path(path)
        self.files = files
        self.logger = get_logger()

    @property
    def name(self) -> str:
        return self.path.name

    def interval(self) -> Interval:
        """Interval spanned by the files, required to be present."""
        interval = self.files.interval()
        if interval is None:
            raise EmptyDirectoryError(f"No dated files found in {self.path}")
        return interval

    def name_status(self) -> NameStatus:
        return get_status(self.interval(), self.name)

    def check(self, max_interval: int) -> Optional[Interval]:
        """Return the files' interval if it spans at most max_interval days.

        Returns None when there are no dated files.
        """
        interval = self.files.interval()
        if interval is not None and interval.days > max_interval:
            raise IntervalTooLargeError(interval, max_interval)
        return interval

    def rename(self, max_interval: int) -> DirectoryRename:
        """Propose a path whose name starts with the files' date range.

        Names that already match, or that cover a wider range, are kept.
        Otherwise the formatted interval is prepended to the current name.
        """
        interval = self.interval()
        if interval.days > max_interval:
            raise IntervalTooLargeError(interval, max_interval)

        status = get_status(interval, self.name)
        if status in (NameStatus.VALID, NameStatus.SUPERSET):
            destination = self.path
        else:
            destination = self.path.with_name(f"{interval} {self.name}")

        self.logger.debug(f"{self.path}: {status.value} -> {destination}")
        return DirectoryRename(status, self.path, destination)
