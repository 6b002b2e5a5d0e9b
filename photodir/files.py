"""
Dated file records and the collection operations built on them.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from itertools import groupby
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

from .errors import FileNameEncodingError
from .interval import Interval


@dataclass(frozen=True)
class FileRecord:
    """A file and the moment it was created."""
    path: Path
    created: datetime

    @property
    def date(self) -> date:
        return self.created.date()


@dataclass(frozen=True)
class PlannedMove:
    """Proposed new location for a file."""
    record: FileRecord
    destination: Path

    @property
    def source(self) -> Path:
        return self.record.path


class SortKey(Enum):
    """Orderings available for a file collection."""
    PATH = "path"
    CREATED = "created"

    @property
    def key(self) -> Callable[[FileRecord], object]:
        if self is SortKey.PATH:
            return lambda record: record.path
        return lambda record: record.created


def sequence_width(count: int) -> int:
    """Digits needed to write count in base 10."""
    return max(1, len(str(count)))


def _text_part(path: Path, part: str) -> str:
    """Ensure a file name part can be written out as text."""
    try:
        part.encode("utf-8")
    except UnicodeEncodeError:
        raise FileNameEncodingError(path, f"File name part {part!r} of {path} is not valid text")
    return part


class FileCollection:
    """Records of the dated files found in one directory tree."""

    def __init__(self, records: Iterable[FileRecord] = ()):
        self._records = list(records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"FileCollection({self._records!r})"

    def interval(self) -> Optional[Interval]:
        """Interval from the earliest to the latest creation time."""
        if not self._records:
            return None
        created = [record.created for record in self._records]
        return Interval(min(created), max(created))

    def sorted(self, key: SortKey = SortKey.CREATED) -> List[FileRecord]:
        return sorted(self._records, key=key.key)

    def group_by_days(self) -> List[List[FileRecord]]:
        """Split chronologically sorted records into runs of one calendar day."""
        return [list(group) for _, group in
                groupby(self.sorted(SortKey.CREATED), key=lambda record: record.date)]

    def move_by_days(self) -> List[List[PlannedMove]]:
        """Plan moving each file into a YYYY-MM-DD subfolder of its own folder.

        Files without a parent folder or a file name are left out.
        """
        plan = []
        for group in self.group_by_days():
            moves = []
            for record in group:
                if not record.path.name:
                    continue
                day_dir = record.path.parent / record.date.isoformat()
                moves.append(PlannedMove(record, day_dir / record.path.name))
            if moves:
                plan.append(moves)
        return plan

    def rename_files(self, name: str, key: SortKey = SortKey.PATH,
                     digits: Optional[int] = None) -> List[PlannedMove]:
        """Plan renaming files to "<name> <number>.<ext>" in the given order.

        Numbers start at 1 and are zero-padded to ``digits``, or to the width
        of the file count when ``digits`` is None.
        """
        if digits is None:
            digits = sequence_width(len(self._records))
        elif digits < 1:
            raise ValueError(f"Number of digits must be positive, got {digits}")

        plan = []
        for number, record in enumerate(self.sorted(key), start=1):
            if not record.path.name:
                raise FileNameEncodingError(record.path, f"{record.path} has no file name")
            suffix = _text_part(record.path, record.path.suffix)
            new_name = f"{name} {number:0{digits}d}{suffix}"
            plan.append(PlannedMove(record, record.path.with_name(new_name)))
        return plan
