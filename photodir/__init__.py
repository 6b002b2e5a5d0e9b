"""
photodir - Keep photo directory names in line with the dates of their photos.

Reads the creation dates of the photos in a directory, compares the date range
they span with the range written at the start of the directory name, and
proposes directory renames, sequential file renames and per-day folders.
"""

__version__ = "0.1.0"


# Public API
from .cli import main
from .config import Config
from .directory import Directory, DirectoryRename, NameStatus, get_status
from .errors import (EmptyDirectoryError, FileNameEncodingError, IntervalTooLargeError,
                     InvalidIntervalError, MetadataError, PhotodirError)
from .file_operations import FileOperations
from .files import FileCollection, FileRecord, PlannedMove, SortKey
from .interval import Interval

__all__ = [ "main", "Config", "Directory", "DirectoryRename", "NameStatus", "get_status",
            "EmptyDirectoryError", "FileNameEncodingError", "IntervalTooLargeError",
            "InvalidIntervalError", "MetadataError", "PhotodirError", "FileOperations",
            "FileCollection", "FileRecord", "PlannedMove", "SortKey", "Interval" ]
