"""Exceptions raised by photodir."""


class PhotodirError(Exception):
    """Base exception for photodir operations."""


class InvalidIntervalError(PhotodirError, ValueError):
    """Raised when an interval would start after it ends."""


class IntervalTooLargeError(PhotodirError):
    """Raised when a directory's files span more days than allowed."""

    def __init__(self, interval, max_interval: int):
        self.interval = interval
        self.max_interval = max_interval
        super().__init__(
            f"Interval from {interval.start} to {interval.end} is too large "
            f"({interval.days} days)"
        )


class EmptyDirectoryError(PhotodirError):
    """Raised when a directory has no files with a creation date."""


class FileNameEncodingError(PhotodirError):
    """Raised when a file name part cannot be represented as text."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(message)


class MetadataError(PhotodirError):
    """Raised when a creation date tag is present but cannot be parsed."""
