"""Reading photo creation dates from EXIF metadata."""

import json
import re
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from . import constants
from .constants import get_logger
from .errors import MetadataError
from .files import FileCollection, FileRecord
from .progress import ProgressContext

logger = get_logger()

CREATION_TAG = "DateTimeOriginal"

# EXIF (2025:05:01 12:00:00) or ISO-like (2025-05-01 12:00:00) date-times;
# sub-seconds and offsets that may follow are ignored
EXIF_DATETIME_PATTERN = re.compile(
    r'(\d{4})[-:](\d{2})[-:](\d{2})[T ](\d{2}):(\d{2}):(\d{2})')

_exiftool_available: Optional[bool] = None


def exiftool_available() -> bool:
    """Check (once) whether exiftool can be run."""
    global _exiftool_available
    if _exiftool_available is None:
        _exiftool_available = constants.check_tool_availability("exiftool", "-ver")
        if not _exiftool_available:
            logger.warning("exiftool unavailable: no creation dates can be read")
    return _exiftool_available


def parse_exif_datetime(date_str: str) -> datetime:
    """Parse an EXIF date-time string into a naive datetime."""
    match = EXIF_DATETIME_PATTERN.match(date_str.strip())
    if not match:
        raise MetadataError(f"Failed to parse date: {date_str}")
    try:
        return datetime(*(int(part) for part in match.groups()))
    except ValueError as e:
        raise MetadataError(f"Failed to parse date: {date_str} ({e})")


def read_exif_tags(file_path: Path) -> Dict[str, object]:
    """Run exiftool on a single file and return its tags."""
    result = subprocess.run(
        ["exiftool", "-q", "-json", f"-{CREATION_TAG}", str(file_path)],
        capture_output=True, text=True
    )
    if not result.stdout.strip():
        logger.debug(f"exiftool returned no data for {file_path}: {result.stderr.strip()}")
        return {}
    try:
        return json.loads(result.stdout)[0]
    except (json.JSONDecodeError, IndexError) as e:
        logger.debug(f"Failed to parse exiftool output for {file_path}: {e}")
        return {}


def extract_creation_time(file_path: Path) -> Optional[datetime]:
    """Get the original creation time of a photo, if it has one.

    Raises OSError when the file cannot be read and MetadataError when the
    creation tag is present but malformed.
    """
    # Surface I/O problems before handing the file to exiftool
    with open(file_path, "rb"):
        pass

    if not exiftool_available():
        return None

    value = read_exif_tags(file_path).get(CREATION_TAG)
    if value is None:
        return None

    try:
        return parse_exif_datetime(str(value))
    except MetadataError as e:
        raise MetadataError(f"{e} in {file_path}") from e


def read_collection(files: List[Path], extractor=extract_creation_time,
                    progress_ctx: Optional[ProgressContext] = None) -> FileCollection:
    """Build the collection of dated files from a list of file paths."""
    records = []
    for file_path in files:
        if progress_ctx:
            progress_ctx.update(f"Reading: {file_path.name}")

        created = extractor(file_path)
        if created is None:
            logger.debug(f"Skipping {file_path} - no creation date")
        else:
            records.append(FileRecord(file_path, created))

        if progress_ctx:
            progress_ctx.advance()

    logger.info(f"Found {len(records)} dated files out of {len(files)}")
    return FileCollection(records)
