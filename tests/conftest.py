"""
pytest configuration and fixtures for photodir tests.
"""

import io
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

import pytest

from photodir.files import FileCollection, FileRecord


@dataclass
class CliResult:
    """Result from running CLI command."""
    exit_code: int
    output: str
    error: str


def dt(text: str) -> datetime:
    """Shorthand for datetime.fromisoformat."""
    return datetime.fromisoformat(text)


@pytest.fixture
def make_collection():
    """Build a FileCollection from (path, iso timestamp) pairs."""

    def build(*specs) -> FileCollection:
        return FileCollection(FileRecord(Path(path), dt(created)) for path, created in specs)

    return build


@pytest.fixture
def test_config_path(tmp_path):
    """Test-specific config path; the file does not exist until written."""
    return tmp_path / "config" / "config.yml"


@pytest.fixture
def fake_metadata(monkeypatch):
    """Replace exiftool with a table of creation dates keyed by file path.

    Files missing from the table have no creation date.
    """
    dates: Dict[Path, Optional[datetime]] = {}

    def fake_extract(file_path: Path) -> Optional[datetime]:
        return dates.get(Path(file_path).resolve())

    monkeypatch.setattr("photodir.timestamps.extract_creation_time", fake_extract)
    return dates


@pytest.fixture
def make_photo_dir(tmp_path, fake_metadata):
    """Create a directory of photo files with known creation dates.

    Args:
        name: directory name
        files: dict of relative file path -> iso timestamp (or None)

    Returns:
        Path to the created directory
    """

    def create(name: str, files: Dict[str, Optional[str]]) -> Path:
        directory = tmp_path / "photos" / name
        directory.mkdir(parents=True)
        for relative, created in files.items():
            file_path = directory / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(b"test image content")
            if created is not None:
                fake_metadata[file_path.resolve()] = dt(created)
        return directory

    return create


@pytest.fixture
def cli_runner():
    """Create a CLI runner that captures output and uses test config."""

    def run_cli(*args, config_path=None) -> CliResult:
        """Run photodir CLI with given arguments.

        Args:
            *args: Command line arguments
            config_path: Optional config path for test isolation

        Returns:
            CliResult with exit_code, output, and error
        """
        from photodir import constants
        from photodir.cli import main

        old_stdout = sys.stdout
        old_stderr = sys.stderr
        stdout = io.StringIO()
        stderr = io.StringIO()

        try:
            sys.stdout = stdout
            sys.stderr = stderr
            # Fresh console so that it writes to the captured streams without colors
            constants._console = None

            exit_code = main([str(a) for a in args], config_path=config_path)
        except SystemExit as e:
            exit_code = e.code if e.code is not None else 0
        finally:
            sys.stdout = old_stdout
            sys.stderr = old_stderr
            constants._console = None

        return CliResult(
            exit_code=exit_code,
            output=stdout.getvalue(),
            error=stderr.getvalue()
        )

    return run_cli
