"""
File system access for photodir: finding files and carrying out planned moves.
"""

import shutil
from pathlib import Path
from typing import Iterable, List

from .constants import NUISANCE_FILES, PROGRAM, get_logger
from .files import PlannedMove


class FileOperations:
    """Walks directory trees and applies renames, with dry-run support."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run
        self.logger = get_logger()

    @staticmethod
    def find_files(directory: Path) -> List[Path]:
        """Find all regular files under a directory, recursively."""
        return sorted(
            file_path for file_path in Path(directory).rglob("*")
            if file_path.is_file() and file_path.name.lower() not in NUISANCE_FILES
        )

    def ensure_directory(self, directory: Path) -> None:
        """Create directory and parents if needed, with dry-run support."""
        if not self.dry_run and not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)

    def rename_path(self, source: Path, dest: Path) -> None:
        """Rename a file or directory without overwriting anything."""
        if source == dest:
            return
        if dest.exists():
            raise FileExistsError(f"Destination already exists: {dest}")
        if self.dry_run:
            self.logger.info(f"[dry-run] {source} -> {dest}")
            return

        source.rename(dest)
        self.logger.info(f"{source} -> {dest}")

    def move_file(self, source: Path, dest: Path) -> None:
        """Move a file, creating the destination directory first."""
        if source == dest:
            return
        if dest.exists():
            raise FileExistsError(f"Destination already exists: {dest}")
        if self.dry_run:
            self.logger.info(f"[dry-run] {source} -> {dest}")
            return

        self.ensure_directory(dest.parent)
        shutil.move(str(source), str(dest))

        # Verify the operation
        if not dest.exists():
            raise FileNotFoundError(f"File not found after move: {dest}")
        self.logger.info(f"{source} -> {dest}")

    def apply_renames(self, moves: List[PlannedMove]) -> int:
        """Rename files whose new names may currently belong to each other.

        Every file is first given a temporary name so that a sequence like
        "b.jpg" -> "a.jpg", "a.jpg" -> "b.jpg" cannot clash.
        """
        sources = {move.source for move in moves}
        for move in moves:
            if move.destination.exists() and move.destination not in sources:
                raise FileExistsError(f"Destination already exists: {move.destination}")

        if self.dry_run:
            for move in moves:
                self.logger.info(f"[dry-run] {move.source} -> {move.destination}")
            return len(moves)

        staged = []
        renamed = []
        try:
            for index, move in enumerate(moves):
                temp_path = move.source.with_name(f".{PROGRAM}-{index}-{move.source.name}")
                move.source.rename(temp_path)
                staged.append((temp_path, move))

            for temp_path, move in staged:
                temp_path.rename(move.destination)
                renamed.append((temp_path, move))
        except OSError:
            self._restore_names(staged, renamed)
            raise

        for _, move in renamed:
            self.logger.info(f"{move.source} -> {move.destination}")
        return len(renamed)

    def _restore_names(self, staged, renamed) -> None:
        """Undo a partially applied set of renames, newest first."""
        self.logger.warning(f"Rename failed, restoring {len(staged)} original file names")
        for temp_path, move in reversed(renamed):
            move.destination.rename(temp_path)
        for temp_path, move in reversed(staged):
            temp_path.rename(move.source)

    def apply_moves(self, moves: Iterable[PlannedMove]) -> int:
        """Carry out planned moves in order; return how many were applied."""
        count = 0
        for move in moves:
            self.move_file(move.source, move.destination)
            count += 1
        return count
