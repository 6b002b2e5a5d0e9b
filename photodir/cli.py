"""
Command-line interface for photodir.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import timestamps
from .config import Config
from .constants import PROGRAM, get_console, setup_logging
from .directory import Directory, NameStatus
from .errors import IntervalTooLargeError, PhotodirError
from .file_operations import FileOperations
from .files import FileCollection, SortKey
from .interval import Interval
from .progress import ProgressContext

STATUS_MESSAGES = {
    NameStatus.VALID: "Date is valid",
    NameStatus.INVALID: "Date is set but is invalid",
    NameStatus.SUPERSET: "Date range in name contains the content",
    NameStatus.NONE: "Date is not set",
}


def parse_digits(value: str) -> int:
    """Validate the sequence number width."""
    try:
        digits = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number of digits: {value}")
    if digits < 1:
        raise argparse.ArgumentTypeError(f"Number of digits must be positive: {value}")
    return digits


def parse_days(value: str) -> int:
    """Validate a day count."""
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number of days: {value}")
    if days < 0:
        raise argparse.ArgumentTypeError(f"Number of days cannot be negative: {value}")
    return days


def create_parser(config: Config) -> argparse.ArgumentParser:
    """Create argument parser with dynamic defaults from config."""
    max_interval = config.get_max_interval()
    digits = config.get_digits()
    sort = config.get_sort()

    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Keep photo directory names in line with the dates of their photos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  {PROGRAM} -d "~/Pictures/Trip to Rome" status
  {PROGRAM} -d "~/Pictures/Trip to Rome" rename 3 --dry-run
  {PROGRAM} -d ~/Pictures/Import move-by-days
        """
    )
    parser.add_argument(
        "--directory", "-d", default=".",
        help="Directory to work on (default: current directory)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version", "-V", action="store_true",
        help=f"Display the version number of {PROGRAM} and exit"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("status", help="Check whether the directory name matches its photos")

    rename = subparsers.add_parser("rename", help="Prefix the directory name with its date range")
    rename.add_argument(
        "max_interval", nargs="?", type=parse_days, default=max_interval,
        help=f"Largest allowed date range in days (default: {max_interval})"
    )
    rename.add_argument(
        "--force", "-f", action="store_true",
        help="Also rename directories whose name has a wrong date"
    )
    rename.add_argument(
        "--dry-run", "-n", action="store_true",
        help="Preview the rename without making changes"
    )

    list_cmd = subparsers.add_parser("list", help="List dated files")
    list_cmd.add_argument(
        "--sort", "-s", choices=[key.value for key in SortKey], default="created",
        help="File order (default: created)"
    )

    subparsers.add_parser("interval", help="Show the date range of the photos")

    check = subparsers.add_parser("check", help="Check that the date range is small enough")
    check.add_argument(
        "max_interval", type=parse_days,
        help="Largest allowed date range in days"
    )

    files_rename = subparsers.add_parser("files-rename", help="Rename files to a numbered sequence")
    files_rename.add_argument(
        "--name", help="Base file name (default: directory name without its dates)"
    )
    files_rename.add_argument(
        "--digits", type=parse_digits, default=digits,
        help=f"Width of the sequence number (default: {digits or 'fit the file count'})"
    )
    files_rename.add_argument(
        "--sort", "-s", choices=[key.value for key in SortKey], default=sort,
        help=f"File order (default: {sort})"
    )
    files_rename.add_argument(
        "--dry-run", "-n", action="store_true",
        help="Preview renames without making changes"
    )

    move = subparsers.add_parser("move-by-days", help="Move files into one folder per day")
    move.add_argument(
        "--dry-run", "-n", action="store_true",
        help="Preview moves without making changes"
    )

    return parser


def load_directory(path: Path, console: Console) -> Directory:
    """Read the dated files of a directory, showing progress."""
    files = FileOperations.find_files(path)
    with ProgressContext.track(console, "Reading metadata...", total=len(files)) as progress_ctx:
        collection = timestamps.read_collection(
            files, extractor=timestamps.extract_creation_time, progress_ctx=progress_ctx)
    return Directory(path, collection)


def default_file_name(directory: Directory) -> str:
    """Directory name without a leading date range."""
    split = Interval.split_name(directory.name)
    if split and split[1].strip():
        return split[1].strip()
    return directory.name


def show_status(directory: Directory, console: Console) -> int:
    status = directory.name_status()
    console.print(STATUS_MESSAGES[status])
    return 0


def rename_directory(directory: Directory, max_interval: int, force: bool,
                     file_ops: FileOperations, console: Console) -> int:
    proposal = directory.rename(max_interval)
    source = escape(str(proposal.source))
    destination = escape(str(proposal.destination))

    if proposal.status is NameStatus.VALID:
        console.print("Directory already has the right date")
        return 0
    if proposal.status is NameStatus.SUPERSET:
        console.print("Directory date range already covers its content")
        return 0
    if proposal.status is NameStatus.INVALID and not force:
        console.print("[yellow]Directory already has a date, but it does not match "
                      "its content[/yellow]")
        console.print(f"Proposed name: {destination} (use --force to rename)")
        return 1

    file_ops.rename_path(proposal.source, proposal.destination)
    console.print(f"Rename {source} to {destination}")
    return 0


def list_files(directory: Directory, sort: str, console: Console) -> int:
    table = Table(title="Dated Files")
    table.add_column("File", style="cyan")
    table.add_column("Created", style="green")
    for record in directory.files.sorted(SortKey(sort)):
        table.add_row(escape(str(record.path.relative_to(directory.path))), str(record.created))
    console.print(table)
    return 0


def show_interval(collection: FileCollection, console: Console) -> int:
    interval = collection.interval()
    if interval is None:
        console.print("[yellow]No dated files found[/yellow]")
        return 0
    console.print(f"from: {interval.start}, to: {interval.end} ({interval.days} days)")
    return 0


def check_interval(directory: Directory, max_interval: int, console: Console) -> int:
    try:
        interval = directory.check(max_interval)
    except IntervalTooLargeError as e:
        console.print(f"[red]Delta is: {e.interval.days} days[/red]")
        return 1
    if interval is None:
        console.print("[yellow]There are no files to check for interval[/yellow]")
        return 0
    console.print("OK")
    return 0


def rename_files(directory: Directory, name: Optional[str], digits: Optional[int], sort: str,
                 file_ops: FileOperations, console: Console) -> int:
    name = name or default_file_name(directory)
    moves = directory.files.rename_files(name, key=SortKey(sort), digits=digits)
    moves = [move for move in moves if move.source != move.destination]
    if not moves:
        console.print("Files already have sequential names")
        return 0

    file_ops.apply_renames(moves)
    for move in moves:
        console.print(f"Rename {escape(str(move.source))} => {escape(move.destination.name)}")
    return 0


def move_by_days(collection: FileCollection, file_ops: FileOperations, console: Console) -> int:
    for group in collection.move_by_days():
        file_ops.apply_moves(group)
        for move in group:
            console.print(f"Move file {escape(str(move.source))} => "
                          f"{escape(str(move.destination))}")
    return 0


def run_command(args: argparse.Namespace, directory: Directory, console: Console) -> int:
    """Dispatch a parsed command to its handler."""
    file_ops = FileOperations(dry_run=getattr(args, "dry_run", False))

    if args.command == "status":
        return show_status(directory, console)
    if args.command == "rename":
        return rename_directory(directory, args.max_interval, args.force, file_ops, console)
    if args.command == "list":
        return list_files(directory, args.sort, console)
    if args.command == "interval":
        return show_interval(directory.files, console)
    if args.command == "check":
        return check_interval(directory, args.max_interval, console)
    if args.command == "files-rename":
        return rename_files(directory, args.name, args.digits, args.sort, file_ops, console)
    if args.command == "move-by-days":
        return move_by_days(directory.files, file_ops, console)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None, config_path: Optional[Path] = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (default: sys.argv[1:])
        config_path: Optional path to config file (for testing)
    """
    config = Config(config_path=config_path)
    parser = create_parser(config)
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__
        print(__version__)
        return 0

    if not args.command:
        parser.error("A command is required")

    logger = setup_logging(args.verbose)
    console = get_console()

    path = Path(args.directory).expanduser().resolve()
    if not path.is_dir():
        console.print(f"[red]Error: {escape(str(path))} is not a directory[/red]")
        return 1

    if getattr(args, "dry_run", False):
        console.print("[cyan]DRY RUN: no changes will be made[/cyan]")

    try:
        directory = load_directory(path, console)
        return run_command(args, directory, console)
    except KeyboardInterrupt:
        console.print("\n[red]Operation cancelled by user[/red]")
        return 1
    except (PhotodirError, OSError) as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
