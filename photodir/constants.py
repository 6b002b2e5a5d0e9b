"""
Shared constants, logger and console for photodir.
"""

import logging
import shutil
import subprocess
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PROGRAM = "photodir"

# Directory name conventions
SEPARATOR = " - "
DATE_FORMAT = "%Y-%m-%d"

NUISANCE_FILES = (".ds_store", "thumbs.db", "desktop.ini")

_console: Optional[Console] = None


def get_console() -> Console:
    """Return the console shared by the CLI and the log handler."""
    global _console
    if _console is None:
        _console = Console(soft_wrap=True)
    return _console


def get_logger(name: str = PROGRAM) -> logging.Logger:
    """Return the program logger (or a child of it)."""
    return logging.getLogger(name)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a rich console handler to the program logger."""
    logger = get_logger()
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    console_handler = RichHandler(console=get_console(), rich_tracebacks=True,
                                  show_path=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)
    logger.setLevel(logging.DEBUG)
    return logger


def check_tool_availability(cmd: str, version_flag: str = "-ver") -> bool:
    """Check whether an external command-line tool can be executed."""
    if shutil.which(cmd) is None:
        return False
    try:
        subprocess.run([cmd, version_flag], capture_output=True, check=True)
        return True
    except (subprocess.CalledProcessError, OSError):
        return False
