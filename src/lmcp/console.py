# ABOUTME: Terminal styling and logging setup for lmcp
# ABOUTME: Wraps colorama so the rest of the package never touches ANSI codes
import logging
import sys
from typing import TextIO

import colorama
from colorama import Fore, Style


class StyleColors:
    """Color scheme for status lines."""
    SUCCESS = Fore.GREEN
    WARNING = Fore.YELLOW
    ERROR = Fore.RED
    INFO = Fore.BLUE
    MUTED = Style.DIM
    RESET_ALL = Style.RESET_ALL


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _paint(color: str, text: str, stream: TextIO | None = None) -> str:
    """Wrap text in color codes, or return it as-is when not writing to a terminal."""
    if not _is_terminal(stream or sys.stdout):
        return text
    return f"{color}{text}{StyleColors.RESET_ALL}"


def success(text: str) -> str:
    return _paint(StyleColors.SUCCESS, text)


def warning(text: str) -> str:
    return _paint(StyleColors.WARNING, text)


def error(text: str) -> str:
    return _paint(StyleColors.ERROR, text)


def info(text: str) -> str:
    return _paint(StyleColors.INFO, text)


def muted(text: str) -> str:
    return _paint(StyleColors.MUTED, text)


class ColorFormatter(logging.Formatter):
    """Log formatter that colors the whole line by level."""

    LEVEL_COLORS = {
        logging.DEBUG: StyleColors.MUTED,
        logging.INFO: StyleColors.INFO,
        logging.WARNING: StyleColors.WARNING,
        logging.ERROR: StyleColors.ERROR,
        logging.CRITICAL: StyleColors.ERROR,
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        return _paint(color, message, sys.stderr) if color else message


def setup_logging(verbose: bool = False) -> None:
    """Configure the lmcp logger for terminal use.

    ABOUTME: Single stderr handler on the 'lmcp' logger, replaced on each call
    ABOUTME: WARNING by default, DEBUG when verbose
    """
    colorama.just_fix_windows_console()

    package_logger = logging.getLogger("lmcp")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorFormatter("%(levelname)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
