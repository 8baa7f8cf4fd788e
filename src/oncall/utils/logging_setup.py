"""
On-Call Scheduler: Logging Infrastructure
=========================================
Multi-level logging with file rotation and function tracing.

Levels:
    TRACE (5): Function entry/exit with arguments
    DEBUG (10): Per-day assignment decisions
    INFO (20): Pass progress, totals
    WARNING (30): Under-covered days, double bookings
    ERROR (40): Unreadable input, bad configuration
"""
import functools
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional

# Custom TRACE level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class ColoredFormatter(logging.Formatter):
    """Formatter with ANSI colors for console output."""

    COLORS = {
        TRACE: "\033[90m",             # Gray
        logging.DEBUG: "\033[36m",     # Cyan
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelno, "")
        message = super().format(record)
        if color and sys.stdout.isatty():
            return f"{color}{message}{self.RESET}"
        return message


def _parse_level(name: str) -> int:
    if name.upper() == "TRACE":
        return TRACE
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = "logs/oncall.log",
    console_level: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Minimum log level for file output
        log_file: Path to log file (None = no file logging)
        console_level: Console log level (defaults to level)
        max_bytes: Max size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Root logger for the application
    """
    logger = logging.getLogger("oncall")
    logger.setLevel(TRACE)  # Capture everything, handlers filter

    logger.handlers.clear()

    file_level = _parse_level(level)
    cons_level = _parse_level(console_level or level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(cons_level)
    console_handler.setFormatter(ColoredFormatter(
        "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    ))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized: console={cons_level}, file={file_level if log_file else 'disabled'}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under the ``oncall`` hierarchy, e.g. ``oncall.solver.engine``."""
    return logging.getLogger(name)


def _short(value: Any, limit: int = 50) -> str:
    text = repr(value)
    return text if len(text) <= limit else text[:limit] + "…"


def log_function_call(func: Callable) -> Callable:
    """
    Trace entry and exit of a scheduling step at TRACE level.

    Exceptions are logged at ERROR and re-raised unchanged.
    """
    logger = logging.getLogger(func.__module__)
    name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if logger.isEnabledFor(TRACE):
            shown = [_short(a) for a in args[:3]] + [f"{k}={_short(v)}" for k, v in kwargs.items()]
            logger.log(TRACE, f"→ {name}({', '.join(shown)})")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"✖ {name} raised {type(e).__name__}: {e}")
            raise
        logger.log(TRACE, f"← {name} returned {_short(result, 100)}")
        return result

    return wrapper


def log_constraint(
    logger: logging.Logger,
    name: str,
    satisfied: bool,
    details: str = "",
    level: int = logging.DEBUG
):
    """
    Log a coverage or fairness check result.

    Satisfied checks go out at ``level``; failed ones as warnings.
    """
    status = "✓" if satisfied else "✗"
    msg = f"[{status}] {name}"
    if details:
        msg += f": {details}"

    if satisfied:
        logger.log(level, msg)
    else:
        logger.warning(msg)


class PassLogger:
    """Banner-style progress lines for the scheduling passes."""

    def __init__(self, name: str = "oncall.solver"):
        self.logger = logging.getLogger(name)

    def phase(self, name: str):
        self.logger.info(f"{'='*20} {name} {'='*20}")

    def step(self, description: str):
        self.logger.info(f"▸ {description}")

    def detail(self, key: str, value: Any):
        self.logger.debug(f"  {key}: {value}")


def init_logging(level: str = "INFO", log_file: Optional[str] = "logs/oncall.log") -> logging.Logger:
    """Console (and optional file) logging for the web UI and scripts."""
    return setup_logging(level=level, log_file=log_file)
