"""Utilities package for the on-call scheduler."""
from .logging_setup import (
    TRACE,
    PassLogger,
    get_logger,
    init_logging,
    log_constraint,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_constraint",
    "PassLogger",
    "init_logging",
    "TRACE",
]
