"""Low-level shared utilities for fsutils."""

from .logging import get_logger, setup_logging, FsLogger

__all__ = [
    "get_logger",
    "setup_logging",
    "FsLogger",
]
