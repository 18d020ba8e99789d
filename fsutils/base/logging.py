"""
fsutils.base.logging

Typed logging setup for fsutils.

Features:
 - FsLogger subclass carrying a Rich flag and the active log file
 - Silent by default: a NullHandler is attached until setup_logging() runs
 - Rich console handler with an emoji level column, or a plain ANSI formatter
 - Optional per-run log file when a log directory is configured
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, cast

from rich.logging import RichHandler
from rich.text import Text

from .fs import ensure_dir

ROOT_LOGGER_NAME = "fsutils"

# ----------------------------------------------------------------------
# LEVEL STYLE METADATA
# ----------------------------------------------------------------------

ANSI_RESET = "\033[0m"

LEVEL_STYLES: Dict[int, Dict[str, str]] = {
    logging.DEBUG: {"emoji": "🐛", "ansi": "\033[36m", "rich": "bright_cyan"},
    logging.INFO: {"emoji": "ℹ️", "ansi": "\033[32m", "rich": "green"},
    logging.WARNING: {"emoji": "⚠️", "ansi": "\033[33m", "rich": "yellow"},
    logging.ERROR: {"emoji": "❌", "ansi": "\033[31m", "rich": "red"},
    logging.CRITICAL: {"emoji": "💥", "ansi": "\033[95m", "rich": "bold magenta"},
}
DEFAULT_STYLE = LEVEL_STYLES[logging.INFO]


def _style_for(record: logging.LogRecord) -> Dict[str, str]:
    return LEVEL_STYLES.get(record.levelno, DEFAULT_STYLE)


# ----------------------------------------------------------------------
# FORMATTERS
# ----------------------------------------------------------------------

class ColorEmojiFormatter(logging.Formatter):
    """Console formatter that injects colored level names and emojis."""

    def format(self, record: logging.LogRecord) -> str:
        style = _style_for(record)
        display = f"{style['emoji']} {record.levelname}"
        record.level_display = f"{style['ansi']}{display}{ANSI_RESET}"  # type: ignore[attr-defined]
        try:
            return super().format(record)
        finally:
            delattr(record, "level_display")


class EmojiFormatter(logging.Formatter):
    """File formatter that prefixes log lines with the level emoji."""

    def format(self, record: logging.LogRecord) -> str:
        record.level_emoji = _style_for(record)["emoji"]  # type: ignore[attr-defined]
        return super().format(record)


class FsRichHandler(RichHandler):
    """Rich console handler with emoji-enhanced level column."""

    def get_level_text(self, record: logging.LogRecord) -> Text:
        style = _style_for(record)
        text = Text()
        text.append(f"{style['emoji']} ", style=style["rich"])
        text.append(record.levelname, style=style["rich"])
        return text


# ----------------------------------------------------------------------
# LOGGER CLASS
# ----------------------------------------------------------------------

class FsLogger(logging.Logger):
    """Logger with a Rich flag and optional log file path."""

    rich_enabled: bool = False
    log_file: Optional[Path] = None


# ----------------------------------------------------------------------
# CONFIG-DRIVEN DEFAULTS
# ----------------------------------------------------------------------

def _normalize_level(value: Any) -> str:
    if isinstance(value, str):
        candidate = value.strip().upper()
        if isinstance(logging.getLevelName(candidate), int):
            return candidate
    elif isinstance(value, int):
        label = logging.getLevelName(value)
        if isinstance(label, str) and not label.startswith("Level "):
            return label
    return "INFO"


def _load_default_logging_settings() -> Dict[str, Any]:
    from fsutils.shared.loader import load_logging_config

    try:
        return dict(load_logging_config(None))
    except (OSError, ValueError):
        return {}


# ----------------------------------------------------------------------
# BASE LOGGER SETUP
# ----------------------------------------------------------------------

def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: str | int | None = None,
    use_rich: Optional[bool] = None,
    log_dir: Optional[Path | str] = None,
    file_prefix: Optional[str] = None,
) -> FsLogger:
    """
    Configure and return the fsutils root logger.

    Args:
        level: Desired logging level. Defaults to the config value (INFO if unset).
        use_rich: Force-enable or disable the Rich handler. None means on
            when stdout is a terminal.
        log_dir: Directory for a per-run log file. No file is written when
            neither this nor the config provides one.
        file_prefix: Prefix for generated log filenames.
    """
    defaults = _load_default_logging_settings()
    resolved_level = _normalize_level(level if level is not None else defaults.get("level"))
    if use_rich is None:
        use_rich = defaults.get("use_rich")
    if use_rich is None:
        use_rich = sys.stdout.isatty()
    resolved_log_dir = log_dir or defaults.get("log_dir")
    resolved_file_prefix = file_prefix or defaults.get("file_prefix") or ROOT_LOGGER_NAME

    logger = get_logger()
    logger.setLevel(resolved_level)
    _reset_handlers(logger)

    # ------------------------------------------------------------------
    # Console Handler (Rich or ANSI)
    # ------------------------------------------------------------------
    console_handler: logging.Handler
    if use_rich:
        console_handler = FsRichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_level=True,
            show_path=False,
            log_time_format="[%X]",
        )
        logger.rich_enabled = True
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            ColorEmojiFormatter(
                fmt="%(asctime)s %(level_display)s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.rich_enabled = False
    logger.addHandler(console_handler)

    # ------------------------------------------------------------------
    # File Handler
    # ------------------------------------------------------------------
    logger.log_file = None
    if resolved_log_dir:
        log_dir_path = ensure_dir(resolved_log_dir)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file_path = log_dir_path / f"{resolved_file_prefix}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            EmojiFormatter(
                fmt="%(asctime)s %(level_emoji)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger.log_file = log_file_path

    logger.propagate = False
    logger._initialized = True  # type: ignore[attr-defined]
    logger.debug(
        "Logger initialized at level %s (Rich=%s)",
        resolved_level,
        "ON" if logger.rich_enabled else "OFF",
    )
    if logger.log_file is not None:
        logger.info("📄 Log file created at: %s", logger.log_file.resolve())

    return logger


# ----------------------------------------------------------------------
# UTILITY ACCESSOR
# ----------------------------------------------------------------------

def get_logger(name: str = ROOT_LOGGER_NAME) -> FsLogger:
    """Retrieve a namespaced fsutils logger (configured later via setup_logging)."""

    logging.setLoggerClass(FsLogger)
    try:
        base = cast(FsLogger, logging.getLogger(ROOT_LOGGER_NAME))
    finally:
        logging.setLoggerClass(logging.Logger)

    if not getattr(base, "_initialized", False) and not base.handlers:
        base.addHandler(logging.NullHandler())

    if not name or name == ROOT_LOGGER_NAME:
        return base

    if name.startswith(ROOT_LOGGER_NAME + "."):
        name = name[len(ROOT_LOGGER_NAME) + 1:]
    return cast(FsLogger, base.getChild(name))
