"""
fsutils.discovery

Single-level folder scans filtered by name or extension.

Only the immediate children of the given folder are inspected. Results come
back in directory order, which is not guaranteed to be sorted.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, List

from fsutils.base.fs import PathLike, to_path
from fsutils.base.logging import get_logger
from fsutils.ops import folder_exists
from fsutils.results import UnsupportedOperationError

log = get_logger(__name__)


def _scan(path: PathLike, predicate: Callable[[os.DirEntry], bool]) -> List[Path]:
    folder = to_path(path)
    if not folder_exists(folder):
        log.debug(f"Not a folder (skip scan): {folder}")
        return []

    matches: List[Path] = []
    try:
        with os.scandir(folder) as entries:
            for entry in entries:
                try:
                    if predicate(entry):
                        matches.append(folder / entry.name)
                except OSError as e:
                    log.debug(f"Skipping unreadable entry {entry.path}: {e}")
    except OSError as e:
        log.warning(f"⚠️ Could not scan {folder}: {e}")
        return []
    return matches


def normalize_extension(extension: str) -> str:
    ext = extension.strip()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


def files_by_extension(path: PathLike, extension: str) -> List[Path]:
    """
    Files directly inside ``path`` whose extension equals ``extension``.

    The comparison is case-sensitive; ``"txt"`` and ``".txt"`` are the same
    query. Directories are never returned.
    """
    wanted = normalize_extension(extension)
    return _scan(
        path,
        lambda entry: not entry.is_dir() and Path(entry.name).suffix == wanted,
    )


def files_by_name(path: PathLike, substring: str) -> List[Path]:
    """Non-directory entries whose full path contains ``substring``."""
    folder = to_path(path)
    return _scan(
        folder,
        lambda entry: not entry.is_dir() and substring in str(folder / entry.name),
    )


def folders_by_name(path: PathLike, substring: str) -> List[Path]:
    """Directory entries whose full path contains ``substring``."""
    folder = to_path(path)
    return _scan(
        folder,
        lambda entry: entry.is_dir() and substring in str(folder / entry.name),
    )


def sort_paths_by_numeric_value(paths: Iterable[PathLike], ascending: bool = True) -> List[Path]:
    raise UnsupportedOperationError("sort_paths_by_numeric_value is not implemented")
