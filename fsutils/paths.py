"""
fsutils.paths

Path decomposition helpers. Only ``folder_name`` touches the filesystem.
"""

from __future__ import annotations

import re
from pathlib import Path

from fsutils.base.fs import PathLike, to_path

NOT_FOUND = -1

_DIGIT_RUN_RE = re.compile(r"[0-9]+")


def filename(path: PathLike) -> str:
    """Last path segment without its extension (``a/TestFile.txt`` -> ``TestFile``)."""
    return Path(path).stem


def file_extension(path: PathLike) -> str:
    """Extension of the last segment including the dot, or ``""``."""
    return Path(path).suffix


def filename_with_extension(path: PathLike) -> str:
    return Path(path).name


def folder_name(path: PathLike) -> str:
    """
    Name of the folder ``path`` points to.

    A path that is currently a directory yields its own name. Anything else,
    including a path that does not exist, is treated as a file and yields the
    name of its parent folder.
    """
    p = to_path(path)
    try:
        is_dir = p.is_dir()
    except (OSError, ValueError):
        is_dir = False
    return p.name if is_dir else p.parent.name


def parent_folder(path: PathLike) -> Path:
    return to_path(path).parent


def int_from_filename(name: str) -> int:
    """
    Return the first run of decimal digits in ``name`` as an int.

    Only the first run counts: ``"14name99.jpg"`` gives ``14``. Returns
    ``NOT_FOUND`` for an empty name or a name without digits.
    """
    if not name:
        return NOT_FOUND
    match = _DIGIT_RUN_RE.search(name)
    if match is None:
        return NOT_FOUND
    return int(match.group(0))
