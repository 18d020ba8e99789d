"""Path coercion and small filesystem helpers shared across fsutils modules."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, os.PathLike]


def to_path(path: PathLike) -> Path:
    return Path(path).expanduser()


def path_exists(path: PathLike) -> bool:
    """True if anything occupies ``path``, including a dangling symlink."""
    try:
        return os.path.lexists(to_path(path))
    except (OSError, ValueError):
        return False


def ensure_dir(path: PathLike) -> Path:
    p = to_path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def human_size(num: float, suffix: str = "B") -> str:
    units: Iterable[str] = ["", "K", "M", "G", "T", "P", "E", "Z"]
    value = float(num)
    for unit in units:
        if abs(value) < 1024.0:
            return f"{value:3.1f}{unit}{suffix}"
        value /= 1024.0
    return f"{value:.1f}Y{suffix}"
