"""Utility helpers for performing file I/O with consistent defaults."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional

import yaml

from .fs import PathLike, to_path


DEFAULT_ENCODING = "utf-8"


@contextmanager
def open_file(
    path: PathLike,
    mode: str = "r",
    *,
    encoding: str = DEFAULT_ENCODING,
    newline: Optional[str] = None,
) -> Iterator[Any]:
    path_obj = to_path(path)
    kwargs: dict[str, Any] = {}
    is_binary = "b" in mode
    if is_binary:
        if newline is not None:
            raise ValueError("newline is not supported in binary mode")
    else:
        kwargs["encoding"] = encoding
        kwargs["newline"] = newline
    with open(path_obj, mode, **kwargs) as handle:
        yield handle


def read_text(path: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    # newline="" keeps "\r\n" and "\r" exactly as stored.
    with open_file(path, "r", encoding=encoding, newline="") as handle:
        return handle.read()


def write_text(path: PathLike, content: str, encoding: str = DEFAULT_ENCODING) -> None:
    # Encode before opening so an encoding error leaves the old file intact.
    write_bytes(path, content.encode(encoding))


def read_bytes(path: PathLike) -> bytes:
    with open_file(path, "rb") as handle:
        return handle.read()


def write_bytes(path: PathLike, payload: bytes) -> None:
    with open_file(path, "wb") as handle:
        handle.write(payload)


def read_yaml(path: PathLike) -> Mapping[str, Any] | list[Any]:
    with open_file(path, "r") as handle:
        data = yaml.safe_load(handle)
    return data if data is not None else {}
