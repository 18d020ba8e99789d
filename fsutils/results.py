"""
fsutils.results

Tagged outcomes for filesystem operations.

Operations never raise for ordinary failures. They return an ``OpResult``
that is truthy on success, so ``if create_folder(p):`` keeps working, while
``error`` and ``detail`` say why a call failed.
"""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class FsErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    IO_FAILURE = "io_failure"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_IMPLEMENTED = "not_implemented"


class UnsupportedOperationError(NotImplementedError):
    """Raised by operations that exist only for interface completeness."""

    kind = FsErrorKind.NOT_IMPLEMENTED


@dataclass(frozen=True)
class OpResult:
    ok: bool
    path: Optional[Path] = None
    error: Optional[FsErrorKind] = None
    detail: str = ""
    value: Any = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, path: Optional[Path] = None, value: Any = None, detail: str = "") -> "OpResult":
        return cls(True, path=path, value=value, detail=detail)

    @classmethod
    def failure(cls, error: FsErrorKind, path: Optional[Path] = None, detail: str = "") -> "OpResult":
        return cls(False, path=path, error=error, detail=detail)

    @classmethod
    def from_exception(cls, exc: BaseException, path: Optional[Path] = None) -> "OpResult":
        return cls.failure(classify_error(exc), path=path, detail=str(exc))


def classify_error(exc: BaseException) -> FsErrorKind:
    """Map an exception raised by the filesystem layer onto an error kind."""
    if isinstance(exc, FileNotFoundError):
        return FsErrorKind.NOT_FOUND
    if isinstance(exc, FileExistsError):
        return FsErrorKind.ALREADY_EXISTS
    if isinstance(exc, PermissionError):
        return FsErrorKind.PERMISSION_DENIED
    if isinstance(exc, OSError) and exc.errno in (errno.EEXIST, errno.ENOTEMPTY):
        return FsErrorKind.ALREADY_EXISTS
    if isinstance(exc, LookupError):
        return FsErrorKind.INVALID_ARGUMENT
    if isinstance(exc, (ValueError, TypeError)) and not isinstance(exc, UnicodeError):
        return FsErrorKind.INVALID_ARGUMENT
    return FsErrorKind.IO_FAILURE
