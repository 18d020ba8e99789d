"""
fsutils.ops

Existence checks, folder/file mutation and text/binary I/O.

Every mutating helper:
 - checks its preconditions first (source present, destination absent)
 - supports dry-run, which runs the checks and logs instead of acting
 - catches OSError and bad-argument errors (NUL bytes, unknown encodings)
   and reports them through an OpResult instead of raising

The checks are check-then-act and can race with other processes touching
the same paths; no locking is done here.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional

from fsutils.base.file_io import DEFAULT_ENCODING, read_bytes, read_text, write_bytes, write_text
from fsutils.base.fs import PathLike, path_exists, to_path
from fsutils.base.logging import get_logger
from fsutils.paths import folder_name
from fsutils.results import FsErrorKind, OpResult
from fsutils.shared.progress import Progress

log = get_logger(__name__)


def _missing(path: Path, what: str) -> OpResult:
    log.debug(f"{what} not found: {path}")
    return OpResult.failure(FsErrorKind.NOT_FOUND, path, f"{what} not found: {path}")


def _occupied(path: Path) -> OpResult:
    log.debug(f"Destination already exists: {path}")
    return OpResult.failure(FsErrorKind.ALREADY_EXISTS, path, f"Destination already exists: {path}")


def _failed(action: str, path: Path, exc: BaseException) -> OpResult:
    log.warning(f"⚠️ {action} failed for {path}: {exc}")
    return OpResult.from_exception(exc, path)


def _dry_run(message: str, path: Path) -> OpResult:
    log.info(f"[DRY-RUN] Would {message}")
    return OpResult.success(path, detail="dry-run")


# ----------------------------------------------------------------------
# EXISTENCE
# ----------------------------------------------------------------------

def folder_exists(path: PathLike) -> bool:
    """True if ``path`` is an existing directory. Never raises."""
    try:
        return to_path(path).is_dir()
    except (OSError, ValueError):
        return False


def file_exists(path: PathLike) -> bool:
    """True if ``path`` exists and is not a directory. Never raises."""
    try:
        p = to_path(path)
        return p.exists() and not p.is_dir()
    except (OSError, ValueError):
        return False


# ----------------------------------------------------------------------
# FOLDER OPERATIONS
# ----------------------------------------------------------------------

def create_folder(path: PathLike, *, dry_run: bool = False) -> OpResult:
    """
    Create a folder and any missing parents. Succeeds at once if the folder
    already exists.
    """
    p = to_path(path)
    if folder_exists(p):
        return OpResult.success(p)
    if dry_run:
        return _dry_run(f"create folder: {p}", p)

    try:
        p.mkdir(parents=True)
    except (OSError, ValueError) as e:
        return _failed("Create folder", p, e)
    log.debug(f"📁 Created folder: {p}")
    return OpResult.success(p)


def delete_folder(path: PathLike, *, dry_run: bool = False) -> OpResult:
    """
    Remove a folder and everything inside it.

    A folder that does not exist counts as deleted.
    """
    p = to_path(path)
    if not folder_exists(p):
        log.debug(f"Folder not found (skip delete): {p}")
        return OpResult.success(p, detail="absent")
    if dry_run:
        return _dry_run(f"delete folder: {p}", p)

    try:
        shutil.rmtree(p)
    except (OSError, ValueError) as e:
        return _failed("Delete folder", p, e)
    log.debug(f"🗑️ Deleted folder: {p}")
    return OpResult.success(p)


def rename_folder(old: PathLike, new: PathLike, *, dry_run: bool = False) -> OpResult:
    src, dst = to_path(old), to_path(new)
    if not folder_exists(src):
        return _missing(src, "Folder")
    if path_exists(dst):
        return _occupied(dst)
    if dry_run:
        return _dry_run(f"rename folder {src} → {dst}", dst)

    try:
        os.rename(src, dst)
    except (OSError, ValueError) as e:
        return _failed("Rename folder", src, e)
    log.debug(f"Renamed folder {src} → {dst}")
    return OpResult.success(dst)


def move_folder(src: PathLike, to_parent: PathLike, *, dry_run: bool = False) -> OpResult:
    """
    Move a folder into ``to_parent``, keeping its name.

    Args:
        src: Folder to move.
        to_parent: Existing folder that will contain the moved folder.
        dry_run: Check preconditions and log without moving.
    """
    source = to_path(src)
    dst = to_path(to_parent) / folder_name(source)
    if not folder_exists(source):
        return _missing(source, "Folder")
    if path_exists(dst):
        return _occupied(dst)
    if not folder_exists(dst.parent):
        return _missing(dst.parent, "Destination parent")
    if dry_run:
        return _dry_run(f"move folder {source} → {dst}", dst)

    try:
        shutil.move(str(source), str(dst))
    except (OSError, ValueError) as e:
        return _failed("Move folder", source, e)
    log.debug(f"Moved folder {source} → {dst}")
    return OpResult.success(dst)


def copy_folder(
    src: PathLike,
    dest: PathLike,
    *,
    progress: bool = False,
    dry_run: bool = False,
) -> OpResult:
    """
    Recursively copy ``src`` to ``dest`` (``dest`` is the new folder itself).

    Fails if ``src`` is missing or ``dest`` exists. Entries that collide
    during the copy are overwritten.

    Args:
        src: Folder to copy.
        dest: Path of the copy, including its own name.
        progress: Show a tqdm progress bar over the copied files.
        dry_run: Check preconditions and log without copying.
    """
    source, target = to_path(src), to_path(dest)
    if not folder_exists(source):
        return _missing(source, "Folder")
    if path_exists(target):
        return _occupied(target)
    if dry_run:
        return _dry_run(f"copy folder {source} → {target}", target)

    total = sum(len(files) for _, _, files in os.walk(source)) if progress else None
    bar = Progress(desc=f"Copying {source.name}", total=total, unit="file", disable=not progress)

    def _copy(from_path: str, to_path_: str) -> str:
        copied = shutil.copy2(from_path, to_path_)
        bar.update()
        return copied

    try:
        with bar:
            shutil.copytree(source, target, copy_function=_copy, dirs_exist_ok=True)
    except (OSError, ValueError) as e:
        return _failed("Copy folder", source, e)
    log.debug(f"Copied folder {source} → {target}")
    return OpResult.success(target)


# ----------------------------------------------------------------------
# FILE OPERATIONS
# ----------------------------------------------------------------------

def delete_file(path: PathLike, *, dry_run: bool = False) -> OpResult:
    """Remove a file. A file that does not exist counts as deleted."""
    p = to_path(path)
    if not file_exists(p):
        log.debug(f"File not found (skip delete): {p}")
        return OpResult.success(p, detail="absent")
    if dry_run:
        return _dry_run(f"delete file: {p}", p)

    try:
        p.unlink()
    except (OSError, ValueError) as e:
        return _failed("Delete file", p, e)
    log.debug(f"🗑️ Deleted file: {p}")
    return OpResult.success(p)


def rename_file(old: PathLike, new: PathLike, *, dry_run: bool = False) -> OpResult:
    src, dst = to_path(old), to_path(new)
    if not file_exists(src):
        return _missing(src, "File")
    if path_exists(dst):
        return _occupied(dst)
    if dry_run:
        return _dry_run(f"rename file {src} → {dst}", dst)

    try:
        os.rename(src, dst)
    except (OSError, ValueError) as e:
        return _failed("Rename file", src, e)
    log.debug(f"Renamed file {src} → {dst}")
    return OpResult.success(dst)


def move_file(src: PathLike, dest: PathLike, *, dry_run: bool = False) -> OpResult:
    """
    Move a file to ``dest`` (the full new path, name included).

    The parent folder of ``dest`` must already exist.
    """
    source, target = to_path(src), to_path(dest)
    if not file_exists(source):
        return _missing(source, "File")
    if path_exists(target):
        return _occupied(target)
    if not folder_exists(target.parent):
        return _missing(target.parent, "Destination parent")
    if dry_run:
        return _dry_run(f"move file {source} → {target}", target)

    try:
        shutil.move(str(source), str(target))
    except (OSError, ValueError) as e:
        return _failed("Move file", source, e)
    log.debug(f"Moved file {source} → {target}")
    return OpResult.success(target)


def copy_file(src: PathLike, dest: PathLike, *, dry_run: bool = False) -> OpResult:
    source, target = to_path(src), to_path(dest)
    if not file_exists(source):
        return _missing(source, "File")
    if path_exists(target):
        return _occupied(target)
    if dry_run:
        return _dry_run(f"copy file {source} → {target}", target)

    try:
        shutil.copy2(source, target)
    except (OSError, ValueError) as e:
        return _failed("Copy file", source, e)
    log.debug(f"Copied file {source} → {target}")
    return OpResult.success(target)


# ----------------------------------------------------------------------
# TEXT / BINARY I/O
# ----------------------------------------------------------------------

def write_text_file(
    path: PathLike,
    text: str,
    *,
    encoding: str = DEFAULT_ENCODING,
    dry_run: bool = False,
) -> OpResult:
    """
    Create or overwrite a text file with exactly ``text``.

    The parent folder must exist. Newlines are written as given. If the
    text cannot be encoded the existing file is left untouched.
    """
    p = to_path(path)
    if not folder_exists(p.parent):
        return _missing(p.parent, "Parent folder")
    if dry_run:
        return _dry_run(f"write {len(text)} chars to {p}", p)

    try:
        write_text(p, text, encoding=encoding)
    except (OSError, ValueError, LookupError) as e:
        return _failed("Write text", p, e)
    log.debug(f"Wrote text file: {p}")
    return OpResult.success(p)


def try_read_text_file(path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> OpResult:
    """Read a whole text file. ``value`` holds the text on success."""
    p = to_path(path)
    if not file_exists(p):
        return _missing(p, "File")
    try:
        text = read_text(p, encoding=encoding)
    except (OSError, ValueError, LookupError) as e:
        return _failed("Read text", p, e)
    return OpResult.success(p, value=text)


def read_text_file(path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a whole text file.

    Returns ``""`` when the file is missing or unreadable, which is
    indistinguishable from an empty file; use ``try_read_text_file`` when
    that matters.
    """
    result = try_read_text_file(path, encoding=encoding)
    return result.value if result else ""


def write_binary_file(
    path: PathLike,
    data: bytes,
    length: Optional[int] = None,
    *,
    dry_run: bool = False,
) -> OpResult:
    """
    Write the first ``length`` bytes of ``data`` (all of it by default).

    Args:
        path: Target file; its parent folder must exist.
        data: Bytes-like payload.
        length: Number of bytes to write, between 0 and ``len(data)``.
        dry_run: Check preconditions and log without writing.
    """
    p = to_path(path)
    payload = bytes(data)
    if length is None:
        length = len(payload)
    if length < 0 or length > len(payload):
        log.debug(f"Invalid length {length} for {len(payload)}-byte buffer")
        return OpResult.failure(
            FsErrorKind.INVALID_ARGUMENT,
            p,
            f"length {length} outside 0..{len(payload)}",
        )
    if not folder_exists(p.parent):
        return _missing(p.parent, "Parent folder")
    if dry_run:
        return _dry_run(f"write {length} bytes to {p}", p)

    try:
        write_bytes(p, payload[:length])
    except (OSError, ValueError) as e:
        return _failed("Write binary", p, e)
    log.debug(f"Wrote {length} bytes: {p}")
    return OpResult.success(p)


def try_read_binary_file(path: PathLike) -> OpResult:
    p = to_path(path)
    if not file_exists(p):
        return _missing(p, "File")
    try:
        payload = read_bytes(p)
    except (OSError, ValueError) as e:
        return _failed("Read binary", p, e)
    return OpResult.success(p, value=payload)


def read_binary_file(path: PathLike) -> Optional[bytes]:
    """Whole file contents, or ``None`` if the file is missing or unreadable."""
    result = try_read_binary_file(path)
    return result.value if result else None
