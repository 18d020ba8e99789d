"""
fsutils: filesystem helpers with boolean-style results.

Modules:
  paths.py      : filename / extension / parent helpers, numeric extraction
  ops.py        : existence checks, create/delete/rename/move/copy, text/binary I/O
  discovery.py  : single-level scans by name or extension
  results.py    : OpResult and FsErrorKind
  selftest.py   : end-to-end smoke runner
  cli.py        : `fsutils` command-line entry point
"""

from fsutils.discovery import (
    files_by_extension,
    files_by_name,
    folders_by_name,
    sort_paths_by_numeric_value,
)
from fsutils.ops import (
    copy_file,
    copy_folder,
    create_folder,
    delete_file,
    delete_folder,
    file_exists,
    folder_exists,
    move_file,
    move_folder,
    read_binary_file,
    read_text_file,
    rename_file,
    rename_folder,
    try_read_binary_file,
    try_read_text_file,
    write_binary_file,
    write_text_file,
)
from fsutils.paths import (
    NOT_FOUND,
    file_extension,
    filename,
    filename_with_extension,
    folder_name,
    int_from_filename,
    parent_folder,
)
from fsutils.results import FsErrorKind, OpResult, UnsupportedOperationError

__version__ = "1.0.0"

__all__ = [
    "NOT_FOUND",
    "FsErrorKind",
    "OpResult",
    "UnsupportedOperationError",
    "copy_file",
    "copy_folder",
    "create_folder",
    "delete_file",
    "delete_folder",
    "file_exists",
    "file_extension",
    "filename",
    "filename_with_extension",
    "files_by_extension",
    "files_by_name",
    "folder_exists",
    "folder_name",
    "folders_by_name",
    "int_from_filename",
    "move_file",
    "move_folder",
    "parent_folder",
    "read_binary_file",
    "read_text_file",
    "rename_file",
    "rename_folder",
    "sort_paths_by_numeric_value",
    "try_read_binary_file",
    "try_read_text_file",
    "write_binary_file",
    "write_text_file",
]
