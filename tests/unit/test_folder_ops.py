from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from fsutils import ops
from fsutils.results import FsErrorKind


def _populate(folder: Path) -> set[str]:
    (folder / "nested").mkdir(parents=True)
    (folder / "a.txt").write_text("a", encoding="utf-8")
    (folder / "nested" / "b.bin").write_bytes(b"\x00\x01")
    return {"a.txt", "nested", "nested/b.bin"}


def _contents(folder: Path) -> set[str]:
    return {p.relative_to(folder).as_posix() for p in folder.rglob("*")}


def test_create_folder_with_missing_parents(tmp_path: Path) -> None:
    target = tmp_path / "missing_parent" / "new_folder"

    result = ops.create_folder(target)

    assert result
    assert result.path == target
    assert ops.folder_exists(target)


def test_create_folder_is_idempotent(tmp_path: Path) -> None:
    assert ops.create_folder(tmp_path)
    assert ops.create_folder(tmp_path)


def test_create_folder_fails_when_file_occupies_path(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    result = ops.create_folder(blocker)

    assert not result
    assert result.error is FsErrorKind.ALREADY_EXISTS


def test_folder_exists_is_false_for_files_and_bad_paths(tmp_path: Path) -> None:
    some_file = tmp_path / "f.txt"
    some_file.write_text("x", encoding="utf-8")

    assert not ops.folder_exists(some_file)
    assert not ops.folder_exists(tmp_path / "missing")
    assert not ops.folder_exists("bad\0path")


def test_delete_folder_removes_contents(tmp_path: Path) -> None:
    folder = tmp_path / "doomed"
    _populate(folder)

    assert ops.delete_folder(folder)
    assert not ops.folder_exists(folder)


def test_delete_folder_missing_is_success(tmp_path: Path) -> None:
    result = ops.delete_folder(tmp_path / "never_existed")

    assert result
    assert result.detail == "absent"


def test_delete_folder_reports_permission_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    folder = tmp_path / "locked"
    folder.mkdir()

    def _deny(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(shutil, "rmtree", _deny)
    result = ops.delete_folder(folder)

    assert not result
    assert result.error is FsErrorKind.PERMISSION_DENIED
    assert folder.is_dir()


def test_rename_folder_keeps_contents(tmp_path: Path) -> None:
    old = tmp_path / "old"
    new = tmp_path / "new"
    expected = _populate(old)

    result = ops.rename_folder(old, new)

    assert result
    assert not ops.folder_exists(old)
    assert ops.folder_exists(new)
    assert _contents(new) == expected


def test_rename_folder_preconditions(tmp_path: Path) -> None:
    existing = tmp_path / "existing"
    other = tmp_path / "other"
    existing.mkdir()
    other.mkdir()

    missing = ops.rename_folder(tmp_path / "missing", tmp_path / "whatever")
    taken = ops.rename_folder(existing, other)

    assert not missing and missing.error is FsErrorKind.NOT_FOUND
    assert not taken and taken.error is FsErrorKind.ALREADY_EXISTS
    assert existing.is_dir() and other.is_dir()


def test_rename_folder_refuses_to_replace_file(tmp_path: Path) -> None:
    folder = tmp_path / "folder"
    folder.mkdir()
    occupied = tmp_path / "occupied.txt"
    occupied.write_text("keep", encoding="utf-8")

    result = ops.rename_folder(folder, occupied)

    assert result.error is FsErrorKind.ALREADY_EXISTS
    assert occupied.read_text(encoding="utf-8") == "keep"


def test_move_folder_appends_source_name(tmp_path: Path) -> None:
    source = tmp_path / "renamedFolderTest"
    destination_parent = tmp_path / "folderTest"
    expected = _populate(source)
    destination_parent.mkdir()

    result = ops.move_folder(source, destination_parent)

    moved = destination_parent / "renamedFolderTest"
    assert result
    assert result.path == moved
    assert not source.exists()
    assert _contents(moved) == expected


def test_move_folder_preconditions(tmp_path: Path) -> None:
    source = tmp_path / "src"
    source.mkdir()
    parent = tmp_path / "parent"
    (parent / "src").mkdir(parents=True)

    assert ops.move_folder(tmp_path / "missing", parent).error is FsErrorKind.NOT_FOUND
    assert ops.move_folder(source, parent).error is FsErrorKind.ALREADY_EXISTS
    assert ops.move_folder(source, tmp_path / "no_parent").error is FsErrorKind.NOT_FOUND
    assert source.is_dir()


def test_copy_folder_duplicates_tree(tmp_path: Path) -> None:
    source = tmp_path / "src"
    dest = tmp_path / "dest"
    expected = _populate(source)

    result = ops.copy_folder(source, dest)

    assert result
    assert _contents(dest) == expected
    assert _contents(source) == expected
    assert (dest / "nested" / "b.bin").read_bytes() == b"\x00\x01"


def test_copy_folder_with_progress(tmp_path: Path) -> None:
    source = tmp_path / "src"
    expected = _populate(source)

    assert ops.copy_folder(source, tmp_path / "dest", progress=True)
    assert _contents(tmp_path / "dest") == expected


def test_copy_folder_preconditions(tmp_path: Path) -> None:
    source = tmp_path / "src"
    dest = tmp_path / "dest"
    source.mkdir()
    dest.mkdir()

    assert ops.copy_folder(tmp_path / "missing", tmp_path / "x").error is FsErrorKind.NOT_FOUND
    assert ops.copy_folder(source, dest).error is FsErrorKind.ALREADY_EXISTS


def test_dry_run_leaves_folders_untouched(tmp_path: Path) -> None:
    source = tmp_path / "src"
    _populate(source)
    parent = tmp_path / "parent"
    parent.mkdir()

    assert ops.create_folder(tmp_path / "new", dry_run=True)
    assert ops.rename_folder(source, tmp_path / "renamed", dry_run=True)
    assert ops.move_folder(source, parent, dry_run=True)
    assert ops.copy_folder(source, tmp_path / "copy", dry_run=True)
    assert ops.delete_folder(source, dry_run=True)

    assert not (tmp_path / "new").exists()
    assert not (tmp_path / "renamed").exists()
    assert not (parent / "src").exists()
    assert not (tmp_path / "copy").exists()
    assert source.is_dir()


def test_dry_run_still_checks_preconditions(tmp_path: Path) -> None:
    result = ops.rename_folder(tmp_path / "missing", tmp_path / "x", dry_run=True)

    assert not result
    assert result.error is FsErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "operation, kind",
    [
        (ops.rename_folder, FsErrorKind.INVALID_ARGUMENT),
        (ops.copy_folder, FsErrorKind.INVALID_ARGUMENT),
        # the folder keeps its name, so a NUL can only sit in the parent
        (ops.move_folder, FsErrorKind.NOT_FOUND),
    ],
    ids=["rename", "copy", "move"],
)
def test_folder_ops_with_nul_destination_fail_cleanly(
    tmp_path: Path, operation, kind: FsErrorKind
) -> None:
    source = tmp_path / "a"
    source.mkdir()
    (source / "inner.txt").write_text("x", encoding="utf-8")

    result = operation(source, tmp_path / "b\0c")

    assert not result
    assert result.error is kind
    assert (source / "inner.txt").is_file()
