"""
fsutils.selftest

End-to-end smoke runner that exercises the helpers against a real directory.

Each scenario group works inside its own container folder under the base
directory and removes it afterwards, pass or fail. The first failing check
stops its group; the run stops at the first failing group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List

from fsutils import discovery, ops, paths
from fsutils.base.fs import PathLike, path_exists, to_path
from fsutils.base.logging import get_logger

log = get_logger(__name__)

DISCOVERY_COUNT = 10
NUMBERED_FILENAMES = (
    "TestFile12345678.txt",
    "12345678TestFile1.txt",
    "Tes12345678tFile.txt",
    "TestFile_12345678.txt",
    "12345678.txt",
)


class SelfTestFailure(AssertionError):
    def __init__(self, name: str, actual: Any, expected: Any):
        super().__init__(f"{name}: result is {actual!r}, expected {expected!r}")
        self.name = name
        self.actual = actual
        self.expected = expected


@dataclass
class SelfTestReport:
    passed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class _Checker:
    def __init__(self, report: SelfTestReport):
        self.report = report

    def compare(self, actual: Any, expected: Any, name: str) -> None:
        # OpResult compares by truthiness against an expected bool.
        if isinstance(expected, bool):
            actual = bool(actual)
        if actual == expected:
            log.info(f"✅ {name:<32} OK")
            self.report.passed.append(name)
            return
        log.error(f"❌ {name}: result is {actual!r}, expected {expected!r}  FAIL")
        self.report.failed.append(name)
        raise SelfTestFailure(name, actual, expected)

    def setup(self, result: Any, name: str) -> None:
        if not result:
            self.compare(False, True, name)


# ----------------------------------------------------------------------
# SCENARIOS
# ----------------------------------------------------------------------

def folder_basics(base: Path, check: _Checker) -> None:
    folder = base / "folderTest"
    renamed = base / "renamedFolderTest"

    check.compare(ops.create_folder(folder), True, "CreateFolder")
    check.compare(ops.folder_exists(folder), True, "FolderExists")
    check.compare(ops.rename_folder(folder, renamed), True, "RenameFolder")
    check.compare(ops.copy_folder(renamed, folder), True, "CopyFolder")
    check.compare(ops.move_folder(renamed, folder), True, "MoveFolder")
    check.compare(ops.folder_exists(folder / renamed.name), True, "MovedFolderExists")
    check.compare(ops.delete_folder(folder), True, "DeleteFolder")
    check.compare(ops.folder_exists(folder), False, "DeletedFolderGone")


def file_basics(base: Path, check: _Checker) -> None:
    text_file = base / "fileTest.txt"
    binary_file = base / "fileTest.bin"
    renamed = base / "Renamed.txt"
    moved_dir = base / "MovedTest"
    moved = moved_dir / text_file.name
    copied = base / "Copied.txt"
    check.setup(ops.create_folder(moved_dir), "SetupMoveTestFolder")

    check.compare(ops.write_text_file(text_file, "Test"), True, "WriteFile")
    check.compare(ops.file_exists(text_file), True, "FileExists")
    check.compare(ops.rename_file(text_file, renamed), True, "RenameFile")
    check.compare(ops.move_file(renamed, moved), True, "MoveFile")
    check.compare(ops.copy_file(moved, copied), True, "CopyFile")
    check.compare(ops.delete_file(moved), True, "DeleteFile")

    check.compare(ops.write_text_file(text_file, "Test"), True, "WriteTextFile")
    check.compare(ops.read_text_file(text_file), "Test", "ReadTextFile")

    payload = bytes([0, 1, 2, 3, 4])
    check.compare(ops.write_binary_file(binary_file, payload, len(payload)), True, "WriteBinaryFile")
    check.compare(ops.read_binary_file(binary_file), payload, "ReadBinaryFile")


def discovery_scan(base: Path, check: _Checker) -> None:
    for i in range(DISCOVERY_COUNT):
        check.setup(ops.create_folder(base / f"test{i}"), f"SetupFolder{i}")
        check.setup(ops.write_text_file(base / f"test{i}.txt", "Test"), f"SetupFile{i}")

    check.compare(len(discovery.files_by_extension(base, ".txt")), DISCOVERY_COUNT, "FilesByExtension")
    check.compare(len(discovery.files_by_name(base, "test")), DISCOVERY_COUNT, "FilesByName")
    check.compare(len(discovery.folders_by_name(base, "test")), DISCOVERY_COUNT, "FoldersByName")


def conversions(base: Path, check: _Checker) -> None:
    test_file = base / "TestFile.txt"
    child = base / "ChildFolder"
    check.setup(ops.write_text_file(test_file, "test"), "SetupTestFile")
    check.setup(ops.create_folder(child), "SetupTestChildFolder")

    check.compare(paths.filename(test_file), "TestFile", "Filename")
    check.compare(paths.file_extension(test_file), ".txt", "FileExtension")
    check.compare(paths.filename_with_extension(test_file), "TestFile.txt", "FilenameWithExtension")
    check.compare(paths.folder_name(test_file), base.name, "FolderNameFromFile")
    check.compare(paths.folder_name(child), child.name, "FolderNameFromFolder")
    check.compare(paths.parent_folder(test_file), base, "ParentFolderFromFile")
    check.compare(paths.parent_folder(child), base, "ParentFolderFromFolder")

    for index, name in enumerate(NUMBERED_FILENAMES, start=1):
        check.compare(paths.int_from_filename(name), 12345678, f"IntFromFilename{index}")
    check.compare(paths.int_from_filename(""), paths.NOT_FOUND, "IntFromEmptyFilename")


SCENARIOS: List[tuple[str, str, Callable[[Path, _Checker], None]]] = [
    ("folder basics", "TestFolderContainer", folder_basics),
    ("file basics", "TestFileContainer", file_basics),
    ("discovery", "TestDiscoveryContainer", discovery_scan),
    ("conversions", "ConversionTest", conversions),
]


# ----------------------------------------------------------------------
# RUNNER
# ----------------------------------------------------------------------

def run_all(base_dir: PathLike) -> SelfTestReport:
    """
    Run every scenario group under ``base_dir``.

    Returns:
        SelfTestReport listing passed and failed checks. A failed setup of
        the base directory itself is recorded as ``SetupBaseFolder``.
        A base directory created by this run is removed at the end.
    """
    base = to_path(base_dir)
    report = SelfTestReport()
    check = _Checker(report)
    created_base = not path_exists(base)

    if not ops.create_folder(base):
        log.error(f"❌ Could not create self-test folder: {base}")
        report.failed.append("SetupBaseFolder")
        return report

    try:
        for title, container_name, scenario in SCENARIOS:
            container = base / container_name
            try:
                check.setup(ops.create_folder(container), "SetupTestFolder")
                scenario(container, check)
            except SelfTestFailure as e:
                log.error(f"Stopping self-test, {e.name} was not successful")
                return report
            finally:
                ops.delete_folder(container)
            log.info(f"All {title} checks successful")
    finally:
        if created_base:
            ops.delete_folder(base)

    log.info("🎉 All self-test checks successful")
    return report
