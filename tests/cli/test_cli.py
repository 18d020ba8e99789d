from __future__ import annotations

from pathlib import Path

import pytest

from fsutils.cli import EXIT_FAILURE, EXIT_OK, build_parser, main


@pytest.fixture
def config(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n  level: WARNING\n  use_rich: false\n"
        "defaults:\n  encoding: utf-8\n  dry_run: false\n  progress: false\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    root = tmp_path / "work"
    root.mkdir()
    return root


def _run(config: Path, *args: str) -> int:
    return main(["--config", str(config), *args])


def test_mkdir_and_rmdir(config: Path, workdir: Path) -> None:
    target = workdir / "a" / "b"

    assert _run(config, "mkdir", str(target)) == EXIT_OK
    assert target.is_dir()
    assert _run(config, "rmdir", str(workdir / "a")) == EXIT_OK
    assert not (workdir / "a").exists()


def test_write_cat_and_rm(config: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = workdir / "note.txt"

    assert _run(config, "write", str(target), "hello\nworld") == EXIT_OK
    capsys.readouterr()
    assert _run(config, "cat", str(target)) == EXIT_OK
    assert capsys.readouterr().out == "hello\nworld"
    assert _run(config, "rm", str(target)) == EXIT_OK
    assert not target.exists()


def test_write_into_missing_folder_fails(config: Path, workdir: Path) -> None:
    assert _run(config, "write", str(workdir / "missing" / "x.txt"), "x") == EXIT_FAILURE


def test_cat_missing_file_fails(config: Path, workdir: Path) -> None:
    assert _run(config, "cat", str(workdir / "missing.txt")) == EXIT_FAILURE


def test_rename_dispatches_on_kind(config: Path, workdir: Path) -> None:
    (workdir / "folder").mkdir()
    (workdir / "file.txt").write_text("x", encoding="utf-8")

    assert _run(config, "rename", str(workdir / "folder"), str(workdir / "renamed")) == EXIT_OK
    assert _run(config, "rename", str(workdir / "file.txt"), str(workdir / "renamed.txt")) == EXIT_OK
    assert (workdir / "renamed").is_dir()
    assert (workdir / "renamed.txt").is_file()


def test_mv_folder_goes_into_destination(config: Path, workdir: Path) -> None:
    (workdir / "src").mkdir()
    (workdir / "dest").mkdir()

    assert _run(config, "mv", str(workdir / "src"), str(workdir / "dest")) == EXIT_OK
    assert (workdir / "dest" / "src").is_dir()


def test_mv_file_to_full_path(config: Path, workdir: Path) -> None:
    (workdir / "a.txt").write_text("x", encoding="utf-8")

    assert _run(config, "mv", str(workdir / "a.txt"), str(workdir / "b.txt")) == EXIT_OK
    assert (workdir / "b.txt").is_file()
    assert _run(config, "mv", str(workdir / "a.txt"), str(workdir / "c.txt")) == EXIT_FAILURE


def test_cp_file_and_folder(config: Path, workdir: Path) -> None:
    (workdir / "src").mkdir()
    (workdir / "src" / "inner.txt").write_text("x", encoding="utf-8")
    (workdir / "a.txt").write_text("a", encoding="utf-8")

    assert _run(config, "cp", str(workdir / "a.txt"), str(workdir / "b.txt")) == EXIT_OK
    assert _run(config, "cp", "--progress", str(workdir / "src"), str(workdir / "copy")) == EXIT_OK
    assert (workdir / "b.txt").read_text(encoding="utf-8") == "a"
    assert (workdir / "copy" / "inner.txt").is_file()
    assert _run(config, "cp", str(workdir / "a.txt"), str(workdir / "b.txt")) == EXIT_FAILURE


def test_global_dry_run(config: Path, workdir: Path) -> None:
    target = workdir / "never"

    assert _run(config, "--dry-run", "mkdir", str(target)) == EXIT_OK
    assert not target.exists()


def test_dry_run_from_config(tmp_path: Path, workdir: Path) -> None:
    cfg = tmp_path / "dry.yaml"
    cfg.write_text("logging:\n  use_rich: false\ndefaults:\n  dry_run: true\n", encoding="utf-8")
    (workdir / "keep.txt").write_text("x", encoding="utf-8")

    assert main(["--config", str(cfg), "rm", str(workdir / "keep.txt")]) == EXIT_OK
    assert (workdir / "keep.txt").exists()


def test_find_lists_sorted_matches(config: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    for i in (2, 0, 1):
        (workdir / f"test{i}.txt").write_text("x", encoding="utf-8")
        (workdir / f"test{i}").mkdir()
    (workdir / "other.md").write_text("x", encoding="utf-8")

    assert _run(config, "find", str(workdir), "--ext", ".txt") == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert [Path(line).name for line in lines] == ["test0.txt", "test1.txt", "test2.txt"]

    assert _run(config, "find", str(workdir), "--folders", "--name", "test1") == EXIT_OK
    assert [Path(line).name for line in capsys.readouterr().out.splitlines()] == ["test1"]


def test_find_on_missing_folder_fails(config: Path, workdir: Path) -> None:
    assert _run(config, "find", str(workdir / "missing")) == EXIT_FAILURE


def test_info_prints_components(config: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = workdir / "frame_0042.png"
    target.write_bytes(b"\x89PNG")

    assert _run(config, "info", str(target)) == EXIT_OK
    out = capsys.readouterr().out
    assert "frame_0042" in out
    assert ".png" in out
    assert "42" in out
    assert "file" in out


def test_selftest_command(config: Path, workdir: Path) -> None:
    assert _run(config, "selftest", str(workdir / "scratch")) == EXIT_OK
    assert not (workdir / "scratch").exists()


def test_invalid_config_fails(tmp_path: Path, workdir: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("defaults:\n  colour: red\n", encoding="utf-8")

    assert main(["--config", str(bad), "mkdir", str(workdir / "x")]) == EXIT_FAILURE
    assert not (workdir / "x").exists()


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_unknown_encoding_fails_without_traceback(config: Path, workdir: Path) -> None:
    target = workdir / "note.txt"
    target.write_text("keep", encoding="utf-8")

    assert _run(config, "cat", str(target), "--encoding", "bogus-enc") == EXIT_FAILURE
    assert _run(config, "write", str(target), "x", "--encoding", "bogus-enc") == EXIT_FAILURE
    assert target.read_text(encoding="utf-8") == "keep"
