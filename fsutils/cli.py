"""Command-line entry point for fsutils.

Exposes the filesystem helpers as `fsutils <command>` subcommands, installable
as a `console_scripts` entry and completable via ``argcomplete``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

import argcomplete
from rich.console import Console
from rich.table import Table

from fsutils import discovery, ops, paths, selftest
from fsutils.base.fs import human_size, path_exists
from fsutils.base.logging import get_logger, setup_logging
from fsutils.results import OpResult
from fsutils.shared.loader import load_defaults, load_logging_config, resolve_config_path

log = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

Handler = Callable[[argparse.Namespace, Dict[str, Any]], int]


# ----------------------------------------------------------------------
# HELPERS
# ----------------------------------------------------------------------

def _report(result: OpResult, action: str) -> int:
    if result:
        log.info(f"✅ {action}: {result.path}")
        return EXIT_OK
    log.error(f"❌ {action} failed ({result.error.value if result.error else 'unknown'}): {result.detail}")
    return EXIT_FAILURE


def _dry_run(args: argparse.Namespace, defaults: Dict[str, Any]) -> bool:
    return bool(args.dry_run or defaults.get("dry_run"))


def _encoding(args: argparse.Namespace, defaults: Dict[str, Any]) -> str:
    return getattr(args, "encoding", None) or defaults["encoding"]


# ----------------------------------------------------------------------
# COMMANDS
# ----------------------------------------------------------------------

def cmd_mkdir(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    return _report(ops.create_folder(args.path, dry_run=_dry_run(args, defaults)), "Create folder")


def cmd_rmdir(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    return _report(ops.delete_folder(args.path, dry_run=_dry_run(args, defaults)), "Delete folder")


def cmd_rm(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    return _report(ops.delete_file(args.path, dry_run=_dry_run(args, defaults)), "Delete file")


def cmd_rename(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    dry_run = _dry_run(args, defaults)
    if ops.folder_exists(args.src):
        return _report(ops.rename_folder(args.src, args.dst, dry_run=dry_run), "Rename folder")
    return _report(ops.rename_file(args.src, args.dst, dry_run=dry_run), "Rename file")


def cmd_mv(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    """Folders move *into* DST; files move *to* DST."""
    dry_run = _dry_run(args, defaults)
    if ops.folder_exists(args.src):
        return _report(ops.move_folder(args.src, args.dst, dry_run=dry_run), "Move folder")
    return _report(ops.move_file(args.src, args.dst, dry_run=dry_run), "Move file")


def cmd_cp(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    dry_run = _dry_run(args, defaults)
    if ops.folder_exists(args.src):
        progress = bool(args.progress or defaults.get("progress"))
        result = ops.copy_folder(args.src, args.dst, progress=progress, dry_run=dry_run)
        return _report(result, "Copy folder")
    return _report(ops.copy_file(args.src, args.dst, dry_run=dry_run), "Copy file")


def cmd_write(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    text = args.text if args.text is not None else sys.stdin.read()
    result = ops.write_text_file(
        args.path,
        text,
        encoding=_encoding(args, defaults),
        dry_run=_dry_run(args, defaults),
    )
    return _report(result, "Write file")


def cmd_cat(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    result = ops.try_read_text_file(args.path, encoding=_encoding(args, defaults))
    if not result:
        return _report(result, "Read file")
    sys.stdout.write(result.value)
    return EXIT_OK


def cmd_find(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    if not ops.folder_exists(args.path):
        log.error(f"❌ Not a folder: {args.path}")
        return EXIT_FAILURE
    if args.ext is not None:
        found = discovery.files_by_extension(args.path, args.ext)
    elif args.folders:
        found = discovery.folders_by_name(args.path, args.name or "")
    else:
        found = discovery.files_by_name(args.path, args.name or "")

    for item in sorted(found, key=str):
        print(item)
    log.debug(f"{len(found)} match(es) in {args.path}")
    return EXIT_OK


def cmd_info(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    target = Path(args.path)
    table = Table(title=str(target), show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value")

    table.add_row("filename", paths.filename(target))
    table.add_row("extension", paths.file_extension(target) or "-")
    table.add_row("name", paths.filename_with_extension(target))
    table.add_row("folder", paths.folder_name(target))
    table.add_row("parent", str(paths.parent_folder(target)))
    number = paths.int_from_filename(paths.filename_with_extension(target))
    table.add_row("number", str(number) if number != paths.NOT_FOUND else "-")

    if ops.folder_exists(target):
        kind = "folder"
    elif ops.file_exists(target):
        kind = "file"
        table.add_row("size", human_size(target.stat().st_size))
    else:
        kind = "missing" if not path_exists(target) else "other"
    table.add_row("kind", kind)

    Console().print(table)
    return EXIT_OK


def cmd_selftest(args: argparse.Namespace, defaults: Dict[str, Any]) -> int:
    report = selftest.run_all(args.path)
    log.info(f"Self-test: {len(report.passed)} passed, {len(report.failed)} failed")
    return EXIT_OK if report.ok else EXIT_FAILURE


# ----------------------------------------------------------------------
# PARSER
# ----------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fsutils", description="Filesystem helper commands.")
    parser.add_argument("--config", "-c", help="Path to configuration YAML (defaults to repo config).")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging verbosity (default: config value or INFO).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Check preconditions and log actions without modifying files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add(name: str, handler: Handler, help_text: str) -> argparse.ArgumentParser:
        cmd = sub.add_parser(name, help=help_text)
        cmd.set_defaults(handler=handler)
        return cmd

    add("mkdir", cmd_mkdir, "Create a folder and missing parents.").add_argument("path")
    add("rmdir", cmd_rmdir, "Delete a folder recursively.").add_argument("path")
    add("rm", cmd_rm, "Delete a file.").add_argument("path")

    rename = add("rename", cmd_rename, "Rename a file or folder.")
    rename.add_argument("src")
    rename.add_argument("dst")

    mv = add("mv", cmd_mv, "Move a file to DST, or a folder into DST.")
    mv.add_argument("src")
    mv.add_argument("dst")

    cp = add("cp", cmd_cp, "Copy a file or folder to DST.")
    cp.add_argument("src")
    cp.add_argument("dst")
    cp.add_argument("--progress", action="store_true", help="Show a progress bar for folder copies.")

    write = add("write", cmd_write, "Write text to a file (stdin when TEXT is omitted).")
    write.add_argument("path")
    write.add_argument("text", nargs="?")
    write.add_argument("--encoding")

    cat = add("cat", cmd_cat, "Print a text file.")
    cat.add_argument("path")
    cat.add_argument("--encoding")

    find = add("find", cmd_find, "List entries directly inside a folder.")
    find.add_argument("path")
    group = find.add_mutually_exclusive_group()
    group.add_argument("--ext", help="Match files with this extension.")
    group.add_argument("--folders", action="store_true", help="List folders instead of files.")
    find.add_argument("--name", help="Substring the entry path must contain.")

    add("info", cmd_info, "Show path components of a file or folder.").add_argument("path")

    add("selftest", cmd_selftest, "Run the end-to-end smoke checks in a scratch folder.").add_argument(
        "path", nargs="?", default="./fsutils_selftest"
    )

    argcomplete.autocomplete(parser)
    return parser


# ----------------------------------------------------------------------
# ENTRY POINT
# ----------------------------------------------------------------------

def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config_path = resolve_config_path(args.config)
        logging_cfg = load_logging_config(config_path)
        defaults = load_defaults(config_path)
    except (OSError, ValueError) as e:
        setup_logging(args.log_level)
        log.error(f"❌ Invalid configuration: {e}")
        return EXIT_FAILURE

    setup_logging(
        level=args.log_level or logging_cfg.get("level"),
        use_rich=logging_cfg.get("use_rich"),
        log_dir=logging_cfg.get("log_dir"),
        file_prefix=logging_cfg.get("file_prefix"),
    )
    log.debug(f"Arguments: {args}")

    try:
        return args.handler(args, defaults)
    except KeyboardInterrupt:
        log.warning("⚠️ Operation cancelled by user.")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    raise SystemExit(main())
