from __future__ import annotations

import argparse
import os
from pathlib import Path

from .metadata import SUPPORTED_EXTENSIONS
from .scanner import rename_tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio-rename",
        description="Recursively rename audio files from their title and track-number tags.",
    )
    parser.add_argument(
        "root",
        type=Path,
        nargs="?",
        default=None,
        help="Directory to process (defaults to the current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show planned renames without touching any file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print directory traversal warnings as they happen",
    )
    parser.add_argument(
        "--warnings-log",
        type=Path,
        default=None,
        help="Write traversal warnings and per-file failures to this file",
    )
    parser.add_argument(
        "--pause",
        action="store_true",
        help="Wait for Enter before exiting",
    )
    return parser


def _resolve_root(root: Path | None) -> Path:
    if root is None:
        try:
            return Path(os.getcwd())
        except OSError as exc:
            raise SystemExit(f"Cannot determine the current directory: {exc}")
    root = root.expanduser().resolve()
    if not root.is_dir():
        raise SystemExit(f"Root directory does not exist or is not a directory: {root}")
    return root


def _wait_for_enter() -> None:
    try:
        input("\nPress Enter to exit...")
    except EOFError:
        pass


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    print("=== Audio batch renamer ===")
    print("Renames audio files under the target directory from their metadata tags")
    print(f"Supported formats: {', '.join(sorted(SUPPORTED_EXTENSIONS))}")

    root = _resolve_root(args.root)

    print(f"[start] scanning: {root}")
    if args.dry_run:
        print("[start] dry-run mode enabled (no files will be renamed)")
    print()

    summary = rename_tree(root, dry_run=args.dry_run, verbose=args.verbose)

    print()
    print("=== Done ===")
    print(f"[done] renamed: {summary.success}")
    print(f"[done] skipped: {summary.skip}")
    print(f"[done] failed: {summary.error}")

    if summary.warnings and args.warnings_log is not None:
        warnings_path = args.warnings_log.expanduser().resolve()
        warnings_path.parent.mkdir(parents=True, exist_ok=True)
        warnings_path.write_text("\n".join(summary.warnings) + "\n", encoding="utf-8")
        print(f"[warn] warnings: {len(summary.warnings)}")
        print(f"[write] details written: {warnings_path}")

    if args.pause:
        _wait_for_enter()


if __name__ == "__main__":
    main()
