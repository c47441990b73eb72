from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Iterator

from .errors import ProcessingError
from .metadata import audio_extension
from .models import FileResult, RenameOutcome, RenamePlan, RunSummary
from .renamer import process_file


def iter_audio_files(
    root: Path,
    on_error: Callable[[OSError], None] | None = None,
) -> Iterator[tuple[Path, str]]:
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        base = Path(dirpath)
        for name in sorted(filenames):
            path = base / name
            extension = audio_extension(path)
            if extension is None:
                continue
            try:
                if not path.is_file():
                    continue
            except OSError as exc:
                if on_error:
                    on_error(exc)
                continue
            yield path, extension


def _report(result: FileResult, dry_run: bool) -> None:
    if result.outcome is RenameOutcome.RENAMED:
        action = "would rename" if dry_run else "rename"
        print(f"[{action}] {result.old_name} -> {result.new_name}")
    elif result.outcome is RenameOutcome.SKIPPED_UNCHANGED:
        print(f"[skip] {result.old_name} (already named correctly)")
    elif result.outcome is RenameOutcome.SKIPPED_COLLISION:
        print(f"[skip] {result.old_name} -> {result.new_name} (target exists)")
    else:
        raise ValueError(f"unhandled rename outcome: {result.outcome!r}")


def rename_tree(root: Path, dry_run: bool = False, verbose: bool = False) -> RunSummary:
    summary = RunSummary()
    plan = RenamePlan() if dry_run else None

    def _on_walk_error(err: OSError) -> None:
        target = getattr(err, "filename", None) or str(root)
        message = f"walk error: {target}: {err.strerror or str(err)}"
        summary.warnings.append(message)
        if verbose:
            print(f"[scan-warning] {message}", file=sys.stderr)

    for path, extension in iter_audio_files(root, on_error=_on_walk_error):
        try:
            result = process_file(path, extension, dry_run=dry_run, plan=plan)
        except ProcessingError as exc:
            print(f"[error] {path.name}: {exc}", file=sys.stderr)
            summary.record_error(f"file failed: {path}: {exc}")
            continue
        summary.record(result.outcome)
        _report(result, dry_run)

    return summary
