from __future__ import annotations

import os
from pathlib import Path

from .errors import NoFileNameError, RenameFailedError
from .metadata import read_tag_data
from .models import FileResult, RenameOutcome, RenamePlan
from .naming import target_filename


def process_file(
    path: Path,
    extension: str,
    dry_run: bool = False,
    plan: RenamePlan | None = None,
) -> FileResult:
    """Rename one audio file after its tags.

    Never overwrites: an existing entry at the target path yields
    ``SKIPPED_COLLISION`` and the file is left alone. On a dry run, ``plan``
    carries the renames earlier files would have made.
    """
    old_name = path.name
    if not old_name:
        raise NoFileNameError(path, "cannot determine file name")

    tag_data = read_tag_data(path, extension)
    new_name = target_filename(tag_data, extension)

    if new_name == old_name:
        return FileResult(path, RenameOutcome.SKIPPED_UNCHANGED, old_name, new_name, path)

    if "\x00" in new_name:
        raise RenameFailedError(path, "target name contains a null character")

    target = path.with_name(new_name)

    if dry_run:
        if plan is None:
            plan = RenamePlan()
        if plan.occupied(target):
            return FileResult(path, RenameOutcome.SKIPPED_COLLISION, old_name, new_name, target)
        plan.record(path, target)
        return FileResult(path, RenameOutcome.RENAMED, old_name, new_name, target)

    if os.path.lexists(target):
        return FileResult(path, RenameOutcome.SKIPPED_COLLISION, old_name, new_name, target)

    try:
        os.rename(path, target)
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise RenameFailedError(path, reason) from exc

    return FileResult(path, RenameOutcome.RENAMED, old_name, new_name, target)
