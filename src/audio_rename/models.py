from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class TagData:
    title: Optional[str]
    track_number: Optional[int]


class RenameOutcome(Enum):
    RENAMED = "renamed"
    SKIPPED_UNCHANGED = "skipped-unchanged"
    SKIPPED_COLLISION = "skipped-collision"


@dataclass
class FileResult:
    source: Path
    outcome: RenameOutcome
    old_name: str
    new_name: str
    target: Path


@dataclass
class RunSummary:
    success: int = 0
    skip: int = 0
    error: int = 0
    warnings: list[str] = field(default_factory=list)

    def record(self, outcome: RenameOutcome) -> None:
        if outcome is RenameOutcome.RENAMED:
            self.success += 1
        elif outcome in (RenameOutcome.SKIPPED_UNCHANGED, RenameOutcome.SKIPPED_COLLISION):
            self.skip += 1
        else:
            raise ValueError(f"unhandled rename outcome: {outcome!r}")

    def record_error(self, message: str) -> None:
        self.error += 1
        self.warnings.append(message)


@dataclass
class RenamePlan:
    """Renames a dry run has decided on but not performed."""

    claimed: set[Path] = field(default_factory=set)
    vacated: set[Path] = field(default_factory=set)

    def occupied(self, target: Path) -> bool:
        if target in self.claimed:
            return True
        return target not in self.vacated and os.path.lexists(target)

    def record(self, source: Path, target: Path) -> None:
        self.claimed.discard(source)
        self.vacated.add(source)
        self.vacated.discard(target)
        self.claimed.add(target)
