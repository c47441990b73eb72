from __future__ import annotations

from pathlib import Path


class ProcessingError(RuntimeError):
    """A per-file failure. The batch records it and moves on to the next file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class OpenError(ProcessingError):
    """Raised when the file cannot be opened or its container is not recognized."""


class ReadError(ProcessingError):
    """Raised when the container was recognized but its tags could not be parsed."""


class NoTagError(ProcessingError):
    pass


class NoFileNameError(ProcessingError):
    pass


class RenameFailedError(ProcessingError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"rename failed: {reason}")
        self.reason = reason
