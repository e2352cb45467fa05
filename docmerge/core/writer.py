from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

ENC = "utf-8"


class MergeWriteError(RuntimeError):
    """The merged document could not be written. Fatal for the run."""


@dataclass(frozen=True)
class WriteStats:
    bytes: int
    chars: int

    @property
    def megabytes(self) -> float:
        return self.bytes / 1024 / 1024


def write_document(path: Path, content: str) -> WriteStats:
    """
    Overwrite `path` with `content` in one write.

    The parent directory must already exist; a missing one is a write failure
    like any other. There is no temp-file swap, so a crash mid-write can leave
    a truncated file.
    """
    try:
        with path.open("w", encoding=ENC, newline="") as fh:
            fh.write(content)
    except OSError as e:
        raise MergeWriteError(f"Failed to write {path}: {e}") from e
    return WriteStats(bytes=len(content.encode(ENC)), chars=len(content))
