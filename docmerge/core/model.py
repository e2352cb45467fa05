from __future__ import annotations
# -*- coding: utf-8 -*-

"""
model.py – Data types shared by the merge pipeline.
"""

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .writer import WriteStats

STATUS_OK = "ok"
STATUS_MISSING = "missing"
STATUS_READ_ERROR = "read_error"


@dataclass(frozen=True)
class DocumentSpec:
    """One entry of the ordered document list: a filename and its ToC section."""

    identifier: str
    section: Optional[str] = None


@dataclass(frozen=True)
class DocumentRecord:
    """Loaded result for a DocumentSpec. Placeholder content when not found."""

    identifier: str
    path: Path
    content: str
    title: str
    status: str = STATUS_OK
    section: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == STATUS_OK


@dataclass
class Section:
    title: Optional[str]
    records: List[DocumentRecord] = field(default_factory=list)


@dataclass(frozen=True)
class MergeSummary:
    total: int
    found: int
    missing: int
    read_errors: int

    @classmethod
    def from_records(cls, records: List[DocumentRecord]) -> "MergeSummary":
        return cls(
            total=len(records),
            found=sum(1 for r in records if r.found),
            missing=sum(1 for r in records if r.status == STATUS_MISSING),
            read_errors=sum(1 for r in records if r.status == STATUS_READ_ERROR),
        )


@dataclass(frozen=True)
class MergeResult:
    """
    Outcome of one run. `written` is set once the output file exists and
    carries the byte and character counts reported by the writer.
    """

    version: str
    generated_at: datetime.datetime
    records: List[DocumentRecord]
    toc: str
    content: str
    summary: MergeSummary
    output_path: Path
    written: Optional[WriteStats] = None
