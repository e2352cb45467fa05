from __future__ import annotations
# -*- coding: utf-8 -*-

"""
report.py – Console lines for a merge run, rendered from structured results
in the language of the run's label set.
"""

from typing import List

from .labels import EN, Labels
from .model import DocumentRecord, MergeResult, STATUS_MISSING


def group_thousands(n: int, sep: str) -> str:
    return f"{n:,}".replace(",", sep)


def format_start(title: str, version: str, labels: Labels = EN) -> List[str]:
    return ["🚀 " + labels.start.format(title=title, version=version), ""]


def format_progress(record: DocumentRecord, labels: Labels = EN) -> List[str]:
    lines = ["📖 " + labels.reading.format(identifier=record.identifier)]
    if record.found:
        lines.append(f"   ✅ {record.title}")
    elif record.status == STATUS_MISSING:
        lines.append(f"   ❌ {labels.not_found}")
    else:
        lines.append(f"   ❌ {labels.read_error}")
    return lines


def format_summary(result: MergeResult, labels: Labels = EN) -> List[str]:
    s = result.summary
    lines = [""]
    if result.written is not None:
        w = result.written
        lines += [
            "✅ " + labels.written.format(path=result.output_path),
            "📊 " + labels.file_size.format(mb=w.megabytes),
            "📄 " + labels.characters.format(chars=group_thousands(w.chars, labels.thousands_sep)),
            "",
        ]
    lines += [
        "📈 " + labels.statistics,
        "   ✅ " + labels.stat_found.format(found=s.found, total=s.total),
    ]
    if s.missing:
        lines.append("   ❌ " + labels.stat_missing.format(count=s.missing))
    if s.read_errors:
        lines.append("   ❌ " + labels.stat_read_errors.format(count=s.read_errors))
    return lines
