from __future__ import annotations
# -*- coding: utf-8 -*-

"""
assemble.py – Builds the merged Markdown text.

Layout:
    header
    table of contents
    ---
    <!-- ===== Title 1 ===== -->  content 1
    ---
    <!-- ===== Title N ===== -->  content N      (no rule after the last one)
"""

import datetime
from typing import List, Optional, Sequence

from .clock import local_date
from .labels import EN, Labels
from .model import DocumentRecord

RULE = "---"


def marker_comment(title: str) -> str:
    return f"<!-- ===== {title} ===== -->"


def build_header(
    title: str,
    version: str,
    generated_at: datetime.datetime,
    labels: Labels = EN,
    short_title: Optional[str] = None,
) -> str:
    date = local_date(generated_at, labels.date_format)
    lines = [
        f"# {title}",
        "## " + labels.version_line.format(version=version),
        "",
        "*" + labels.description.format(title=short_title or title, version=version) + "*",
        "",
        f"**{labels.generated}:** {date} {labels.generated_note}  ",
        "",
        RULE,
        "",
        "",
    ]
    return "\n".join(lines)


def assemble(header: str, toc: str, records: Sequence[DocumentRecord]) -> str:
    """Pure function of its arguments; record content is copied verbatim."""
    parts: List[str] = [header, toc, f"\n{RULE}\n\n"]
    last = len(records) - 1
    for i, record in enumerate(records):
        parts.append(f"\n\n{marker_comment(record.title)}\n\n")
        parts.append(record.content)
        if i < last:
            parts.append(f"\n\n{RULE}\n")
    return "".join(parts)
