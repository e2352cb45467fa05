from __future__ import annotations
# -*- coding: utf-8 -*-

"""
toc.py – Table of contents for the merged document.

Sections come from the label carried by each record, in first-seen order.
Entry numbers run across all sections and are never reset.
"""

from typing import Dict, List, Optional, Sequence

from .labels import EN, Labels
from .model import DocumentRecord, Section
from .slugs import AnchorRegistry

FOUND_GLYPH = "✅"
MISSING_GLYPH = "❌"


def group_sections(records: Sequence[DocumentRecord]) -> List[Section]:
    """Group records by section label; records without a label share one untitled group."""
    sections: List[Section] = []
    by_title: Dict[Optional[str], Section] = {}
    for record in records:
        section = by_title.get(record.section)
        if section is None:
            section = Section(title=record.section)
            by_title[record.section] = section
            sections.append(section)
        section.records.append(record)
    return sections


def toc_entry(number: int, record: DocumentRecord, anchor: str) -> str:
    status = FOUND_GLYPH if record.found else MISSING_GLYPH
    return f"{number}. {status} [{record.title}](#{anchor})"


def build_toc(records: Sequence[DocumentRecord], labels: Labels = EN) -> str:
    lines: List[str] = [f"# {labels.contents}", ""]
    anchors = AnchorRegistry()
    number = 1
    for section in group_sections(records):
        if section.title:
            lines.append(f"## {section.title}")
            lines.append("")
        for record in section.records:
            lines.append(toc_entry(number, record, anchors.anchor(record.title)))
            number += 1
        lines.append("")
    return "\n".join(lines) + "\n"
