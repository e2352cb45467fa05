from __future__ import annotations
# -*- coding: utf-8 -*-

"""
loader.py – Reads the ordered document list.

Every DocumentSpec yields exactly one DocumentRecord, in input order. A file
that is absent or unreadable becomes a placeholder record; nothing here raises
for a single bad document.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .labels import EN, Labels
from .model import (
    DocumentRecord,
    DocumentSpec,
    STATUS_MISSING,
    STATUS_OK,
    STATUS_READ_ERROR,
)
from .path_security import UnsafeDocumentPath, document_path
from .titles import extract_title, fallback_title

ENC = "utf-8"

logger = logging.getLogger(__name__)


def placeholder_content(identifier: str, marker: str) -> str:
    return f"# {identifier}\n\n*{marker}*\n"


def _placeholder(spec: DocumentSpec, path: Path, status: str, labels: Labels) -> DocumentRecord:
    marker = labels.not_found if status == STATUS_MISSING else labels.read_error
    return DocumentRecord(
        identifier=spec.identifier,
        path=path,
        content=placeholder_content(spec.identifier, marker),
        title=fallback_title(spec.identifier),
        status=status,
        section=spec.section,
    )


def read_text_exact(path: Path) -> str:
    """Read UTF-8 text without newline translation."""
    with path.open("r", encoding=ENC, newline="") as fh:
        return fh.read()


def load_document(spec: DocumentSpec, base_dir: Path, labels: Labels = EN) -> DocumentRecord:
    try:
        path = document_path(base_dir, spec.identifier)
    except UnsafeDocumentPath as e:
        logger.error(f"Rejected document path {spec.identifier}: {e}")
        return _placeholder(spec, base_dir / spec.identifier, STATUS_READ_ERROR, labels)

    try:
        content = read_text_exact(path)
    except FileNotFoundError:
        logger.warning(f"File not found: {spec.identifier}")
        return _placeholder(spec, path, STATUS_MISSING, labels)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {spec.identifier}: {e}")
        return _placeholder(spec, path, STATUS_READ_ERROR, labels)

    return DocumentRecord(
        identifier=spec.identifier,
        path=path,
        content=content,
        title=extract_title(content) or fallback_title(spec.identifier),
        status=STATUS_OK,
        section=spec.section,
    )


def load_all(
    specs: Iterable[DocumentSpec],
    base_dir: Path,
    labels: Labels = EN,
    on_loaded: Optional[Callable[[DocumentRecord], None]] = None,
) -> List[DocumentRecord]:
    """
    Load every document in order, one at a time.

    `on_loaded` is called after each record, e.g. to print progress.
    """
    records: List[DocumentRecord] = []
    for spec in specs:
        record = load_document(spec, base_dir, labels)
        records.append(record)
        if on_loaded is not None:
            on_loaded(record)
    return records
