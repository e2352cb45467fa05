from __future__ import annotations
# -*- coding: utf-8 -*-

"""
pipeline.py – The merge run: resolve version, load, build ToC, assemble, write.

The pipeline returns a MergeResult and prints nothing; rendering progress and
the summary is the caller's job (see report.py).
"""

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from . import clock
from .assemble import assemble, build_header
from .labels import EN, Labels
from .loader import load_all
from .model import DocumentRecord, DocumentSpec, MergeResult, MergeSummary
from .toc import build_toc
from .version import DEFAULT_VERSION, StaticVersion, VersionSource
from .writer import write_document


def specs_from_sections(sections: Iterable[Tuple[Optional[str], Sequence[str]]]) -> Tuple[DocumentSpec, ...]:
    """[("Part I", ["a.md", "b.md"]), ...] -> ordered DocumentSpecs."""
    return tuple(
        DocumentSpec(identifier=identifier, section=title)
        for title, identifiers in sections
        for identifier in identifiers
    )


@dataclass(frozen=True)
class MergeConfig:
    title: str
    base_dir: Path
    output_path: Path
    documents: Tuple[DocumentSpec, ...]
    version_source: VersionSource = field(default_factory=lambda: StaticVersion(DEFAULT_VERSION))
    labels: Labels = EN
    # Name used in running text (header sentence, console); defaults to title.
    short_title: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.short_title or self.title


def build_document(
    config: MergeConfig,
    on_loaded: Optional[Callable[[DocumentRecord], None]] = None,
    version: Optional[str] = None,
) -> MergeResult:
    """Everything up to, but not including, the write. `version` skips the version source."""
    if version is None:
        version = config.version_source.resolve()
    generated_at = clock.now_utc()

    records: List[DocumentRecord] = load_all(
        config.documents, config.base_dir, labels=config.labels, on_loaded=on_loaded
    )

    header = build_header(config.title, version, generated_at, config.labels, short_title=config.display_title)
    toc = build_toc(records, config.labels)
    content = assemble(header, toc, records)

    return MergeResult(
        version=version,
        generated_at=generated_at,
        records=records,
        toc=toc,
        content=content,
        summary=MergeSummary.from_records(records),
        output_path=config.output_path,
    )


def run_merge(
    config: MergeConfig,
    on_loaded: Optional[Callable[[DocumentRecord], None]] = None,
    version: Optional[str] = None,
) -> MergeResult:
    """Build and write the merged document. Raises MergeWriteError if the write fails."""
    result = build_document(config, on_loaded=on_loaded, version=version)
    written = write_document(config.output_path, result.content)
    return dataclasses.replace(result, written=written)
