from __future__ import annotations
# -*- coding: utf-8 -*-

"""
presets.py – Built-in document orders for the AURA specification.

Adding a document means adding it here (or using a manifest file); nothing
is discovered from the filesystem. Paths are relative to the project root
passed to `get_preset`.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .labels import RU
from .pipeline import MergeConfig, specs_from_sections
from .version import MetadataVersion, StaticVersion

AURA_TITLE = "AURA: Адаптивная Унифицированная Резонансная Архитектура"
AURA_SHORT_TITLE = "AURA"

PART_I = ("Часть I: Теоретические Основы", [
    "00-foundations.md",
    "01-universal-principles.md",
    "02-consciousness-model.md",
])
PART_II = ("Часть II: Математическая Формализация", [
    "03-mathematical-framework.md",
    "04-category-theory.md",
    "05-quantum-formalism.md",
])
PART_III = ("Часть III: Проблемный Анализ", [
    "06-problem-space.md",
    "07-resilience-analysis.md",
    "08-safety-guarantees.md",
])
PART_IV = ("Часть IV: Спецификация Реализации", [
    "09-implementation-roadmap.md",
    "10-typescript-architecture.md",
    "11-rust-components.md",
    "12-integration.md",
])
PART_V = ("Часть V: Практическая Реализация", [
    "minimal-viable-aura.md",
    "pragmatic-tradeoffs.md",
    "failure-modes.md",
    "benchmarks-realistic.md",
])
APPENDICES = ("Приложения", [
    "A-glossary.md",
    "B-proofs.md",
    "C-benchmarks.md",
    "D-symbols.md",
    "boundary-analysis.md",
])

AURA_SECTIONS: List[Tuple[str, Sequence[str]]] = [PART_I, PART_II, PART_III, PART_IV, PART_V, APPENDICES]
V03_SECTIONS: List[Tuple[str, Sequence[str]]] = [PART_I, PART_II, PART_III, PART_IV, APPENDICES]

DEFAULT_PRESET = "aura"


def aura_preset(root: Path) -> MergeConfig:
    """Current docs: docs/aura/ru, version taken from package.json."""
    docs = root / "docs" / "aura" / "ru"
    return MergeConfig(
        title=AURA_TITLE,
        short_title=AURA_SHORT_TITLE,
        base_dir=docs,
        output_path=docs / "full.md",
        documents=specs_from_sections(AURA_SECTIONS),
        version_source=MetadataVersion(root / "package.json"),
        labels=RU,
    )


def v03_preset(root: Path) -> MergeConfig:
    """Frozen v0.3 spec directory, merged in place."""
    return MergeConfig(
        title=AURA_TITLE,
        short_title=AURA_SHORT_TITLE,
        base_dir=root,
        output_path=root / "full.md",
        documents=specs_from_sections(V03_SECTIONS),
        version_source=StaticVersion("0.3"),
        labels=RU,
    )


PRESETS: Dict[str, Callable[[Path], MergeConfig]] = {
    "aura": aura_preset,
    "v0.3": v03_preset,
}


def get_preset(name: Optional[str], root: Path) -> MergeConfig:
    key = name or DEFAULT_PRESET
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{key}'. Expected one of: {', '.join(sorted(PRESETS))}")
    return PRESETS[key](root)
