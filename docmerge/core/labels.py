from __future__ import annotations
# -*- coding: utf-8 -*-

"""
labels.py – Fixed wording of the generated parts of a merged document.

The label set only chooses the language; layout is identical for all sets.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Labels:
    contents: str
    version_line: str
    description: str
    generated: str
    generated_note: str
    not_found: str
    read_error: str
    date_format: str
    # console report
    start: str
    reading: str
    written: str
    file_size: str
    characters: str
    statistics: str
    stat_found: str
    stat_missing: str
    stat_read_errors: str
    thousands_sep: str


EN = Labels(
    contents="Contents",
    version_line="Version {version} - Full Specification",
    description=(
        "This document merges all {title} v{version} documentation files "
        "into a single document in the configured reading order"
    ),
    generated="Generated",
    generated_note="(generated automatically)",
    not_found="File not found",
    read_error="File read error",
    date_format="%Y-%m-%d",
    start="Merging documentation {title} v{version}...",
    reading="Reading {identifier}...",
    written="Document written: {path}",
    file_size="File size: {mb:.2f} MB",
    characters="Characters: {chars}",
    statistics="Statistics:",
    stat_found="Found: {found}/{total} files",
    stat_missing="Missing: {count} files",
    stat_read_errors="Read errors: {count} files",
    thousands_sep=",",
)

RU = Labels(
    contents="Содержание",
    version_line="Версия {version} - Полная Спецификация",
    description=(
        "Этот документ объединяет все файлы спецификации {title} v{version} "
        "в единый документ согласно порядку, указанному в README.md"
    ),
    generated="Дата создания",
    generated_note="(автоматически сгенерировано)",
    not_found="Файл не найден",
    read_error="Ошибка чтения файла",
    date_format="%d.%m.%Y",
    start="Начинаю объединение документации {title} v{version}...",
    reading="Читаю {identifier}...",
    written="Документ успешно создан: {path}",
    file_size="Размер файла: {mb:.2f} MB",
    characters="Количество символов: {chars}",
    statistics="Статистика:",
    stat_found="Успешно: {found}/{total} файлов",
    stat_missing="Отсутствует: {count} файлов",
    stat_read_errors="Ошибка чтения: {count} файлов",
    thousands_sep="\u00a0",
)

LABEL_SETS: Dict[str, Labels] = {"en": EN, "ru": RU}
DEFAULT_LANG = "en"


def get_labels(lang: str) -> Labels:
    try:
        return LABEL_SETS[lang.lower()]
    except KeyError:
        raise ValueError(f"Unknown label set '{lang}'. Expected one of: {', '.join(sorted(LABEL_SETS))}")
