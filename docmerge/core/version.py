from __future__ import annotations
# -*- coding: utf-8 -*-

"""
version.py – Version string for the merged document header.

The metadata lookup never raises: any problem falls back to DEFAULT_VERSION
with a warning, so a broken package.json cannot stop a merge.
"""

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import yaml

DEFAULT_VERSION = "0.0.0"
YAML_SUFFIXES = {".yml", ".yaml"}

logger = logging.getLogger(__name__)


class VersionSource(Protocol):
    def resolve(self) -> str:
        ...


def _parse_metadata(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def resolve_version(metadata_path: Path, default: str = DEFAULT_VERSION) -> str:
    """Read the `version` field of a JSON (package.json) or YAML metadata file."""
    try:
        data = _parse_metadata(metadata_path)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        logger.warning(f"Could not read version from {metadata_path} ({e}); using default {default}")
        return default

    version = data.get("version") if isinstance(data, dict) else None
    if version is None or str(version).strip() == "":
        logger.warning(f"No version field in {metadata_path}; using default {default}")
        return default
    return str(version).strip()


class MetadataVersion:
    def __init__(self, path: Path, default: str = DEFAULT_VERSION):
        self.path = path
        self.default = default

    def resolve(self) -> str:
        return resolve_version(self.path, self.default)

    def __repr__(self) -> str:
        return f"MetadataVersion({str(self.path)!r})"


class StaticVersion:
    def __init__(self, value: str):
        self.value = value

    def resolve(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"StaticVersion({self.value!r})"
