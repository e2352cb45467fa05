# -*- coding: utf-8 -*-

"""
manifest.py – Loads a merge configuration from a YAML manifest.

Example:

    kind: docmerge.manifest
    version: 1
    title: "AURA: Adaptive Unified Resonance Architecture"
    short_title: AURA      # used in running text, defaults to title
    lang: en
    base_dir: docs          # relative to the manifest file, default "."
    output: docs/full.md
    version_source:
      metadata: package.json   # or: static: "0.3"
    sections:
      - title: Part I
        documents: [00-foundations.md, 01-universal-principles.md]
      - title: Appendices
        documents: [A-glossary.md]
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
import yaml

from docmerge.core.labels import DEFAULT_LANG, get_labels
from docmerge.core.pipeline import MergeConfig, specs_from_sections
from docmerge.core.version import DEFAULT_VERSION, MetadataVersion, StaticVersion, VersionSource

SCHEMA_PATH = Path(__file__).parents[1] / "contracts" / "docmerge-manifest.v1.schema.json"

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    pass


def load_schema() -> Dict[str, Any]:
    try:
        return json.loads(SCHEMA_PATH.read_text("utf-8"))
    except (OSError, ValueError) as e:
        raise ManifestError(f"Failed to load manifest schema {SCHEMA_PATH}: {e}") from e


def _read_manifest(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in manifest {path}: {e}") from e

    try:
        jsonschema.validate(instance=data, schema=load_schema())
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ManifestError(f"Manifest {path} violates schema at {where}: {e.message}") from e
    return data


def _version_source(spec: Dict[str, str], root: Path) -> VersionSource:
    if "static" in spec:
        return StaticVersion(spec["static"])
    if "metadata" in spec:
        return MetadataVersion(root / spec["metadata"])
    return StaticVersion(DEFAULT_VERSION)


def load_manifest(path: Path) -> MergeConfig:
    """Parse and validate a manifest. Raises ManifestError on any problem."""
    data = _read_manifest(path)
    root = path.parent

    sections = [(s.get("title"), s["documents"]) for s in data["sections"]]
    config = MergeConfig(
        title=data["title"],
        short_title=data.get("short_title"),
        base_dir=root / data.get("base_dir", "."),
        output_path=root / data["output"],
        documents=specs_from_sections(sections),
        version_source=_version_source(data.get("version_source", {}), root),
        labels=get_labels(data.get("lang", DEFAULT_LANG)),
    )

    seen = set()
    for spec in config.documents:
        if spec.identifier in seen:
            logger.warning(f"Document listed more than once in {path.name}: {spec.identifier}")
        seen.add(spec.identifier)

    return config
