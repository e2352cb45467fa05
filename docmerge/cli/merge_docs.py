#!/usr/bin/env python3
"""
docmerge – merge an ordered list of Markdown documents into one file.

Usage:
    docmerge                          # preset "aura" relative to the current directory
    docmerge --preset v0.3 --root docs/v0.3
    docmerge --manifest docs/merge.yml

Exit codes:
    0  merged document written (missing inputs are only reported)
    1  writing failed or an unexpected error occurred
    2  invalid preset or manifest, or --root combined with --manifest

The output wording (headings, placeholders, console lines) follows the preset
or the manifest's `lang`; no flag changes the document format.
"""
import sys
import logging
import argparse
import dataclasses
from pathlib import Path
from typing import List, Optional

from docmerge.adapters.manifest import load_manifest
from docmerge.core.pipeline import MergeConfig, run_merge
from docmerge.core.presets import DEFAULT_PRESET, PRESETS, get_preset
from docmerge.core.report import format_progress, format_start, format_summary

LOG_FORMAT = "[docmerge] %(levelname)s: %(message)s"


def _emit(lines: List[str]) -> None:
    for line in lines:
        print(line)


def parse_args(argv):
    ap = argparse.ArgumentParser(prog="docmerge", description="Merge ordered Markdown documents into one file")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--preset", choices=sorted(PRESETS), help=f"Built-in document order (default: {DEFAULT_PRESET})")
    src.add_argument("--manifest", "-m", help="YAML manifest with title, sections and output")
    ap.add_argument("--root", "-r", help="Project root for presets (default: current directory)")
    ap.add_argument("--base-dir", help="Override the directory holding the documents")
    ap.add_argument("--output", "-o", help="Override the output file")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return ap.parse_args(argv)


def build_config(args) -> MergeConfig:
    """Raises ValueError (ManifestError included) for unusable configuration."""
    if args.manifest:
        if args.root:
            raise ValueError("--root only applies to presets; manifest paths are relative to the manifest file")
        config = load_manifest(Path(args.manifest).expanduser())
    else:
        root = Path(args.root).expanduser() if args.root else Path.cwd()
        config = get_preset(args.preset, root)

    overrides = {}
    if args.base_dir:
        overrides["base_dir"] = Path(args.base_dir).expanduser()
    if args.output:
        overrides["output_path"] = Path(args.output).expanduser()
    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    try:
        version = config.version_source.resolve()
        _emit(format_start(config.display_title, version, config.labels))
        result = run_merge(config, on_loaded=lambda record: _emit(format_progress(record, config.labels)), version=version)
    except Exception as e:
        print(f"❌ Critical error: {e}", file=sys.stderr)
        return 1

    _emit(format_summary(result, config.labels))
    return 0


if __name__ == "__main__":
    sys.exit(main())
