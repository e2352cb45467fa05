from __future__ import annotations
# -*- coding: utf-8 -*-

"""
slugs.py – Heading anchors for the table of contents.

Anchors follow the GitHub heading-id scheme so links resolve in common
renderers: lowercase, punctuation dropped, whitespace runs become one hyphen.
Unicode letters are kept (Cyrillic titles stay readable).
"""

import re
from typing import Dict, Set

_PUNCT = re.compile(r"[^\w\s-]", re.UNICODE)
_WS = re.compile(r"\s+", re.UNICODE)

EMPTY_SLUG = "section"


def slugify(title: str) -> str:
    s = title.strip().lower()
    s = _PUNCT.sub("", s)
    s = _WS.sub("-", s)
    return s or EMPTY_SLUG


class AnchorRegistry:
    """
    Hands out unique anchors within one document.

    The first occurrence of a slug is used as is; later ones get `-1`, `-2`, ...
    """

    def __init__(self) -> None:
        self._used: Set[str] = set()
        self._counts: Dict[str, int] = {}

    def anchor(self, title: str) -> str:
        base = slugify(title)
        candidate = base
        n = self._counts.get(base, 0)
        while candidate in self._used:
            n += 1
            candidate = f"{base}-{n}"
        self._counts[base] = n
        self._used.add(candidate)
        return candidate
