import re
from pathlib import PurePosixPath
from typing import Optional

# A single "#", blanks, then non-blank text on the same line.
# "## x", "#\nx" and a bare "#   " do not match.
_TITLE_RE = re.compile(r"^#[ \t]+(\S.*)$", re.MULTILINE)


def extract_title(content: str) -> Optional[str]:
    """
    Text of the first level-1 heading (`# Title`), trimmed.

    Only the first match counts; later headings of any level are ignored.
    """
    m = _TITLE_RE.search(content)
    if not m:
        return None
    title = m.group(1).strip()
    return title or None


def fallback_title(identifier: str) -> str:
    """`foo.md` -> `foo`. Directory components are kept."""
    p = PurePosixPath(identifier)
    if not p.name:
        return identifier
    return str(p.with_suffix(""))
