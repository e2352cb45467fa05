"""
Document identifiers are paths relative to the merge's base directory. A
manifest is user input, so an identifier may not name anything outside it.
"""
from pathlib import Path, PurePosixPath, PureWindowsPath


class UnsafeDocumentPath(ValueError):
    """Identifier would read a file outside the base directory."""


def _check_identifier(identifier: str) -> None:
    if not identifier or not identifier.strip():
        raise UnsafeDocumentPath("empty document identifier")
    if "\0" in identifier:
        raise UnsafeDocumentPath(f"null byte in {identifier!r}")
    for flavour in (PurePosixPath, PureWindowsPath):
        pure = flavour(identifier)
        if pure.is_absolute() or pure.anchor:
            raise UnsafeDocumentPath(f"absolute identifier {identifier!r}")
        if ".." in pure.parts:
            raise UnsafeDocumentPath(f"parent reference in {identifier!r}")


def document_path(base_dir: Path, identifier: str) -> Path:
    """
    Absolute path of `identifier` under `base_dir`.

    The check runs on the identifier text first and again after symlinks are
    followed, so a link pointing out of `base_dir` is refused as well.
    """
    _check_identifier(identifier)
    base = base_dir.resolve()
    target = (base / identifier).resolve()
    if target != base and base not in target.parents:
        raise UnsafeDocumentPath(f"{identifier!r} resolves outside {base}")
    return target
