"""
Generation time of a merged document.

The header shows the local calendar date of the run. Runs read the time
through `now_utc()` so that `pinned()` can fix it, which makes repeated
merges over unchanged inputs byte-identical.
"""
import datetime
import contextlib
from typing import Iterator, Optional
from contextvars import ContextVar

_pinned: ContextVar[Optional[datetime.datetime]] = ContextVar("docmerge_pinned_time", default=None)


def now_utc() -> datetime.datetime:
    pinned_dt = _pinned.get()
    if pinned_dt is not None:
        return pinned_dt
    return datetime.datetime.now(datetime.timezone.utc)


@contextlib.contextmanager
def pinned(dt: datetime.datetime) -> Iterator[datetime.datetime]:
    """Pin `now_utc()` to `dt` inside the block. `dt` must be timezone-aware."""
    if dt.tzinfo is None:
        raise ValueError("Pinned time must be timezone-aware")
    token = _pinned.set(dt.astimezone(datetime.timezone.utc))
    try:
        yield _pinned.get()
    finally:
        _pinned.reset(token)


def local_date(dt: datetime.datetime, fmt: str) -> str:
    """Calendar date of `dt` in the machine's local timezone."""
    return dt.astimezone().strftime(fmt)
