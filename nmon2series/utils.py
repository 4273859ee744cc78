"""Utility helpers used by the nmon converter."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

SNAPSHOT_FORMAT = "%H:%M:%S,%d-%b-%Y"


def parse_snapshot_time(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.strptime(value, SNAPSHOT_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=timezone.utc)


def as_float(value: Optional[str]) -> Optional[float]:
    """Parse a metric cell, returning ``None`` for blanks, junk and non-finite numbers."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def unix_millis(moment: datetime) -> int:
    return int(moment.timestamp()) * 1000


def earliest(moments: Iterable[datetime]) -> Optional[datetime]:
    return min(moments, default=None)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def remove_columns(cells: Sequence[str], *indices: int) -> List[str]:
    """Return a copy of ``cells`` without the given positions.

    Positions are removed highest first, so deleting one never shifts another
    position still waiting to be removed. Positions past the end of a short
    row are ignored.
    """
    out = list(cells)
    for index in sorted(set(indices), reverse=True):
        if 0 <= index < len(out):
            del out[index]
    return out
