"""Turn a normalized report into named time series."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from .model import Section, Series
from .utils import as_float, earliest, now_utc, unix_millis

if TYPE_CHECKING:
    from .report import Report

logger = logging.getLogger(__name__)

MESSAGES_SEGMENT = "MESSAGES"


def series_prefix(prefix: str, hostname: str) -> str:
    if not prefix:
        return hostname
    return f"{prefix}.{hostname}"


def _section_series(report: Report, prefix: str, name: str, section: Section) -> List[Series]:
    results: List[Series] = []
    seen = set()
    for idx, field in enumerate(section.header):
        if idx == 0:
            continue
        if field in seen:
            logger.warning("Section %s repeats column %r, keeping the first one", name, field)
            continue
        seen.add(field)
        series = Series(name=".".join([prefix, name, field]))
        for row in section.rows:
            moment = report.snapshots.get(row[0]) if row else None
            if moment is None or idx >= len(row):
                continue
            value = as_float(row[idx])
            if value is None:
                continue
            series.points.append([unix_millis(moment), value])
        if not series.is_empty():
            results.append(series)
    return results


def _message_series(report: Report, prefix: str) -> List[Series]:
    moment = earliest(report.snapshots.values()) or now_utc()
    timestamp = unix_millis(moment)
    return [
        Series(name=".".join([prefix, MESSAGES_SEGMENT, name]), points=[[timestamp, text]])
        for name, text in sorted(report.messages.items())
    ]


def emit_series(report: Report, prefix: str = "", suppress_text: bool = False) -> List[Series]:
    full_prefix = series_prefix(prefix, report.hostname)
    series: List[Series] = []
    for name in sorted(report.sections):
        series.extend(_section_series(report, full_prefix, name, report.sections[name]))
    if not suppress_text:
        series.extend(_message_series(report, full_prefix))
    return series
