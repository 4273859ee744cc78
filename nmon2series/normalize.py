"""Normalization stages applied to a freshly built report.

Each stage mutates the report in place. The order they run in is fixed by
``PIPELINE`` in :mod:`nmon2series.parser`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import ParseError
from .model import Section
from .utils import parse_snapshot_time, remove_columns

if TYPE_CHECKING:
    from .report import Report

logger = logging.getLogger(__name__)

TOP_PLACEHOLDER = "PercentCPU Utilisation"
TOP_PID_COLUMN = "+PID"
TOP_COMMAND_COLUMN = "Command"


def extract_hostname(report: Report) -> None:
    aaa = report.get_section("AAA")
    if aaa is None:
        return
    for row in aaa.rows:
        if len(row) > 1 and row[0] == "host":
            report.hostname = row[1]


def resolve_snapshots(report: Report) -> None:
    zzzz = report.sections.pop("ZZZZ", None)
    if zzzz is None:
        return
    for row in zzzz.rows:
        if len(row) < 2:
            continue
        moment = parse_snapshot_time(row[1])
        if moment is None:
            logger.debug("Skipping snapshot %s with unreadable time %r", row[0], row[1])
            continue
        report.snapshots[row[0]] = moment


def _repair_top_header(top: Section) -> None:
    # nmon writes a "%CPU Utilisation" title line before the real column names
    if top.header and top.header[0] == TOP_PLACEHOLDER and top.rows:
        top.header = top.rows[0]
        top.rows = top.rows[1:]


def split_top(report: Report) -> None:
    top = report.sections.pop("TOP", None)
    if top is None:
        return
    _repair_top_header(top)
    if not top.rows:
        return
    try:
        pid_idx = top.column_index(TOP_PID_COLUMN)
        command_idx = top.column_index(TOP_COMMAND_COLUMN)
    except LookupError as exc:
        raise ParseError(f"malformed TOP header: {exc}") from exc

    header = remove_columns(top.header, pid_idx, command_idx)
    for row in top.rows:
        if command_idx >= len(row):
            logger.debug("Skipping TOP row without a command: %r", row)
            continue
        name = f"TOP.{row[command_idx]}"
        section = report.sections.get(name)
        if section is None:
            section = Section(header=list(header))
            report.sections[name] = section
        section.rows.append(remove_columns(row, pid_idx, command_idx))


def collect_messages(report: Report) -> None:
    aaa = report.sections.pop("AAA", None)
    if aaa is not None:
        text = "".join(": ".join(row) + "\n" for row in aaa.rows)
        report.messages["AAA"] = report.messages.get("AAA", "") + text

    bbbp = report.sections.pop("BBBP", None)
    if bbbp is not None:
        for row in bbbp.rows:
            if len(row) < 3:
                logger.debug("Skipping short BBBP row: %r", row)
                continue
            key = f"BBBP_{row[1]}"
            report.messages[key] = report.messages.get(key, "") + row[2] + "\n"
