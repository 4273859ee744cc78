"""nmon report parser."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .errors import ParseError
from .model import Section, Series
from .normalize import collect_messages, extract_hostname, resolve_snapshots, split_top
from .report import Report

logger = logging.getLogger(__name__)

# Sections whose rows are "key,value" text rather than metric tables.
# name -> (maximum number of cells, fixed header)
_FIXED_SECTIONS: Dict[str, Tuple[int, List[str]]] = {
    "AAA": (2, ["key", "value"]),
    "ZZZZ": (2, ["snapshot", "time"]),
    "BBBP": (3, ["line", "source", "value"]),
}

# Order matters: the hostname is read from AAA before collect_messages
# consumes it, and snapshots must be resolved before anything is emitted.
PIPELINE: Tuple[Callable[[Report], None], ...] = (
    extract_hostname,
    resolve_snapshots,
    split_top,
    collect_messages,
)


def sanitize(text: str) -> str:
    return text.replace("%", "Percent")


def read_line(line: str) -> Optional[Tuple[str, List[str]]]:
    line = line.rstrip("\r")
    if "," not in line:
        return None
    name, rest = line.split(",", 1)
    fixed = _FIXED_SECTIONS.get(name)
    if fixed is None:
        return name, rest.split(",")
    max_cells, _ = fixed
    return name, rest.split(",", max_cells - 1)


class NmonParser:
    """Groups the lines of an nmon report into sections."""

    def __init__(self) -> None:
        self.sections: Dict[str, Section] = {}

    def feed_line(self, line: str) -> None:
        parsed = read_line(line)
        if parsed is None:
            return
        name, cells = parsed
        section = self.sections.get(name)
        if section is not None:
            section.rows.append(cells)
            return
        fixed = _FIXED_SECTIONS.get(name)
        if fixed is None:
            # first line of a metric table names its columns
            self.sections[name] = Section(header=cells)
        else:
            self.sections[name] = Section(header=list(fixed[1]), rows=[cells])

    def to_report(self) -> Report:
        if not self.sections:
            raise ParseError("no valid data")
        report = Report(sections=self.sections)
        self.sections = {}
        for stage in PIPELINE:
            stage(report)
        return report


def parse(text: str) -> Report:
    parser = NmonParser()
    for line in sanitize(text).split("\n"):
        parser.feed_line(line)
    report = parser.to_report()
    logger.info(
        "Parsed nmon report for host %r: %d sections, %d snapshots, %d messages",
        report.hostname,
        len(report.sections),
        len(report.snapshots),
        len(report.messages),
    )
    return report


def convert(text: str, prefix: str = "", ignore_text: bool = False) -> List[Series]:
    return parse(text).emit(prefix, ignore_text)
