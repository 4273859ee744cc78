"""The parsed form of one nmon capture."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List

from .emitter import emit_series
from .model import Section, Series


@dataclass
class Report:
    """Sections, snapshot times and text messages of a single nmon report.

    Built and normalized by :func:`nmon2series.parser.parse`; read-only after.
    """

    sections: Dict[str, Section] = field(default_factory=dict)
    snapshots: Dict[str, datetime] = field(default_factory=dict)
    messages: Dict[str, str] = field(default_factory=dict)
    hostname: str = ""

    def get_section(self, name: str) -> Section | None:
        return self.sections.get(name)

    def emit(self, prefix: str = "", suppress_text: bool = False) -> List[Series]:
        return emit_series(self, prefix, suppress_text)
