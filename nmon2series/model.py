"""Data models used across the nmon converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

PointValue = Union[float, str]


@dataclass
class Section:
    """A named table of an nmon report: one header row and the rows below it."""

    header: List[str]
    rows: List[List[str]] = field(default_factory=list)

    def column_index(self, name: str) -> int:
        """Return the single position of ``name`` in the header.

        Raises ``LookupError`` when the column is absent or ambiguous.
        """
        positions = [idx for idx, column in enumerate(self.header) if column == name]
        if len(positions) != 1:
            raise LookupError(f"{name!r} found {len(positions)} times in header")
        return positions[0]


@dataclass
class Series:
    """A named time series ready to be written to a time-series store."""

    name: str
    points: List[List[PointValue]] = field(default_factory=list)
    columns: List[str] = field(default_factory=lambda: ["time", "value"])

    def as_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "columns": list(self.columns),
            "points": [list(point) for point in self.points],
        }

    def is_empty(self) -> bool:
        return not self.points
