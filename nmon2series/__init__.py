"""Core package for the nmon to time series converter."""

from .errors import ParseError
from .parser import NmonParser, convert, parse
from .plugin import describe, run
from .report import Report
from .model import (
    Section,
    Series,
)

__all__ = [
    "ParseError",
    "NmonParser",
    "convert",
    "parse",
    "describe",
    "run",
    "Report",
    "Section",
    "Series",
]
