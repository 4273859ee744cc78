"""Request/response adapter used by the HTTP service and the batch CLI."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping

from .errors import ParseError
from .parser import convert

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

ARGUMENTS: List[Dict[str, object]] = [
    {
        "name": "prefix",
        "description": "Prefix of the series, will be separated with a '.' if given",
        "optional": True,
        "default": "",
    },
    {
        "name": "ignore_text",
        "description": (
            "If any value is provided, the text passages of the nmon report "
            "(e.g. AAA and BBBP sections) are not sent"
        ),
        "optional": True,
        "default": "",
    },
]


def describe() -> Dict[str, object]:
    return {
        "description": "Converts nmon reports into time series for a time-series database",
        "author": "nmon2series contributors",
        "version": VERSION,
        "arguments": [dict(argument) for argument in ARGUMENTS],
    }


def run(body: str, query: Mapping[str, str]) -> Dict[str, object]:
    """Convert ``body`` using the ``prefix`` and ``ignore_text`` options in ``query``."""
    prefix = query.get("prefix") or ""
    ignore_text = bool(query.get("ignore_text"))
    try:
        series = convert(body, prefix=prefix, ignore_text=ignore_text)
    except ParseError as exc:
        logger.warning("Rejected nmon report: %s", exc)
        return {"series": None, "error": str(exc)}
    return {"series": [item.as_dict() for item in series], "error": ""}
