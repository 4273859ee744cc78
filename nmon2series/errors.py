"""Errors raised by the nmon converter."""


class ParseError(ValueError):
    """The input could not be read as an nmon report."""
