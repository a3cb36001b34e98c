"""Exceptions raised by the reporting core."""

from __future__ import annotations


class ReportInputError(ValueError):
    """A report was requested with an invalid range or period selector."""


class SettingValueError(ValueError):
    """A preference value is unparsable or outside its allowed range."""
