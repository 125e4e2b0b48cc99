from __future__ import annotations


class AideReportError(Exception):
    """Base class for failures raised while building a report."""


class SearchError(AideReportError):
    """The search backend could not be queried or its response read."""


class DecodeError(AideReportError):
    """A search response did not have the expected aggregation shape."""


class ReportError(AideReportError):
    """The spreadsheet could not be created, written or saved."""
