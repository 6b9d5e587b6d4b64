"""Errors raised by GTFS query operations.

Handlers and repositories raise these; the HTTP layer maps them to status
codes in ``app.py``. Consolidation and GeoJSON formatting never raise.
"""


class GTFSQueryError(Exception):
    """Base class for all query errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GTFSQueryError):
    """A requested shape, agency or route has no matching data."""

    status_code = 404


class InputError(GTFSQueryError):
    """A filter combination the query layer cannot express."""

    status_code = 400
