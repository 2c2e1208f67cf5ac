"""Error hierarchy for the conference grid library.

Building days or grids from validated models never raises; these errors
cover the boundary where raw API payloads become models.
"""


class GridError(Exception):
    """Base exception for all conference grid errors."""

    pass


class ScheduleDataError(GridError, ValueError):
    """An API payload could not be turned into a conference schedule.

    Wraps the pydantic validation error so callers can catch one type
    without importing pydantic.
    """

    pass
