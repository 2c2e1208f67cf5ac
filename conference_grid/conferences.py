"""Conference-level helpers: loading payloads, conference lookup and date listings."""

from datetime import date, timedelta

import pydantic

from .errors import ScheduleDataError
from .logging import get_logger
from .models import ConferenceSchedule, ProcessedConference
from .schedule_utils import build_days, date_key

log = get_logger(__name__)


def load_conference(payload: dict) -> ConferenceSchedule:
    """
    Validate a conference schedule payload from the API.

    Args:
        payload: Decoded JSON of one conference schedule with nested schedules

    Returns:
        The validated conference

    Raises:
        ScheduleDataError: If the payload does not describe a conference schedule
    """
    try:
        return ConferenceSchedule.model_validate(payload)
    except pydantic.ValidationError as exc:
        log.error("invalid_conference_payload", error_count=exc.error_count())
        raise ScheduleDataError(f'invalid conference schedule payload: {exc}') from exc


def process_conference(conference: ConferenceSchedule) -> ProcessedConference:
    """Conference metadata with date-only start/end and the per-day schedule."""
    return ProcessedConference(
        id=conference.id,
        name=conference.name,
        description=conference.description,
        year=conference.year,
        start_date=date_key(conference.start_date),
        end_date=date_key(conference.end_date),
        type=conference.type,
        contact_email=conference.contact_email,
        timezone=conference.timezone_iana,
        onsite_location=conference.onsite_presentation,
        online_location=conference.online_presentation,
        notes=conference.notes,
        no_show_policy=conference.no_show_policy,
        days=build_days(conference),
    )


def list_conference_dates(start_date: str, end_date: str) -> list[str]:
    """
    Every calendar date from start to end, inclusive.

    This is the date-range day listing, independent of which dates have
    time slots. Its numbering does not line up with build_days() when the
    conference has days without slots; use one or the other per view.

    Args:
        start_date: Conference start (ISO 8601)
        end_date: Conference end (ISO 8601)

    Returns:
        "YYYY-MM-DD" strings, empty if either date is unusable or end < start
    """
    try:
        start = date.fromisoformat(date_key(start_date))
        end = date.fromisoformat(date_key(end_date))
    except ValueError:
        log.warning("unusable_conference_range", start_date=start_date, end_date=end_date)
        return []

    return [(start + timedelta(days=offset)).isoformat() for offset in range((end - start).days + 1)]


def map_user_role_to_conference(role: str | None) -> str:
    """Conference an admin role belongs to; anything unrecognised maps to ICICYTA."""
    if role and 'ICODSA' in role.upper():
        return 'ICODSA'
    return 'ICICYTA'


def find_conference_by_type(
    conferences: list[ConferenceSchedule],
    conference_type: str | None = None,
) -> ConferenceSchedule | None:
    """
    Pick the conference of a given type.

    Without a type, the first ICICYTA conference is returned, falling back
    to the first conference at all. A type containing "ICODSA" selects
    ICODSA; any other type selects ICICYTA.

    Args:
        conferences: Conferences to search
        conference_type: Free-form type, e.g. "icodsa" or "ADMIN_ICODSA"

    Returns:
        The matching conference, or None
    """
    if not conference_type:
        default = next((c for c in conferences if c.type == 'ICICYTA'), None)
        return default or (conferences[0] if conferences else None)

    target = 'ICODSA' if 'ICODSA' in conference_type.upper() else 'ICICYTA'
    return next((c for c in conferences if c.type == target), None)
