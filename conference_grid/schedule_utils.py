"""Functions for turning a conference schedule into per-day schedule items."""

import re
from datetime import date

from .logging import get_logger
from .models import ConferenceSchedule, DaySchedule, Room, ScheduleItem, TimeSlot

log = get_logger(__name__)

MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)

# "Moderator: <name>" up to the first comma, newline or period. Periods that
# close a leading honorific ("Dr.", "Prof.") belong to the name.
MODERATOR_PATTERN = re.compile(
    r'moderator:\s*('
    r'(?:\b(?:Assoc|Prof|Drs|Mrs|Dr|Ir|Mr|Ms)\.\s*|[^,\n.])+'
    r')',
    re.IGNORECASE,
)

ISO_DATE = re.compile(r'\d{4}-\d{2}-\d{2}')


def _calendar_date(text: str) -> date | None:
    if not ISO_DATE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def date_key(raw_date: str) -> str:
    """
    Reduce a stored ISO 8601 date value to its ``YYYY-MM-DD`` component.

    The leading calendar date is taken as written; no timezone conversion
    happens. Values that do not start with a valid YYYY-MM-DD date (ISO
    basic or week dates included) fall back to their first 10 characters.

    Args:
        raw_date: Date value as sent by the API, e.g. "2025-11-23T00:00:00.000Z"

    Returns:
        The grouping key for the date
    """
    day = _calendar_date(raw_date[:10])
    if day is not None:
        return day.isoformat()
    log.warning("malformed_schedule_date", raw_date=raw_date)
    return raw_date[:10]


def generate_day_title(key: str, day_number: int) -> str:
    """Title such as "Day 1: 23 November", anchored to the UTC calendar date."""
    day = _calendar_date(key)
    if day is None:
        return f'Day {day_number}: {key}'
    return f'Day {day_number}: {day.day} {MONTH_NAMES[day.month - 1]}'


def format_time(value: str) -> str:
    # "09:00:00" -> "09:00"
    return value[:5]


def create_time_display(start_time: str | None, end_time: str | None) -> str:
    if not start_time and not end_time:
        return ''
    if not start_time:
        return f'Until {format_time(end_time)}'
    if not end_time:
        return f'From {format_time(start_time)}'
    return f'{format_time(start_time)} - {format_time(end_time)}'


def extract_moderator(description: str | None) -> str | None:
    """
    Pull a moderator name out of a free-text room description.

    Args:
        description: Room description, e.g. "Moderator: Dr. Jane Doe, Track Chair"

    Returns:
        The trimmed name ("Dr. Jane Doe"), or None when there is no moderator
    """
    if not description:
        return None
    match = MODERATOR_PATTERN.search(description)
    if not match:
        return None
    return match.group(1).strip() or None


def slot_title_from_type(slot_type: str, notes: str | None) -> str:
    """Title for a time slot that has no rooms attached."""
    lower_notes = (notes or '').lower()
    if slot_type == 'BREAK':
        return 'Coffee Break' if 'coffee' in lower_notes else 'Break'
    if slot_type == 'ONE_DAY_ACTIVITY':
        return 'One Day Tour' if 'tour' in lower_notes else 'Activity'
    if slot_type == 'TALK':
        return 'Conference Session'
    return 'Schedule Item'


def room_location(room: Room) -> str:
    if room.online_meeting_url:
        return room.online_meeting_url
    return 'Main Room' if room.type == 'MAIN' else room.name


def build_room_item(slot: TimeSlot, room: Room, key: str) -> ScheduleItem:
    """
    Combine a time slot with one of its rooms.

    Room times override the slot's times when present.

    Args:
        slot: The owning time slot
        room: One of the slot's rooms
        key: The slot's date key

    Returns:
        The schedule item with id "{slot id}-{room id}"
    """
    start_time = room.start_time or slot.start_time
    end_time = room.end_time or slot.end_time
    return ScheduleItem(
        id=f'{slot.id}-{room.id}',
        title=room.description or room.name or 'Schedule Item',
        description=slot.notes,
        speaker=room.track.name if room.track else None,
        location=room_location(room),
        date=key,
        start_time=start_time,
        end_time=end_time,
        time_display=create_time_display(start_time, end_time),
        type=slot.type,
        track=room.track,
        moderator=extract_moderator(room.description),
        room_name=room.name,
        room_identifier=room.identifier,
        room_type=room.type,
        online_url=room.online_meeting_url,
    )


def build_slot_item(slot: TimeSlot, key: str) -> ScheduleItem:
    """Synthetic item standing in for a time slot without rooms."""
    return ScheduleItem(
        id=slot.id,
        title=slot_title_from_type(slot.type, slot.notes),
        description=slot.notes,
        location='All Areas',
        date=key,
        start_time=slot.start_time,
        end_time=slot.end_time,
        time_display=create_time_display(slot.start_time, slot.end_time),
        type=slot.type,
    )


def expand_time_slot(slot: TimeSlot, key: str) -> list[ScheduleItem]:
    if slot.rooms:
        return [build_room_item(slot, room, key) for room in slot.rooms]
    return [build_slot_item(slot, key)]


def sort_by_start_time(entries: list) -> list:
    """Stable sort of items or grid rows by start time; entries without one go last."""
    return sorted(
        entries,
        key=lambda e: (not e.start_time, format_time(e.start_time or '')),
    )


def group_slots_by_date(slots: list[TimeSlot]) -> dict[str, list[TimeSlot]]:
    """
    Group time slots by date key, in ascending date order.

    Args:
        slots: Time slots of one conference

    Returns:
        Ordered mapping of "YYYY-MM-DD" to the slots on that date, in input order
    """
    grouped: dict[str, list[TimeSlot]] = {}
    for slot in slots:
        grouped.setdefault(date_key(slot.date), []).append(slot)
    return {key: grouped[key] for key in sorted(grouped)}


def build_days(conference: ConferenceSchedule) -> list[DaySchedule]:
    """
    Build the per-day view of a conference schedule.

    Algorithm:
    1. Group time slots by their date key, in ascending date order
    2. Number the days from 1 in that order and title them
    3. Expand each time slot into one item per room (or one synthetic item)
    4. Sort each day's items by start time, missing start times last

    Days are numbered from the dates that actually have time slots, not
    from the conference's start/end range.

    Args:
        conference: Conference with its time slots and rooms populated

    Returns:
        Day schedules in date order
    """
    if not conference.schedules:
        return []

    days = []
    for index, (key, slots) in enumerate(group_slots_by_date(conference.schedules).items()):
        items = [item for slot in slots for item in expand_time_slot(slot, key)]
        days.append(DaySchedule(
            date=key,
            day_number=index + 1,
            day_title=generate_day_title(key, index + 1),
            items=sort_by_start_time(items),
        ))

    log.debug(
        "days_built",
        conference_id=conference.id,
        slot_count=len(conference.schedules),
        day_count=len(days),
        item_count=sum(len(day.items) for day in days),
    )
    return days
