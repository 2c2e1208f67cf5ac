"""Grid view of a conference: time slots as rows, main room plus parallel rooms as columns."""

from .config import get_config
from .logging import get_logger
from .models import ConferenceSchedule, GridDay, GridRow, TimeSlot
from .room_columns import assign_room_columns
from .schedule_utils import (
    build_room_item,
    create_time_display,
    generate_day_title,
    group_slots_by_date,
    slot_title_from_type,
    sort_by_start_time,
)

log = get_logger(__name__)


def build_grid_row(slot: TimeSlot, key: str, labels: list[str], fallback: bool) -> GridRow:
    """
    Lay out one time slot across the grid.

    A BREAK slot spans every room column and shows a single title, whatever
    rooms are attached to it.

    Args:
        slot: The time slot
        key: The slot's date key
        labels: Parallel column letters
        fallback: Whether unmatched parallel rooms are placed into free columns

    Returns:
        The grid row
    """
    row = GridRow(
        slot_id=slot.id,
        start_time=slot.start_time,
        end_time=slot.end_time,
        time_display=create_time_display(slot.start_time, slot.end_time),
        type=slot.type,
    )
    if slot.type == 'BREAK':
        row.spanning = True
        row.span_title = slot_title_from_type(slot.type, slot.notes)
        row.columns = {label: None for label in labels}
        return row

    main_room = next((room for room in slot.rooms if room.type == 'MAIN'), None)
    if main_room is not None:
        row.main = build_room_item(slot, main_room, key)

    columns = assign_room_columns(slot.rooms, labels, fallback=fallback)
    row.columns = {
        label: build_room_item(slot, room, key) if room is not None else None
        for label, room in columns.items()
    }
    return row


def build_grid(conference: ConferenceSchedule, labels: list[str] | None = None) -> list[GridDay]:
    """
    Build the grid view of a conference, one GridDay per observed date.

    Day grouping, numbering and titles match build_days(). Rows are ordered
    by the slot's start time, slots without one last.

    Args:
        conference: Conference with its time slots and rooms populated
        labels: Parallel column letters; defaults to the configured labels

    Returns:
        Grid days in date order
    """
    config = get_config()
    if labels is None:
        labels = list(config.room_column_labels)

    grid = []
    for index, (key, slots) in enumerate(group_slots_by_date(conference.schedules).items()):
        rows = [build_grid_row(slot, key, labels, config.room_column_fallback) for slot in slots]
        grid.append(GridDay(
            date=key,
            day_number=index + 1,
            day_title=generate_day_title(key, index + 1),
            column_labels=labels,
            rows=sort_by_start_time(rows),
        ))

    log.debug("grid_built", conference_id=conference.id, day_count=len(grid))
    return grid
