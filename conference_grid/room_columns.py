"""Assignment of a time slot's parallel rooms to the lettered grid columns.

Rooms carry no column index, so the column is inferred from the room's
name and identifier. Rules are tried in order for each column letter and
the first room satisfying the earliest rule takes the column:

1. the name is exactly "room <letter>"
2. the name contains "room <letter>"
3. the identifier contains "session <letter>" (optionally with a numeric
   session prefix, as in "Parallel Session 1A") or is the bare letter

All comparisons are case-insensitive. A column no room matches stays empty.
"""

import re

from .logging import get_logger
from .models import Room

log = get_logger(__name__)

DEFAULT_COLUMN_LABELS = ('A', 'B', 'C', 'D', 'E')


def _name(room: Room) -> str:
    return (room.name or '').lower().strip()


def _identifier(room: Room) -> str:
    return (room.identifier or '').lower().strip()


def _name_equals(room: Room, letter: str) -> bool:
    return _name(room) == f'room {letter}'


def _name_contains(room: Room, letter: str) -> bool:
    return f'room {letter}' in _name(room)


def _identifier_matches(room: Room, letter: str) -> bool:
    identifier = _identifier(room)
    if identifier == letter:
        return True
    return re.search(rf'session\s+\d*{re.escape(letter)}', identifier) is not None


MATCH_RULES = (_name_equals, _name_contains, _identifier_matches)


def resolve_room_for_column(letter: str, rooms: list[Room]) -> Room | None:
    """
    Find the room that occupies one parallel column.

    Args:
        letter: Column letter, e.g. "B"
        rooms: Rooms attached to one time slot

    Returns:
        The matching room, or None when the column is empty
    """
    letter = letter.lower()
    candidates = [room for room in rooms if room.type != 'MAIN']
    for rule in MATCH_RULES:
        for room in candidates:
            if rule(room, letter):
                return room
    return None


def resolve_room_columns(rooms: list[Room], labels=DEFAULT_COLUMN_LABELS) -> dict[str, Room | None]:
    """Strict name/identifier resolution for every column, in label order."""
    return {label: resolve_room_for_column(label, rooms) for label in labels}


def assign_room_columns(
    rooms: list[Room],
    labels=DEFAULT_COLUMN_LABELS,
    fallback: bool = True,
) -> dict[str, Room | None]:
    """
    Resolve columns, then place parallel rooms that matched no column.

    Each unmatched parallel room goes, in input order, into the next
    column still empty after strict resolution. Rooms left over once every
    column is taken do not appear in the grid.

    Args:
        rooms: Rooms attached to one time slot
        labels: Column letters, left to right
        fallback: Whether to place unmatched rooms at all

    Returns:
        Ordered mapping of column letter to room (or None)
    """
    columns = resolve_room_columns(rooms, labels)
    if not fallback:
        return columns

    placed = {room.id for room in columns.values() if room is not None}
    unmatched = [room for room in rooms if room.type == 'PARALLEL' and room.id not in placed]
    free = [label for label, room in columns.items() if room is None]

    for label, room in zip(free, unmatched):
        columns[label] = room

    if len(unmatched) > len(free):
        log.warning(
            "parallel_rooms_without_column",
            room_ids=[room.id for room in unmatched[len(free):]],
            column_count=len(labels),
        )
    return columns
