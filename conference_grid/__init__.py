"""Schedule grid building for conference dashboards."""

from .conferences import (
    find_conference_by_type,
    list_conference_dates,
    load_conference,
    map_user_role_to_conference,
    process_conference
)
from .errors import GridError, ScheduleDataError
from .grid import build_grid
from .models import (
    Author,
    ConferenceSchedule,
    DaySchedule,
    GridDay,
    GridRow,
    ProcessedConference,
    Room,
    ScheduleItem,
    TimeSlot,
    Track,
    TrackSession
)
from .room_columns import assign_room_columns, resolve_room_columns, resolve_room_for_column
from .schedule_utils import build_days, extract_moderator
from .track_sessions import parse_authors, session_duration

__all__ = [
    'Author',
    'ConferenceSchedule',
    'DaySchedule',
    'GridDay',
    'GridError',
    'GridRow',
    'ProcessedConference',
    'Room',
    'ScheduleDataError',
    'ScheduleItem',
    'TimeSlot',
    'Track',
    'TrackSession',
    'assign_room_columns',
    'build_days',
    'build_grid',
    'extract_moderator',
    'find_conference_by_type',
    'list_conference_dates',
    'load_conference',
    'map_user_role_to_conference',
    'parse_authors',
    'process_conference',
    'resolve_room_columns',
    'resolve_room_for_column',
    'session_duration'
]
