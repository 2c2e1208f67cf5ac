"""Pydantic models for conference schedule data and the views built from it."""

from datetime import time
from typing import Literal

import pydantic

SlotType = Literal["TALK", "BREAK", "ONE_DAY_ACTIVITY", "PANEL", "REPORTING"]
RoomType = Literal["MAIN", "PARALLEL"]
ConferenceType = Literal["ICICYTA", "ICODSA"]


class Track(pydantic.BaseModel):
    id: str
    name: str
    description: str | None = None


class Room(pydantic.BaseModel):
    id: str
    name: str
    identifier: str | None = None
    description: str | None = None
    type: RoomType
    online_meeting_url: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    schedule_id: str | None = None
    track_id: str | None = None
    track: Track | None = None


class TimeSlot(pydantic.BaseModel):
    """One row of a conference day.

    ``date`` stays a raw string: the backend sends ISO 8601 timestamps and
    the builder has to cope with malformed ones instead of rejecting them.
    """

    id: str
    conference_schedule_id: str | None = None
    date: str
    start_time: str | None = None
    end_time: str | None = None
    type: SlotType
    notes: str | None = None
    rooms: list[Room] = []


class ConferenceSchedule(pydantic.BaseModel):
    id: str
    name: str
    description: str | None = None
    year: int | None = None
    start_date: str
    end_date: str
    type: ConferenceType
    contact_email: str | None = None
    timezone_iana: str | None = None
    onsite_presentation: str | None = None
    online_presentation: str | None = None
    notes: str | None = None
    no_show_policy: str | None = None
    schedules: list[TimeSlot] = []


class TrackSession(pydantic.BaseModel):
    id: str
    paper_id: str
    title: str
    authors: str
    mode: Literal["ONLINE", "ONSITE"]
    start_time: time
    end_time: time
    track_id: str
    notes: str | None = None

    @pydantic.model_validator(mode='after')
    def validate_time_order(self) -> 'TrackSession':
        if self.end_time <= self.start_time:
            raise ValueError('end_time must be after start_time')
        return self


class ScheduleItem(pydantic.BaseModel):
    """A flattened, display-ready row: a time slot combined with one room."""

    id: str
    title: str
    description: str | None = None
    speaker: str | None = None  # track name, i.e. the topic
    location: str
    date: str
    start_time: str | None = None
    end_time: str | None = None
    time_display: str = ''
    type: SlotType
    track: Track | None = None
    moderator: str | None = None
    room_name: str | None = None
    room_identifier: str | None = None
    room_type: RoomType | None = None
    online_url: str | None = None


class DaySchedule(pydantic.BaseModel):
    date: str
    day_number: int
    day_title: str
    items: list[ScheduleItem] = []


class GridRow(pydantic.BaseModel):
    """One time slot laid out across the main room and the parallel columns."""

    slot_id: str
    start_time: str | None = None
    end_time: str | None = None
    time_display: str = ''
    type: SlotType
    spanning: bool = False
    span_title: str | None = None
    main: ScheduleItem | None = None
    columns: dict[str, ScheduleItem | None] = {}


class GridDay(pydantic.BaseModel):
    date: str
    day_number: int
    day_title: str
    column_labels: list[str]
    rows: list[GridRow] = []


class ProcessedConference(pydantic.BaseModel):
    id: str
    name: str
    description: str | None = None
    year: int | None = None
    start_date: str
    end_date: str
    type: ConferenceType
    contact_email: str | None = None
    timezone: str | None = None
    onsite_location: str | None = None
    online_location: str | None = None
    notes: str | None = None
    no_show_policy: str | None = None
    days: list[DaySchedule] = []


class Author(pydantic.BaseModel):
    name: str
    affiliation: str | None = None
