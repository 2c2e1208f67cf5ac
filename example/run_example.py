#!/usr/bin/env python3
"""
Simple example building the day and grid views of a small conference.
"""

import json
import sys
import os

# Add parent directory to path so we can import conference_grid
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from conference_grid import build_days, build_grid, load_conference
from conference_grid.config import get_config
from conference_grid.logging import setup_logging


PAYLOAD = {
    'id': 'icicyta-2025',
    'name': 'ICICyTA 2025',
    'year': 2025,
    'start_date': '2025-11-23T00:00:00.000Z',
    'end_date': '2025-11-24T00:00:00.000Z',
    'type': 'ICICYTA',
    'timezone_iana': 'Asia/Makassar',
    'schedules': [
        {
            'id': 'opening',
            'date': '2025-11-23T00:00:00.000Z',
            'start_time': '08:00:00',
            'end_time': '09:00:00',
            'type': 'TALK',
            'rooms': [
                {
                    'id': 'main',
                    'name': 'Main Hall',
                    'type': 'MAIN',
                    'description': 'Opening Ceremony. Moderator: Dr. Jane Doe, General Chair',
                    'online_meeting_url': 'https://zoom.us/j/1234567890',
                },
            ],
        },
        {
            'id': 'coffee',
            'date': '2025-11-23T00:00:00.000Z',
            'start_time': '09:00:00',
            'end_time': '09:15:00',
            'type': 'BREAK',
            'notes': 'Coffee Break',
        },
        {
            'id': 'parallel-1',
            'date': '2025-11-23T00:00:00.000Z',
            'start_time': '09:15:00',
            'end_time': '11:00:00',
            'type': 'TALK',
            'rooms': [
                {
                    'id': 'ra',
                    'name': 'Room A',
                    'identifier': 'Parallel Session 1A',
                    'type': 'PARALLEL',
                    'track': {'id': 't1', 'name': 'AI & Cybernetics'},
                },
                {
                    'id': 'rb',
                    'name': 'Hall 2',
                    'identifier': 'Parallel Session 1B',
                    'type': 'PARALLEL',
                    'track': {'id': 't2', 'name': 'Data Science'},
                },
            ],
        },
        {
            'id': 'tour',
            'date': '2025-11-24T00:00:00.000Z',
            'type': 'ONE_DAY_ACTIVITY',
            'notes': 'One day tour to Ubud',
        },
    ],
}


def main():
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    conference = load_conference(PAYLOAD)

    days = build_days(conference)
    print(json.dumps([day.model_dump(exclude_none=True) for day in days], indent=2))

    for grid_day in build_grid(conference):
        print(f"\n{grid_day.day_title}")
        header = ['Time', 'Main Room'] + [f'Room {label}' for label in grid_day.column_labels]
        print(' | '.join(header))
        for row in grid_day.rows:
            if row.spanning:
                print(f"{row.time_display:13} | {row.span_title}")
                continue
            cells = [row.main.title if row.main else '-']
            cells += [item.speaker or item.title if item else '-' for item in row.columns.values()]
            print(f"{row.time_display:13} | " + ' | '.join(cells))


if __name__ == '__main__':
    main()
