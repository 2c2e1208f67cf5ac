"""
Tests for placing parallel rooms into the lettered grid columns.

- Name and identifier matching
- Rule precedence
- Fallback placement of unmatched rooms
"""

import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from conference_grid import (
    Room,
    assign_room_columns,
    resolve_room_columns,
    resolve_room_for_column
)


def parallel(room_id, name, identifier=None):
    return Room(id=room_id, name=name, identifier=identifier, type='PARALLEL')


def column_ids(columns):
    return {label: room.id if room else None for label, room in columns.items()}


class TestResolution:
    """Test strict name/identifier matching."""

    def test_room_b_only_matches_b(self):
        """Test that "Room B" occupies column B and no other column."""
        columns = resolve_room_columns([parallel('rb', 'Room B')])

        assert column_ids(columns) == {'A': None, 'B': 'rb', 'C': None, 'D': None, 'E': None}

    def test_case_insensitive_name(self):
        assert resolve_room_for_column('C', [parallel('r1', '  ROOM c ')]).id == 'r1'

    def test_name_contains(self):
        room = parallel('r1', 'Room D - Auditorium Lt. 2')

        assert resolve_room_for_column('D', [room]) is room

    def test_identifier_session_letter(self):
        room = parallel('r1', 'Hall 3', identifier='Session E')

        assert resolve_room_for_column('E', [room]) is room

    def test_identifier_numbered_session(self):
        """Test identifiers in the "Parallel Session 1A" style."""
        room = parallel('r1', 'Hall 1', identifier='Parallel Session 1A')

        assert resolve_room_for_column('A', [room]) is room
        assert resolve_room_for_column('B', [room]) is None

    def test_identifier_session_letter_with_suffix(self):
        """Test that text after the session letter does not stop the match."""
        room = parallel('r1', 'Hall X', identifier='Session A1')

        assert resolve_room_for_column('A', [room]) is room
        assert resolve_room_for_column('B', [room]) is None

    def test_identifier_bare_letter(self):
        room = parallel('r1', 'Hall 2', identifier='b')

        assert resolve_room_for_column('B', [room]) is room

    def test_no_match(self):
        """Test that an unmatched column is empty."""
        rooms = [parallel('r1', 'Hall 1'), parallel('r2', 'Room A')]

        assert resolve_room_for_column('C', rooms) is None

    def test_main_room_never_takes_a_column(self):
        rooms = [Room(id='m', name='Room A', type='MAIN')]

        assert resolve_room_for_column('A', rooms) is None

    def test_custom_labels(self):
        columns = resolve_room_columns([parallel('r1', 'Room F')], labels=['E', 'F'])

        assert column_ids(columns) == {'E': None, 'F': 'r1'}


class TestPrecedence:
    """Test that earlier rules win over later ones, regardless of room order."""

    def test_exact_name_beats_contains(self):
        rooms = [parallel('annex', 'Room A Annex'), parallel('exact', 'Room A')]

        assert resolve_room_for_column('A', rooms).id == 'exact'

    def test_contains_beats_identifier(self):
        rooms = [
            parallel('by-id', 'Hall 1', identifier='Session A'),
            parallel('by-name', 'Lecture Room A (2nd floor)'),
        ]

        assert resolve_room_for_column('A', rooms).id == 'by-name'

    def test_first_room_wins_within_a_rule(self):
        rooms = [parallel('first', 'Room B'), parallel('second', 'room b')]

        assert resolve_room_for_column('B', rooms).id == 'first'


class TestFallback:
    """Test placement of rooms no column matched."""

    def test_unmatched_rooms_fill_free_columns_in_order(self):
        rooms = [
            parallel('hx', 'Hall X'),
            parallel('ra', 'Room A'),
            parallel('hy', 'Hall Y'),
        ]

        columns = assign_room_columns(rooms)

        assert column_ids(columns) == {'A': 'ra', 'B': 'hx', 'C': 'hy', 'D': None, 'E': None}

    def test_fallback_skips_taken_columns(self):
        rooms = [parallel('rb', 'Room B'), parallel('h1', 'Hall 1'), parallel('h2', 'Hall 2')]

        columns = assign_room_columns(rooms)

        assert column_ids(columns) == {'A': 'h1', 'B': 'rb', 'C': 'h2', 'D': None, 'E': None}

    def test_fallback_disabled(self):
        rooms = [parallel('ra', 'Room A'), parallel('hx', 'Hall X')]

        columns = assign_room_columns(rooms, fallback=False)

        assert column_ids(columns) == {'A': 'ra', 'B': None, 'C': None, 'D': None, 'E': None}

    def test_overflow_rooms_are_left_out(self):
        rooms = [parallel(f'h{n}', f'Hall {n}') for n in range(6)]

        columns = assign_room_columns(rooms)

        assert column_ids(columns) == {'A': 'h0', 'B': 'h1', 'C': 'h2', 'D': 'h3', 'E': 'h4'}

    def test_main_room_not_placed_by_fallback(self):
        rooms = [Room(id='m', name='Main Hall', type='MAIN'), parallel('hx', 'Hall X')]

        columns = assign_room_columns(rooms)

        assert column_ids(columns)['A'] == 'hx'
        assert 'm' not in column_ids(columns).values()
