"""
Tests for logging setup.

- JSON rendering
- Level filtering
"""

import json
import sys
import os

import pytest
import structlog

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from conference_grid.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    """Test structlog configuration."""

    def test_json_output(self, capsys):
        setup_logging(json_output=True, log_level='DEBUG')

        get_logger('conference_grid.test').warning('malformed_schedule_date', raw_date='soon')

        event = json.loads(capsys.readouterr().err.strip())
        assert event['event'] == 'malformed_schedule_date'
        assert event['raw_date'] == 'soon'
        assert event['level'] == 'warning'
        assert 'timestamp' in event

    def test_level_filtering(self, capsys):
        setup_logging(json_output=True, log_level='WARNING')

        get_logger('conference_grid.test').debug('days_built', day_count=2)

        assert capsys.readouterr().err == ''

    def test_unknown_level_defaults_to_info(self, capsys):
        setup_logging(json_output=True, log_level='chatty')
        log = get_logger('conference_grid.test')

        log.debug('hidden')
        log.info('shown')

        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)['event'] for line in lines] == ['shown']
