"""Helpers for displaying track sessions (paper presentations)."""

import re
from datetime import date, datetime, time

from .models import Author

# ";", "," or "and" between authors, but not inside an affiliation's parentheses
AUTHOR_DELIMITER = re.compile(r'\s*(?:;|,?\s+and\s+|,)\s*(?![^()]*\))', re.IGNORECASE)
AFFILIATION = re.compile(r'\s*\(([^)]*)\)')


def parse_authors(authors: str | None) -> list[Author]:
    """
    Split a free-text author list into names and affiliations.

    Args:
        authors: e.g. "Jane Doe (Telkom University); John Roe and Ann Poe (ITB)"

    Returns:
        One Author per name, in order
    """
    if not authors or not authors.strip():
        return []

    result = []
    for part in AUTHOR_DELIMITER.split(authors.strip()):
        if not part.strip():
            continue
        match = AFFILIATION.search(part)
        affiliation = match.group(1).strip() if match else None
        name = AFFILIATION.sub('', part, count=1).strip()
        result.append(Author(name=name, affiliation=affiliation or None))
    return result


def _parse_time(value: str | time) -> datetime:
    if isinstance(value, time):
        return datetime.combine(date.min, value)
    for fmt in ('%H:%M:%S', '%H:%M'):
        try:
            return datetime.combine(date.min, datetime.strptime(value, fmt).time())
        except ValueError:
            continue
    raise ValueError(f'unrecognised time: {value!r}')


def session_duration(start_time: str | time | None, end_time: str | time | None) -> str:
    """Duration label such as "1h 30m" or "45m"; empty when it cannot be computed."""
    if not start_time or not end_time:
        return ''
    try:
        start = _parse_time(start_time)
        end = _parse_time(end_time)
    except ValueError:
        return ''
    if end < start:
        return ''

    minutes = int((end - start).total_seconds()) // 60
    hours, minutes = divmod(minutes, 60)
    return f'{hours}h {minutes}m' if hours > 0 else f'{minutes}m'
