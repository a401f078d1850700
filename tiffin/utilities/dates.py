"""ISO-8601 helpers for the timestamp fields of the persisted documents."""
from datetime import datetime
from typing import Optional


def parse_datetime(value) -> Optional[datetime]:
    '''Accepts a datetime, an ISO string (a trailing "Z" is allowed) or nothing.'''
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if isinstance(value, datetime) else None
