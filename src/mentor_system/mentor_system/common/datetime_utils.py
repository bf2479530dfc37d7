from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def _naive_local(value: datetime) -> datetime:
    # Offsets are converted to local wall time so they compare with now_local().
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def as_datetime(value: Any) -> Optional[datetime]:
    """Coerce a stored submission timestamp into a naive local datetime.

    Accepts datetime, date (midnight) and ISO strings. Anything else is None.
    """

    if isinstance(value, datetime):
        return _naive_local(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and value.strip():
        try:
            return _naive_local(datetime.fromisoformat(value.strip()))
        except ValueError:
            return None
    return None
