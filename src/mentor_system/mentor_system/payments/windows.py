"""Date-range helpers applied to records before they reach the calculator."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Iterable, TypeVar

from ..common.datetime_utils import as_datetime
from ..tasks.model import record_value

R = TypeVar("R")


def submitted_at(record: Any) -> datetime | None:
    return as_datetime(record_value(record, "date"))


def filter_since(records: Iterable[R], since: datetime) -> list[R]:
    """Records submitted strictly after `since`. Undated records are dropped."""

    out: list[R] = []
    for r in records:
        when = submitted_at(r)
        if when is not None and when > since:
            out.append(r)
    return out


def filter_between(records: Iterable[R], start: datetime, end: datetime) -> list[R]:
    """Records submitted within [start, end]."""

    out: list[R] = []
    for r in records:
        when = submitted_at(r)
        if when is not None and start <= when <= end:
            out.append(r)
    return out


def week_start(value: date | datetime) -> date:
    """Monday of the week containing `value`."""

    day = value.date() if isinstance(value, datetime) else value
    return day - timedelta(days=day.weekday())


def group_by_week(records: Iterable[R]) -> dict[date, list[R]]:
    """Bucket records by Monday week start, newest week first."""

    buckets: dict[date, list[R]] = {}
    for r in records:
        when = submitted_at(r)
        if when is None:
            continue
        buckets.setdefault(week_start(when), []).append(r)
    return {k: buckets[k] for k in sorted(buckets, reverse=True)}
