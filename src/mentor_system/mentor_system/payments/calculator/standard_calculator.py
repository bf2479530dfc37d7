from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from ...core.constants import CHAPTER_MINUTES_CAP, CHAPTER_RATE, DEFAULT_BASE_RATE, DEFAULT_RATING
from ...core.enums import TaskType
from ...tasks.model import record_value
from ..model import PaymentBreakdown
from .base import PaymentCalculator


def _as_number(value: Any) -> float:
    """Numeric view of a record field; missing or unparseable values count as 0."""

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return number


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rate_modifier(average_rating: float) -> float:
    if average_rating < 2.5:
        return 0.6
    if average_rating <= 3.5:
        return 0.75
    return 1.0


def frequency_modifier(lectures_count: int, billable_minutes: float) -> float:
    # Bonus is checked before standard; everything else falls to the penalty.
    if lectures_count >= 3 and billable_minutes >= 180:
        return 1.2
    if lectures_count >= 2 and billable_minutes >= 120:
        return 1.0
    return 0.8


@dataclass
class _ChapterTotals:
    minutes: float = 0
    lectures: int = 0
    ratings: list[float] = field(default_factory=list)


class StandardPaymentCalculator(PaymentCalculator):
    """Lecture minutes (capped per chapter, rating and frequency modifiers) plus
    a flat rate per unit of non-lecture work."""

    def __init__(self, *, chapter_rate: int = CHAPTER_RATE, chapter_minutes_cap: float = CHAPTER_MINUTES_CAP):
        self._chapter_rate = chapter_rate
        self._cap = chapter_minutes_cap

    def compute(self, records: Iterable[Any], base_rate_per_minute: Optional[float] = None) -> PaymentBreakdown:
        chapters: dict[str, _ChapterTotals] = {}
        total_chapters_completed: float = 0
        other_pay: float = 0

        for record in records or ():
            if record_value(record, "task_type") == TaskType.LECTURE.value:
                chapter_name = record_value(record, "chapter_name")
                minutes = _as_number(record_value(record, "minutes"))
                if not chapter_name or minutes <= 0:
                    continue
                totals = chapters.setdefault(str(chapter_name), _ChapterTotals())
                totals.minutes += minutes
                totals.lectures += 1
                rating = _as_number(record_value(record, "rating"))
                if rating:
                    totals.ratings.append(rating)
            else:
                units = _as_number(record_value(record, "chapters_completed"))
                total_chapters_completed += units
                other_pay += units * self._chapter_rate

        billable_minutes: float = 0
        lectures_count = 0
        rating_sum: float = 0
        rating_count = 0
        for totals in chapters.values():
            billable_minutes += min(totals.minutes, self._cap)
            lectures_count += totals.lectures
            rating_sum += sum(totals.ratings)
            rating_count += len(totals.ratings)

        r_minute = _as_number(base_rate_per_minute) or DEFAULT_BASE_RATE
        average_rating = rating_sum / rating_count if rating_count else DEFAULT_RATING
        m_rate = rate_modifier(average_rating)
        m_freq = frequency_modifier(lectures_count, billable_minutes)

        base_pay_lectures = billable_minutes * r_minute
        lecture_pay = base_pay_lectures * m_rate * m_freq

        return PaymentBreakdown(
            p_final=_round_half_up(lecture_pay + other_pay),
            p_final_lectures=_round_half_up(lecture_pay),
            p_final_other=_round_half_up(other_pay),
            t_billable=billable_minutes,
            total_chapters_completed=total_chapters_completed,
            r_minute=r_minute,
            m_rate=m_rate,
            m_freq=m_freq,
            average_rating=f"{average_rating:.2f}",
            lectures_count=lectures_count,
            base_pay_lectures=_round_half_up(base_pay_lectures),
            chapter_rate=self._chapter_rate,
        )


def compute(records: Iterable[Any], base_rate_per_minute: Optional[float] = None) -> PaymentBreakdown:
    """Payment breakdown for `records` using the standard rules."""
    return StandardPaymentCalculator().compute(records, base_rate_per_minute)
