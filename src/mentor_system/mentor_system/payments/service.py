from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import PAYMENT_WINDOW_DAYS
from ..core.exceptions import NotFoundError
from ..mentors.model import Mentor
from ..mentors.repository import MentorRepository
from ..tasks.model import WorkRecord
from ..tasks.repository import TaskRepository
from .calculator.base import PaymentCalculator
from .calculator.standard_calculator import StandardPaymentCalculator
from .model import PaymentBreakdown
from .windows import filter_since, group_by_week


@dataclass(frozen=True)
class WeeklyPayment:
    week_start: date
    breakdown: PaymentBreakdown
    tasks: tuple[WorkRecord, ...]

    def as_dict(self) -> dict:
        return {
            "weekStart": self.week_start.isoformat(),
            "payment": self.breakdown.as_dict(),
            "tasks": [t.as_dict() for t in self.tasks],
        }


@dataclass(frozen=True)
class MentorPaymentSummary:
    mentor: Mentor
    overall: PaymentBreakdown
    recent: PaymentBreakdown
    window_days: int
    weekly: tuple[WeeklyPayment, ...]

    def as_dict(self) -> dict:
        return {
            "mentor": self.mentor.as_dict(),
            "overall": self.overall.as_dict(),
            "recent": self.recent.as_dict(),
            "windowDays": self.window_days,
            "weekly": [w.as_dict() for w in self.weekly],
        }


@dataclass(frozen=True)
class MentorPayment:
    mentor_id: int
    mentor_name: str
    payment: int


@dataclass(frozen=True)
class DashboardSummary:
    total_mentors: int
    total_tasks: int
    total_lectures: int
    total_minutes: float
    total_units: int
    total_payments: int
    mentor_payments: tuple[MentorPayment, ...]

    def as_dict(self) -> dict:
        return {
            "totalMentors": self.total_mentors,
            "totalTasks": self.total_tasks,
            "totalLectures": self.total_lectures,
            "totalMinutes": self.total_minutes,
            "totalUnits": self.total_units,
            "totalPayments": self.total_payments,
            "mentorPayments": [
                {"mentorId": p.mentor_id, "mentorName": p.mentor_name, "payment": p.payment}
                for p in self.mentor_payments
            ],
        }


class PaymentReportService:
    """Applies the payment calculator to mentors and time windows.

    The calculator never filters by date; every window is cut here first.
    """

    def __init__(
        self,
        mentors: MentorRepository,
        tasks: TaskRepository,
        *,
        calculator: Optional[PaymentCalculator] = None,
        window_days: int = PAYMENT_WINDOW_DAYS,
    ):
        self._mentors = mentors
        self._tasks = tasks
        self._calculator = calculator or StandardPaymentCalculator()
        self._window_days = int(window_days)

    def _get_mentor(self, mentor_id: int) -> Mentor:
        mentor = self._mentors.get_by_id(int(mentor_id))
        if not mentor:
            raise NotFoundError("Mentor not found")
        return mentor

    def summarize_mentor(self, mentor_id: int, *, now: Optional[datetime] = None) -> MentorPaymentSummary:
        mentor = self._get_mentor(mentor_id)
        records = list(self._tasks.list_for_mentor(mentor.mentor_id))

        since = (now or now_local()) - timedelta(days=self._window_days)
        # The range query is inclusive; the window itself is strict.
        recent = filter_since(self._tasks.list_for_mentor(mentor.mentor_id, start=since), since)

        weekly = tuple(
            WeeklyPayment(
                week_start=start,
                breakdown=self._calculator.compute(week_records, mentor.base_rate),
                tasks=tuple(week_records),
            )
            for start, week_records in group_by_week(recent).items()
        )

        return MentorPaymentSummary(
            mentor=mentor,
            overall=self._calculator.compute(records, mentor.base_rate),
            recent=self._calculator.compute(recent, mentor.base_rate),
            window_days=self._window_days,
            weekly=weekly,
        )

    def build_dashboard(self) -> DashboardSummary:
        mentors = list(self._mentors.list_all())
        tasks = list(self._tasks.list_all())

        by_mentor: dict[int, list[WorkRecord]] = {}
        for t in tasks:
            by_mentor.setdefault(t.mentor_id, []).append(t)

        lectures = [t for t in tasks if t.is_lecture]
        payments = tuple(
            MentorPayment(
                mentor_id=m.mentor_id,
                mentor_name=m.name,
                payment=self._calculator.compute(by_mentor.get(m.mentor_id, []), m.base_rate).p_final,
            )
            for m in mentors
        )

        return DashboardSummary(
            total_mentors=len(mentors),
            total_tasks=len(tasks),
            total_lectures=len(lectures),
            total_minutes=sum(t.minutes or 0 for t in lectures),
            total_units=sum(int(t.chapters_completed or 0) for t in tasks if not t.is_lecture),
            total_payments=sum(p.payment for p in payments),
            mentor_payments=payments,
        )

    def payment_slip_rows(self, mentor_id: int, *, now: Optional[datetime] = None) -> list[dict]:
        """Flat rows for the printable payment slip: weeks, then the window and all-time totals."""

        summary = self.summarize_mentor(mentor_id, now=now)

        def row(period: str, b: PaymentBreakdown) -> dict:
            return {
                "mentor": summary.mentor.name,
                "period": period,
                "billable_minutes": b.t_billable,
                "lectures": b.lectures_count,
                "average_rating": b.average_rating,
                "m_rate": b.m_rate,
                "m_freq": b.m_freq,
                "units": b.total_chapters_completed,
                "lecture_pay": b.p_final_lectures,
                "other_pay": b.p_final_other,
                "total_pay": b.p_final,
            }

        rows = [row(f"Week of {w.week_start.isoformat()}", w.breakdown) for w in summary.weekly]
        rows.append(row(f"Last {summary.window_days} days", summary.recent))
        rows.append(row("All time", summary.overall))
        return rows
