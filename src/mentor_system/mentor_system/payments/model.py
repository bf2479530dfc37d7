from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentBreakdown:
    """Result of one payment calculation.

    Monetary totals are rounded to whole currency units; modifiers keep full
    precision. `average_rating` is pre-formatted with two decimals.
    """

    p_final: int
    p_final_lectures: int
    p_final_other: int
    t_billable: float
    total_chapters_completed: float
    r_minute: float
    m_rate: float
    m_freq: float
    average_rating: str
    lectures_count: int
    base_pay_lectures: int
    chapter_rate: int

    def as_dict(self) -> dict:
        return {
            "P_final": self.p_final,
            "P_final_lectures": self.p_final_lectures,
            "P_final_other": self.p_final_other,
            "T_billable": self.t_billable,
            "totalChaptersCompleted": self.total_chapters_completed,
            "R_minute": self.r_minute,
            "M_rate": self.m_rate,
            "M_freq": self.m_freq,
            "averageRating": self.average_rating,
            "lecturesCount": self.lectures_count,
            "basePayLectures": self.base_pay_lectures,
            "CHAPTER_RATE": self.chapter_rate,
        }
