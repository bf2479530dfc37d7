from __future__ import annotations

from enum import Enum


class TaskType(str, Enum):
    """Known work types. Stored as plain strings, so other values are allowed too."""

    LECTURE = "Lecture"
    CONTENT = "Content"
    TEST_SERIES = "TestSeries"
    DOUBT_SESSION = "DoubtSession"
    MENTORSHIP = "Mentorship"
    OTHER = "Other"
