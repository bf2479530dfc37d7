from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.constants import DEFAULT_TASK_STATUS
from ..core.enums import TaskType

# Document stores hand us the dashboard's camelCase keys.
_DOCUMENT_KEYS = {
    "task_id": "id",
    "mentor_id": "mentorId",
    "task_type": "taskType",
    "chapter_name": "chapterName",
    "chapters_completed": "chaptersCompleted",
    "submitted_by": "submittedBy",
}


def record_value(record: Any, field: str, default: Any = None) -> Any:
    """Read a WorkRecord field from a dataclass or a raw mapping.

    Never raises: unknown shapes and missing keys give `default`.
    """

    if isinstance(record, Mapping):
        if field in record:
            return record[field]
        key = _DOCUMENT_KEYS.get(field)
        if key is not None and key in record:
            return record[key]
        return default
    return getattr(record, field, default)


@dataclass(frozen=True)
class WorkRecord:
    """A submitted unit of work. Immutable once stored."""

    mentor_id: int
    task_type: str
    date: Optional[datetime] = None
    chapter_name: Optional[str] = None
    minutes: Optional[float] = None
    rating: Optional[float] = None
    chapters_completed: Optional[int] = None
    description: str = ""
    status: str = DEFAULT_TASK_STATUS
    submitted_by: Optional[str] = None
    task_id: Optional[int] = None

    @property
    def is_lecture(self) -> bool:
        return self.task_type == TaskType.LECTURE.value

    def as_dict(self) -> dict:
        return {
            "id": self.task_id,
            "mentorId": self.mentor_id,
            "taskType": self.task_type,
            "date": self.date.isoformat() if self.date else None,
            "chapterName": self.chapter_name,
            "minutes": self.minutes,
            "rating": self.rating,
            "chaptersCompleted": self.chapters_completed,
            "description": self.description,
            "status": self.status,
            "submittedBy": self.submitted_by,
        }
