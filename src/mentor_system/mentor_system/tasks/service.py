from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_TASK_STATUS
from ..core.enums import TaskType
from ..core.exceptions import NotFoundError, ValidationError
from ..mentors.repository import MentorRepository
from .model import WorkRecord
from .repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Use case: submit and manage work records."""

    def __init__(self, tasks: TaskRepository, mentors: MentorRepository):
        self._tasks = tasks
        self._mentors = mentors

    def submit_task(
        self,
        *,
        mentor_id: int,
        task_type: str,
        description: str = "",
        chapter_name: Optional[str] = None,
        minutes: Optional[float] = None,
        rating: Optional[float] = None,
        chapters_completed: Optional[int] = None,
        status: str = DEFAULT_TASK_STATUS,
        submitted_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> int:
        task_type = require_non_empty(task_type, "Task type")
        chapter_name = str(chapter_name).strip() if chapter_name is not None else None
        if not self._mentors.get_by_id(int(mentor_id)):
            raise NotFoundError("Mentor not found")

        if task_type == TaskType.LECTURE.value:
            if not chapter_name or not minutes or minutes <= 0:
                raise ValidationError("Lecture tasks need a chapter name and minutes greater than zero")
        elif not chapters_completed or chapters_completed <= 0:
            raise ValidationError("Chapters completed must be greater than zero")

        if rating is not None and not 1 <= rating <= 5:
            raise ValidationError("Rating must be between 1 and 5")

        record = WorkRecord(
            mentor_id=int(mentor_id),
            task_type=task_type,
            date=now or now_local(),
            chapter_name=chapter_name,
            minutes=minutes,
            rating=rating,
            chapters_completed=chapters_completed,
            description=str(description or "").strip(),
            status=status or DEFAULT_TASK_STATUS,
            submitted_by=submitted_by,
        )
        task_id = self._tasks.create(record)
        logger.info("Task %s (%s) submitted for mentor %s", task_id, task_type, mentor_id)
        return task_id

    def list_tasks(self, *, mentor_id: Optional[int] = None) -> Sequence[WorkRecord]:
        """Newest first."""

        if mentor_id is None:
            records = self._tasks.list_all()
        else:
            records = self._tasks.list_for_mentor(int(mentor_id))
        return list(reversed(list(records)))

    def delete_task(self, task_id: int) -> None:
        if not self._tasks.delete(int(task_id)):
            raise NotFoundError("Task not found")
        logger.info("Task %s deleted", task_id)
