from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_BASE_RATE, DEFAULT_PHOTO_URL
from ..core.exceptions import NotFoundError, ValidationError
from ..tasks.repository import TaskRepository
from .model import Mentor
from .repository import MentorRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MentorProfile:
    """Mentor card data: the mentor plus totals over their submitted work."""

    mentor: Mentor
    total_tasks: int
    chapters_completed: int

    def as_dict(self) -> dict:
        return {
            **self.mentor.as_dict(),
            "totalTasks": self.total_tasks,
            "chaptersCompleted": self.chapters_completed,
        }


def _unique_teams(teams: Optional[Iterable[str]]) -> list[str]:
    out: list[str] = []
    for t in teams or ():
        name = str(t).strip()
        if name and name not in out:
            out.append(name)
    return out


class MentorService:
    """Use case: manage mentors (add, edit, delete with their tasks)."""

    def __init__(self, mentors: MentorRepository, tasks: TaskRepository, *, default_base_rate: float = DEFAULT_BASE_RATE):
        self._mentors = mentors
        self._tasks = tasks
        self._default_base_rate = float(default_base_rate)

    def list_mentors(self) -> Sequence[Mentor]:
        return self._mentors.list_all()

    def get_mentor(self, mentor_id: int) -> Mentor:
        mentor = self._mentors.get_by_id(int(mentor_id))
        if not mentor:
            raise NotFoundError("Mentor not found")
        return mentor

    def save_mentor(
        self,
        *,
        name: str,
        mentor_id: Optional[int] = None,
        email: Optional[str] = None,
        base_rate: Optional[float] = None,
        teams: Optional[Iterable[str]] = None,
        photo_url: Optional[str] = None,
    ) -> int:
        """Create a mentor (no id) or overwrite an existing one. Returns mentor_id."""

        name = require_non_empty(name, "Name")
        email = str(email).strip() if email and str(email).strip() else None
        rate = float(base_rate) if base_rate else self._default_base_rate
        if rate < 0:
            raise ValidationError("Base rate must be positive")

        fields = dict(
            name=name,
            email=email,
            base_rate=rate,
            teams=_unique_teams(teams),
            photo_url=photo_url or DEFAULT_PHOTO_URL,
        )

        if mentor_id is None:
            new_id = self._mentors.create(**fields)
            logger.info("Created mentor %s (%s)", new_id, name)
            return new_id

        if not self._mentors.update(int(mentor_id), **fields):
            raise NotFoundError("Mentor not found")
        logger.info("Updated mentor %s (%s)", mentor_id, name)
        return int(mentor_id)

    def delete_mentor(self, mentor_id: int) -> int:
        """Delete a mentor and all of their tasks. Returns number of tasks removed."""

        self.get_mentor(mentor_id)
        removed = self._tasks.delete_for_mentor(int(mentor_id))
        if not self._mentors.delete(int(mentor_id)):
            raise NotFoundError("Mentor not found")
        logger.info("Mentor %s and %d tasks deleted", mentor_id, removed)
        return removed

    def list_profiles(self) -> list[MentorProfile]:
        counts: dict[int, int] = {}
        units: dict[int, int] = {}
        for task in self._tasks.list_all():
            counts[task.mentor_id] = counts.get(task.mentor_id, 0) + 1
            if not task.is_lecture:
                units[task.mentor_id] = units.get(task.mentor_id, 0) + int(task.chapters_completed or 0)

        return [
            MentorProfile(
                mentor=m,
                total_tasks=counts.get(m.mentor_id, 0),
                chapters_completed=units.get(m.mentor_id, 0),
            )
            for m in self._mentors.list_all()
        ]
