from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import WorkRecord


class TaskRepository(Protocol):
    """Record source for payments: submitted work per mentor, oldest first."""

    def create(self, record: WorkRecord) -> int:
        raise NotImplementedError

    def get_by_id(self, task_id: int) -> Optional[WorkRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[WorkRecord]:
        raise NotImplementedError

    def list_for_mentor(
        self,
        mentor_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[WorkRecord]:
        """Tasks of one mentor ordered by submission time, optionally within [start, end]."""

        raise NotImplementedError

    def delete(self, task_id: int) -> bool:
        raise NotImplementedError

    def delete_for_mentor(self, mentor_id: int) -> int:
        """Returns number of deleted tasks."""

        raise NotImplementedError
