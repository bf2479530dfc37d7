from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import DEFAULT_TASK_STATUS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import WorkRecord
from .repository import TaskRepository

_COLUMNS = """
    task_id, mentor_id, task_type, description, chapter_name, minutes, rating,
    chapters_completed, status, submitted_by, submitted_at
"""


def _to_record(row: dict) -> WorkRecord:
    return WorkRecord(
        task_id=int(row["task_id"]),
        mentor_id=int(row["mentor_id"]),
        task_type=row["task_type"],
        date=row.get("submitted_at"),
        chapter_name=row.get("chapter_name"),
        minutes=row.get("minutes"),
        rating=row.get("rating"),
        chapters_completed=row.get("chapters_completed"),
        description=row.get("description") or "",
        status=row.get("status") or DEFAULT_TASK_STATUS,
        submitted_by=row.get("submitted_by"),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: WorkRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks(mentor_id, task_type, description, chapter_name, minutes, rating,
                                  chapters_completed, status, submitted_by, submitted_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(record.mentor_id),
                    record.task_type,
                    record.description,
                    record.chapter_name,
                    record.minutes,
                    record.rating,
                    record.chapters_completed,
                    record.status,
                    record.submitted_by,
                    record.date,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, task_id: int) -> Optional[WorkRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tasks WHERE task_id=%s", (int(task_id),))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def list_all(self) -> Sequence[WorkRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tasks ORDER BY submitted_at ASC, task_id ASC")
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_mentor(
        self,
        mentor_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[WorkRecord]:
        clauses = ["mentor_id=%s"]
        params: list[object] = [int(mentor_id)]
        if start is not None:
            clauses.append("submitted_at >= %s")
            params.append(start)
        if end is not None:
            clauses.append("submitted_at <= %s")
            params.append(end)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE {where} ORDER BY submitted_at ASC, task_id ASC",
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete(self, task_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE task_id=%s", (int(task_id),))
            return cur.rowcount > 0

    def delete_for_mentor(self, mentor_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE mentor_id=%s", (int(mentor_id),))
            return int(cur.rowcount)
