from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from src.mentor_system.mentor_system.container import build_services
from src.mentor_system.mentor_system.mentors.model import Mentor
from src.mentor_system.mentor_system.tasks.model import WorkRecord


class InMemoryMentors:
    def __init__(self, mentors=()):
        self._by_id: dict[int, Mentor] = {m.mentor_id: m for m in mentors}
        self._next_id = max(self._by_id, default=0) + 1

    def get_by_id(self, mentor_id: int) -> Optional[Mentor]:
        return self._by_id.get(int(mentor_id))

    def list_all(self):
        return [self._by_id[k] for k in sorted(self._by_id)]

    def create(self, *, name, email, base_rate, teams, photo_url) -> int:
        mentor_id = self._next_id
        self._next_id += 1
        self._by_id[mentor_id] = Mentor(
            mentor_id=mentor_id,
            name=name,
            email=email,
            base_rate=base_rate,
            teams=tuple(teams),
            photo_url=photo_url,
        )
        return mentor_id

    def update(self, mentor_id, *, name, email, base_rate, teams, photo_url) -> bool:
        if mentor_id not in self._by_id:
            return False
        self._by_id[mentor_id] = Mentor(
            mentor_id=mentor_id,
            name=name,
            email=email,
            base_rate=base_rate,
            teams=tuple(teams),
            photo_url=photo_url,
        )
        return True

    def delete(self, mentor_id: int) -> bool:
        return self._by_id.pop(int(mentor_id), None) is not None

    def remove_team_from_all(self, team_name: str) -> int:
        changed = 0
        for mentor_id, m in list(self._by_id.items()):
            if team_name in m.teams:
                self._by_id[mentor_id] = replace(m, teams=tuple(t for t in m.teams if t != team_name))
                changed += 1
        return changed


class InMemoryTasks:
    def __init__(self, records=()):
        self._records: list[WorkRecord] = []
        for r in records:
            self.create(r)

    def create(self, record: WorkRecord) -> int:
        task_id = max((r.task_id for r in self._records), default=0) + 1
        self._records.append(replace(record, task_id=task_id))
        return task_id

    def get_by_id(self, task_id: int) -> Optional[WorkRecord]:
        return next((r for r in self._records if r.task_id == int(task_id)), None)

    def list_all(self):
        return sorted(self._records, key=lambda r: (r.date or datetime.min, r.task_id))

    def list_for_mentor(self, mentor_id: int, *, start=None, end=None):
        out = [r for r in self.list_all() if r.mentor_id == int(mentor_id)]
        if start is not None:
            out = [r for r in out if r.date and r.date >= start]
        if end is not None:
            out = [r for r in out if r.date and r.date <= end]
        return out

    def delete(self, task_id: int) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.task_id != int(task_id)]
        return len(self._records) < before

    def delete_for_mentor(self, mentor_id: int) -> int:
        before = len(self._records)
        self._records = [r for r in self._records if r.mentor_id != int(mentor_id)]
        return before - len(self._records)


class InMemoryTeams:
    def __init__(self, names=()):
        self.names: list[str] = list(names)

    def list_names(self):
        return list(self.names)

    def replace_all(self, names) -> None:
        self.names = list(names)


@pytest.fixture
def fixed_now() -> datetime:
    # A Wednesday; its week starts on Monday 2026-03-16.
    return datetime(2026, 3, 18, 12, 0, 0)


@pytest.fixture
def mentors_repo() -> InMemoryMentors:
    return InMemoryMentors(
        [
            Mentor(mentor_id=1, name="Asha", email="asha@example.com", base_rate=10, teams=("Lecture Team",)),
            Mentor(mentor_id=2, name="Rohan", base_rate=12, teams=("Lecture Team", "Mentorship Team")),
        ]
    )


@pytest.fixture
def tasks_repo() -> InMemoryTasks:
    return InMemoryTasks()


@pytest.fixture
def teams_repo() -> InMemoryTeams:
    return InMemoryTeams()


@pytest.fixture
def container(mentors_repo, teams_repo, tasks_repo):
    return build_services(mentors_repo=mentors_repo, teams_repo=teams_repo, tasks_repo=tasks_repo)
