from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.mentor_system.mentor_system.core.exceptions import NotFoundError, ValidationError
from src.mentor_system.mentor_system.tasks.service import TaskService


def test_submit_lecture_stamps_submission_time(tasks_repo, mentors_repo, fixed_now):
    svc = TaskService(tasks_repo, mentors_repo)

    task_id = svc.submit_task(
        mentor_id=1,
        task_type="Lecture",
        chapter_name=" Kinematics ",
        minutes=90,
        rating=4.5,
        description="Intro",
        now=fixed_now,
    )

    record = tasks_repo.get_by_id(task_id)
    assert record.date == fixed_now
    assert record.chapter_name == "Kinematics"
    assert record.status == "Done"


@pytest.mark.parametrize(
    "fields",
    [
        {"task_type": "Lecture", "chapter_name": "", "minutes": 30},
        {"task_type": "Lecture", "chapter_name": "Ch1", "minutes": 0},
        {"task_type": "Lecture", "chapter_name": "Ch1"},
        {"task_type": "Content", "chapters_completed": 0},
        {"task_type": "Content"},
        {"task_type": "Lecture", "chapter_name": "Ch1", "minutes": 30, "rating": 6},
        {"task_type": "Lecture", "chapter_name": "Ch1", "minutes": 30, "rating": 0.5},
        {"task_type": " "},
    ],
)
def test_submit_rejects_invalid_work(tasks_repo, mentors_repo, fields):
    svc = TaskService(tasks_repo, mentors_repo)

    with pytest.raises(ValidationError):
        svc.submit_task(mentor_id=1, **fields)

    assert tasks_repo.list_all() == []


def test_submit_for_unknown_mentor(tasks_repo, mentors_repo):
    svc = TaskService(tasks_repo, mentors_repo)

    with pytest.raises(NotFoundError):
        svc.submit_task(mentor_id=42, task_type="Content", chapters_completed=1)


def test_list_tasks_newest_first(tasks_repo, mentors_repo, fixed_now):
    svc = TaskService(tasks_repo, mentors_repo)
    first = svc.submit_task(mentor_id=1, task_type="Content", chapters_completed=1, now=fixed_now)
    second = svc.submit_task(mentor_id=2, task_type="Content", chapters_completed=2, now=fixed_now + timedelta(hours=1))
    third = svc.submit_task(mentor_id=1, task_type="Other", chapters_completed=1, now=fixed_now + timedelta(hours=2))

    assert [t.task_id for t in svc.list_tasks()] == [third, second, first]
    assert [t.task_id for t in svc.list_tasks(mentor_id=1)] == [third, first]


def test_delete_task(tasks_repo, mentors_repo, fixed_now):
    svc = TaskService(tasks_repo, mentors_repo)
    task_id = svc.submit_task(mentor_id=1, task_type="Content", chapters_completed=1, now=fixed_now)

    svc.delete_task(task_id)

    assert tasks_repo.get_by_id(task_id) is None
    with pytest.raises(NotFoundError):
        svc.delete_task(task_id)
