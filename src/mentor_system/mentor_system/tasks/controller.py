from __future__ import annotations

from flask import Flask, request

from ..common.http import api_errors, first_of, json_body, ok
from ..common.validators import optional_int, optional_number
from ..container import Container
from ..core.constants import DEFAULT_TASK_STATUS
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", methods=["GET"], endpoint="list_tasks")
    @api_errors("list tasks")
    def list_tasks():
        mentor_id = optional_int(request.args.get("mentor_id"), "Mentor")
        records = container.task_service.list_tasks(mentor_id=mentor_id)
        return ok(tasks=[r.as_dict() for r in records])

    @app.route("/api/tasks", methods=["POST"], endpoint="submit_task")
    @api_errors("add the task")
    def submit_task():
        data = json_body()
        mentor_id = optional_int(first_of(data, "mentor_id", "mentorId"), "Mentor")
        if mentor_id is None:
            raise ValidationError("Mentor is required")
        task_id = container.task_service.submit_task(
            mentor_id=mentor_id,
            task_type=first_of(data, "task_type", "taskType", default=""),
            description=first_of(data, "description", default=""),
            chapter_name=first_of(data, "chapter_name", "chapterName"),
            minutes=optional_number(first_of(data, "minutes"), "Minutes"),
            rating=optional_number(first_of(data, "rating"), "Rating"),
            chapters_completed=optional_int(first_of(data, "chapters_completed", "chaptersCompleted"), "Chapters completed"),
            status=first_of(data, "status", default=DEFAULT_TASK_STATUS),
            submitted_by=first_of(data, "submitted_by", "submittedBy"),
        )
        return ok(201, id=task_id)

    @app.route("/api/tasks/<int:task_id>", methods=["DELETE"], endpoint="delete_task")
    @api_errors("delete the task")
    def delete_task(task_id: int):
        container.task_service.delete_task(task_id)
        return ok()
