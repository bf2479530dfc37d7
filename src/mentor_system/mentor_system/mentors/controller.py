from __future__ import annotations

from flask import Flask

from ..common.http import api_errors, first_of, json_body, ok
from ..common.validators import optional_number
from ..container import Container


def _mentor_fields(data: dict) -> dict:
    teams = first_of(data, "teams", default=None)
    return dict(
        name=first_of(data, "name", default=""),
        email=first_of(data, "email"),
        base_rate=optional_number(first_of(data, "base_rate", "baseRate"), "Base rate"),
        teams=teams if isinstance(teams, list) else None,
        photo_url=first_of(data, "photo_url", "photoURL"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/mentors", methods=["GET"], endpoint="list_mentors")
    @api_errors("list mentors")
    def list_mentors():
        profiles = container.mentor_service.list_profiles()
        return ok(mentors=[p.as_dict() for p in profiles])

    @app.route("/api/mentors", methods=["POST"], endpoint="create_mentor")
    @api_errors("save the mentor")
    def create_mentor():
        mentor_id = container.mentor_service.save_mentor(**_mentor_fields(json_body()))
        return ok(201, id=mentor_id)

    @app.route("/api/mentors/<int:mentor_id>", methods=["GET"], endpoint="get_mentor")
    @api_errors("load the mentor")
    def get_mentor(mentor_id: int):
        mentor = container.mentor_service.get_mentor(mentor_id)
        return ok(mentor=mentor.as_dict())

    @app.route("/api/mentors/<int:mentor_id>", methods=["PUT"], endpoint="update_mentor")
    @api_errors("save the mentor")
    def update_mentor(mentor_id: int):
        container.mentor_service.save_mentor(mentor_id=mentor_id, **_mentor_fields(json_body()))
        return ok(id=mentor_id)

    @app.route("/api/mentors/<int:mentor_id>", methods=["DELETE"], endpoint="delete_mentor")
    @api_errors("delete the mentor")
    def delete_mentor(mentor_id: int):
        removed = container.mentor_service.delete_mentor(mentor_id)
        return ok(deletedTasks=removed)
