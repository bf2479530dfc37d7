from __future__ import annotations

from flask import Flask

from ..common.http import api_errors, first_of, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teams", methods=["GET"], endpoint="list_teams")
    @api_errors("list teams")
    def list_teams():
        return ok(teams=container.team_service.list_teams())

    @app.route("/api/teams", methods=["POST"], endpoint="add_team")
    @api_errors("add the team")
    def add_team():
        name = first_of(json_body(), "name", default="")
        return ok(201, teams=container.team_service.add_team(name))

    @app.route("/api/teams/<path:name>", methods=["DELETE"], endpoint="delete_team")
    @api_errors("delete the team")
    def delete_team(name: str):
        return ok(teams=container.team_service.delete_team(name))

    @app.route("/api/teams/roster", methods=["GET"], endpoint="team_roster")
    @api_errors("load team members")
    def team_roster():
        roster = container.team_service.roster()
        return ok(roster={team: [m.as_dict() for m in members] for team, members in roster.items()})
