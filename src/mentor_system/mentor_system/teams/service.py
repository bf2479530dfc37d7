from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_TEAMS
from ..core.exceptions import NotFoundError, ValidationError
from ..mentors.model import Mentor
from ..mentors.repository import MentorRepository
from .repository import TeamRepository

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, teams: TeamRepository, mentors: MentorRepository):
        self._teams = teams
        self._mentors = mentors

    def list_teams(self) -> list[str]:
        return list(self._teams.list_names())

    def ensure_defaults(self) -> bool:
        """Write the default team list when nothing is stored yet."""

        if self._teams.list_names():
            return False
        self._teams.replace_all(list(DEFAULT_TEAMS))
        logger.info("Team list missing, wrote %d default teams", len(DEFAULT_TEAMS))
        return True

    def add_team(self, name: str) -> list[str]:
        name = require_non_empty(name, "Team name")
        teams = self.list_teams()
        if name in teams:
            raise ValidationError("Team already exists")
        teams.append(name)
        self._teams.replace_all(teams)
        logger.info("Added team %r", name)
        return teams

    def delete_team(self, name: str) -> list[str]:
        """Remove a team and take it off every mentor that listed it."""

        teams = self.list_teams()
        if name not in teams:
            raise NotFoundError("Team not found")
        teams = [t for t in teams if t != name]
        self._teams.replace_all(teams)
        changed = self._mentors.remove_team_from_all(name)
        logger.info("Deleted team %r (removed from %d mentors)", name, changed)
        return teams

    def members(self, name: str) -> list[Mentor]:
        return [m for m in self._mentors.list_all() if m.in_team(name)]

    def roster(self) -> dict[str, Sequence[Mentor]]:
        mentors = self._mentors.list_all()
        return {team: [m for m in mentors if m.in_team(team)] for team in self.list_teams()}
