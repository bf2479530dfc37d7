from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import DEFAULT_BASE_RATE, DEFAULT_PHOTO_URL


@dataclass(frozen=True)
class Mentor:
    """Domain entity: Mentor.

    Team membership is the `teams` tuple; teams carry no other state.
    """

    mentor_id: int
    name: str
    email: Optional[str] = None
    base_rate: float = DEFAULT_BASE_RATE
    teams: tuple[str, ...] = field(default_factory=tuple)
    photo_url: str = DEFAULT_PHOTO_URL

    def in_team(self, team_name: str) -> bool:
        return team_name in self.teams

    def as_dict(self) -> dict:
        return {
            "id": self.mentor_id,
            "name": self.name,
            "email": self.email,
            "baseRate": self.base_rate,
            "teams": list(self.teams),
            "photoURL": self.photo_url,
        }
