from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Mentor


class MentorRepository(Protocol):
    """Repository interface for Mentor (also the base-rate source for payments)."""

    def get_by_id(self, mentor_id: int) -> Optional[Mentor]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Mentor]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        email: Optional[str],
        base_rate: float,
        teams: Sequence[str],
        photo_url: str,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        mentor_id: int,
        *,
        name: str,
        email: Optional[str],
        base_rate: float,
        teams: Sequence[str],
        photo_url: str,
    ) -> bool:
        raise NotImplementedError

    def delete(self, mentor_id: int) -> bool:
        raise NotImplementedError

    def remove_team_from_all(self, team_name: str) -> int:
        """Drop a team from every mentor. Returns number of mentors changed."""

        raise NotImplementedError
