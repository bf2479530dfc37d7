from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Mentor
from .repository import MentorRepository


def _to_mentor(row: dict, teams: Sequence[str]) -> Mentor:
    return Mentor(
        mentor_id=int(row["mentor_id"]),
        name=row["name"],
        email=row.get("email"),
        base_rate=float(row["base_rate"]),
        teams=tuple(teams),
        photo_url=row.get("photo_url") or "",
    )


class MySQLMentorRepository(MentorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, mentor_id: int) -> Optional[Mentor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT mentor_id, name, email, base_rate, photo_url FROM mentors WHERE mentor_id=%s",
                (int(mentor_id),),
            )
            row = fetchone(cur)
            if not row:
                return None
            cur.execute(
                "SELECT team_name FROM mentor_teams WHERE mentor_id=%s ORDER BY team_name",
                (int(mentor_id),),
            )
            teams = [r["team_name"] for r in fetchall(cur)]
            return _to_mentor(row, teams)

    def list_all(self) -> Sequence[Mentor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT mentor_id, name, email, base_rate, photo_url FROM mentors ORDER BY mentor_id ASC")
            rows = fetchall(cur)
            cur.execute("SELECT mentor_id, team_name FROM mentor_teams ORDER BY team_name")
            teams_by_mentor: dict[int, list[str]] = {}
            for r in fetchall(cur):
                teams_by_mentor.setdefault(int(r["mentor_id"]), []).append(r["team_name"])
            return [_to_mentor(r, teams_by_mentor.get(int(r["mentor_id"]), [])) for r in rows]

    def create(
        self,
        *,
        name: str,
        email: Optional[str],
        base_rate: float,
        teams: Sequence[str],
        photo_url: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO mentors(name, email, base_rate, photo_url) VALUES(%s,%s,%s,%s)",
                (name, email, float(base_rate), photo_url),
            )
            mentor_id = int(cur.lastrowid)
            self._write_teams(cur, mentor_id, teams)
            return mentor_id

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT mentor_id FROM mentors WHERE mentor_id=%s", (int(mentor_id),))
            if not fetchone(cur):
                return False
            cur.execute(
                "UPDATE mentors SET name=%s, email=%s, base_rate=%s, photo_url=%s WHERE mentor_id=%s",
                (name, email, float(base_rate), photo_url, int(mentor_id)),
            )
            cur.execute("DELETE FROM mentor_teams WHERE mentor_id=%s", (int(mentor_id),))
            self._write_teams(cur, int(mentor_id), teams)
            return True

    def delete(self, mentor_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM mentors WHERE mentor_id=%s", (int(mentor_id),))
            return cur.rowcount > 0

    def remove_team_from_all(self, team_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM mentor_teams WHERE team_name=%s", (team_name,))
            return int(cur.rowcount)

    @staticmethod
    def _write_teams(cur, mentor_id: int, teams: Sequence[str]) -> None:
        if not teams:
            return
        cur.executemany(
            "INSERT INTO mentor_teams(mentor_id, team_name) VALUES(%s,%s)",
            [(mentor_id, t) for t in teams],
        )
