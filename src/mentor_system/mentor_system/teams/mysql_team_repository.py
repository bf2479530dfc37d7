from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import TeamRepository


class MySQLTeamRepository(TeamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_names(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT team_name FROM teams ORDER BY position ASC, team_name ASC")
            return [r["team_name"] for r in fetchall(cur)]

    def replace_all(self, names: Sequence[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM teams")
            if names:
                cur.executemany(
                    "INSERT INTO teams(team_name, position) VALUES(%s,%s)",
                    [(name, i) for i, name in enumerate(names)],
                )
