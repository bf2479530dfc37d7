from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_BASE_RATE
from .database.connection import DBConfig, DatabaseConnection
from .mentors.mysql_mentor_repository import MySQLMentorRepository
from .mentors.repository import MentorRepository
from .mentors.service import MentorService
from .payments.service import PaymentReportService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService
from .teams.mysql_team_repository import MySQLTeamRepository
from .teams.repository import TeamRepository
from .teams.service import TeamService


@dataclass(frozen=True)
class Container:
    mentors_repo: MentorRepository
    teams_repo: TeamRepository
    tasks_repo: TaskRepository

    mentor_service: MentorService
    team_service: TeamService
    task_service: TaskService
    payment_report_service: PaymentReportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    mentors_repo: MentorRepository,
    teams_repo: TeamRepository,
    tasks_repo: TaskRepository,
    default_base_rate: float = DEFAULT_BASE_RATE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""

    return Container(
        mentors_repo=mentors_repo,
        teams_repo=teams_repo,
        tasks_repo=tasks_repo,
        mentor_service=MentorService(mentors_repo, tasks_repo, default_base_rate=default_base_rate),
        team_service=TeamService(teams_repo, mentors_repo),
        task_service=TaskService(tasks_repo, mentors_repo),
        payment_report_service=PaymentReportService(mentors_repo, tasks_repo),
        conn=conn,
    )


def build_container(*, db_config: dict, default_base_rate: float = DEFAULT_BASE_RATE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        mentors_repo=MySQLMentorRepository(conn),
        teams_repo=MySQLTeamRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
        default_base_rate=default_base_rate,
        conn=conn,
    )
