"""Repositories that expose the queries the services need."""

from __future__ import annotations

from typing import Any

from .db_models import Plan, User
from .queries import CreatePlanParams, Queries, RegisterUserParams


class PlanRepository:
    """Stores and looks up plans."""

    def __init__(self, conn: Any) -> None:
        self._queries = Queries(conn)

    def create_plan(self, params: CreatePlanParams) -> None:
        """Insert a plan."""
        self._queries.create_plan(params)

    def get_plan_by_name(self, name: str) -> Plan:
        """Return the plan called ``name``; raise NoRowsError if there is none."""
        return self._queries.get_plan_by_name(name)


class UserRepository:
    """Stores and looks up users."""

    def __init__(self, conn: Any) -> None:
        self._queries = Queries(conn)

    def register_user(self, params: RegisterUserParams) -> None:
        """Insert a user."""
        self._queries.register_user(params)

    def get_user_by_email(self, email: str) -> User:
        """Return the user with ``email``; raise NoRowsError if there is none."""
        return self._queries.get_user(email)