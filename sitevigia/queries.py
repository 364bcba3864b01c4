"""Typed queries over a DB-API connection using the ``qmark`` parameter style."""

from __future__ import annotations

import uuid
from contextlib import closing
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from .db_models import Plan, User


class NoRowsError(LookupError):
    """Raised when a query expected to return one row returns none."""


@dataclass(frozen=True, kw_only=True)
class CreatePlanParams:
    """Values for inserting a new plan."""

    name: str
    price_monthly: str
    max_websites: int
    check_interval_seconds: int
    has_performance_reports: bool
    has_seo_audits: bool
    has_public_status_page: bool


@dataclass(frozen=True, kw_only=True)
class RegisterUserParams:
    """Values for inserting a new user."""

    name: str
    email: str
    password_hash: str
    email_verified_at: Optional[datetime] = None


_PLAN_COLUMNS = (
    "id, name, price_monthly, max_websites, check_interval_seconds, "
    "has_performance_reports, has_seo_audits, has_public_status_page"
)
_USER_COLUMNS = "id, name, email, password_hash, email_verified_at, created_at, updated_at"

_CREATE_PLAN = (
    "INSERT INTO plans (name, price_monthly, max_websites, check_interval_seconds, "
    "has_performance_reports, has_seo_audits, has_public_status_page) "
    "VALUES (?, ?, ?, ?, ?, ?, ?)"
)
_GET_PLAN_BY_NAME = f"SELECT {_PLAN_COLUMNS} FROM plans WHERE name = ?"
_GET_USER = f"SELECT {_USER_COLUMNS} FROM users WHERE email = ?"
_GET_USER_BY_ID = f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?"
_REGISTER_USER = (
    "INSERT INTO users (name, email, password_hash, email_verified_at) VALUES (?, ?, ?, ?)"
)


def _bind(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


def _as_uuid(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        return uuid.UUID(bytes=raw) if len(raw) == 16 else uuid.UUID(raw.decode())
    return uuid.UUID(str(value))


def _as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode()
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _as_optional_datetime(value: Any) -> Optional[datetime]:
    return None if value is None else _as_datetime(value)


def _plan_from_row(row: Sequence[Any]) -> Plan:
    return Plan(
        id=int(row[0]),
        name=str(row[1]),
        price_monthly=str(row[2]),
        max_websites=int(row[3]),
        check_interval_seconds=int(row[4]),
        has_performance_reports=bool(row[5]),
        has_seo_audits=bool(row[6]),
        has_public_status_page=bool(row[7]),
    )


def _user_from_row(row: Sequence[Any]) -> User:
    return User(
        id=_as_uuid(row[0]),
        name=str(row[1]),
        email=str(row[2]),
        password_hash=str(row[3]),
        email_verified_at=_as_optional_datetime(row[4]),
        created_at=_as_datetime(row[5]),
        updated_at=_as_datetime(row[6]),
    )


class Queries:
    """Runs the application's SQL statements against a connection or transaction.

    Transaction boundaries are left to the owner of the connection.
    """

    def __init__(self, conn: Any) -> None:
        self._conn = conn

    def with_tx(self, tx: Any) -> "Queries":
        """Return a query set bound to ``tx`` instead of the current connection."""
        return Queries(tx)

    def _execute(self, sql: str, params: Sequence[Any]) -> None:
        with closing(self._conn.cursor()) as cursor:
            cursor.execute(sql, [_bind(p) for p in params])

    def _fetch_one(self, sql: str, params: Sequence[Any]) -> Sequence[Any]:
        with closing(self._conn.cursor()) as cursor:
            cursor.execute(sql, [_bind(p) for p in params])
            row = cursor.fetchone()
        if row is None:
            raise NoRowsError("no rows in result set")
        return row

    def create_plan(self, arg: CreatePlanParams) -> None:
        """Insert a plan."""
        self._execute(
            _CREATE_PLAN,
            (
                arg.name,
                arg.price_monthly,
                arg.max_websites,
                arg.check_interval_seconds,
                arg.has_performance_reports,
                arg.has_seo_audits,
                arg.has_public_status_page,
            ),
        )

    def get_plan_by_name(self, name: str) -> Plan:
        """Return the plan called ``name``; raise NoRowsError if there is none."""
        return _plan_from_row(self._fetch_one(_GET_PLAN_BY_NAME, (name,)))

    def get_user(self, email: str) -> User:
        """Return the user with ``email``; raise NoRowsError if there is none."""
        return _user_from_row(self._fetch_one(_GET_USER, (email,)))

    def get_user_by_id(self, user_id: uuid.UUID) -> User:
        """Return the user with ``user_id``; raise NoRowsError if there is none."""
        return _user_from_row(self._fetch_one(_GET_USER_BY_ID, (user_id,)))

    def register_user(self, arg: RegisterUserParams) -> None:
        """Insert a user."""
        self._execute(
            _REGISTER_USER,
            (arg.name, arg.email, arg.password_hash, arg.email_verified_at),
        )