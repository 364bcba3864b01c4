import sqlite3
import uuid

import pytest

from sitevigia.queries import CreatePlanParams, NoRowsError, RegisterUserParams
from sitevigia.repository import PlanRepository, UserRepository

SCHEMA = """
CREATE TABLE plans (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    price_monthly TEXT NOT NULL,
    max_websites INTEGER NOT NULL,
    check_interval_seconds INTEGER NOT NULL,
    has_performance_reports BOOLEAN NOT NULL,
    has_seo_audits BOOLEAN NOT NULL,
    has_public_status_page BOOLEAN NOT NULL
);
CREATE TABLE users (
    id TEXT PRIMARY KEY DEFAULT (lower(hex(randomblob(16)))),
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    password_hash TEXT NOT NULL,
    email_verified_at TEXT,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    connection.executescript(SCHEMA)
    yield connection
    connection.close()


def test_plan_round_trip(conn):
    repo = PlanRepository(conn)
    repo.create_plan(
        CreatePlanParams(
            name="freelancer",
            price_monthly="19.90",
            max_websites=10,
            check_interval_seconds=60,
            has_performance_reports=True,
            has_seo_audits=False,
            has_public_status_page=True,
        )
    )
    plan = repo.get_plan_by_name("freelancer")
    assert plan.name == "freelancer"
    assert plan.price_monthly == "19.90"
    assert plan.max_websites == 10
    assert plan.check_interval_seconds == 60
    assert plan.has_performance_reports is True
    assert plan.has_seo_audits is False
    assert plan.has_public_status_page is True


def test_missing_plan_raises_no_rows(conn):
    with pytest.raises(NoRowsError):
        PlanRepository(conn).get_plan_by_name("free")


def test_user_round_trip(conn):
    repo = UserRepository(conn)
    repo.register_user(
        RegisterUserParams(name="Ann", email="ann@example.com", password_hash="placeholder")
    )
    user = repo.get_user_by_email("ann@example.com")
    assert user.name == "Ann"
    assert user.email == "ann@example.com"
    assert user.password_hash == "placeholder"
    assert user.email_verified_at is None
    assert isinstance(user.id, uuid.UUID)


def test_missing_user_raises_no_rows(conn):
    with pytest.raises(NoRowsError):
        UserRepository(conn).get_user_by_email("nobody@example.com")