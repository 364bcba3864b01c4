import sqlite3
import uuid
from datetime import datetime

import pytest

from sitevigia.db_models import Plan, User
from sitevigia.queries import CreatePlanParams, NoRowsError, Queries, RegisterUserParams

SCHEMA = """
CREATE TABLE plans (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
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
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    email_verified_at TIMESTAMP,
    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


def _connect():
    conn = sqlite3.connect(":memory:")
    conn.executescript(SCHEMA)
    return conn


@pytest.fixture
def conn():
    connection = _connect()
    yield connection
    connection.close()


@pytest.fixture
def queries(conn):
    return Queries(conn)


def _plan_params(name="freelancer"):
    return CreatePlanParams(
        name=name,
        price_monthly="19.90",
        max_websites=10,
        check_interval_seconds=60,
        has_performance_reports=True,
        has_seo_audits=False,
        has_public_status_page=True,
    )


def test_create_plan_then_get_by_name(queries):
    params = _plan_params()
    queries.create_plan(params)
    plan = queries.get_plan_by_name(params.name)
    assert isinstance(plan, Plan)
    assert plan.id > 0
    assert plan.name == params.name
    assert plan.price_monthly == params.price_monthly
    assert plan.max_websites == params.max_websites
    assert plan.check_interval_seconds == params.check_interval_seconds
    assert plan.has_performance_reports is True
    assert plan.has_seo_audits is False
    assert plan.has_public_status_page is True


def test_get_plan_by_name_missing_raises(queries):
    with pytest.raises(NoRowsError):
        queries.get_plan_by_name("agency")


def test_duplicate_plan_name_propagates_driver_error(queries):
    queries.create_plan(_plan_params())
    with pytest.raises(sqlite3.IntegrityError):
        queries.create_plan(_plan_params())


def test_register_user_then_get_user(queries):
    params = RegisterUserParams(name="Alice", email="alice@example.com", password_hash="placeholder")
    queries.register_user(params)
    user = queries.get_user(params.email)
    assert isinstance(user, User)
    assert isinstance(user.id, uuid.UUID)
    assert user.name == "Alice"
    assert user.email == params.email
    assert user.password_hash == params.password_hash
    assert user.email_verified_at is None
    assert isinstance(user.created_at, datetime)
    assert user.created_at == user.updated_at


def test_get_user_missing_raises(queries):
    with pytest.raises(NoRowsError):
        queries.get_user("nobody@example.com")


def test_get_user_by_id(conn, queries):
    user_id = uuid.uuid4()
    conn.execute(
        "INSERT INTO users (id, name, email, password_hash, email_verified_at) VALUES (?, ?, ?, ?, ?)",
        (str(user_id), "Bob", "bob@example.com", "placeholder", "2024-03-04T05:06:07+00:00"),
    )
    user = queries.get_user_by_id(user_id)
    assert user.id == user_id
    assert user.email == "bob@example.com"
    assert user.email_verified_at is not None
    assert user.email_verified_at.utcoffset().total_seconds() == 0


def test_get_user_by_id_missing_raises(queries):
    with pytest.raises(NoRowsError):
        queries.get_user_by_id(uuid.uuid4())


def test_with_tx_uses_the_given_connection(queries):
    other = _connect()
    try:
        tx_queries = queries.with_tx(other)
        tx_queries.create_plan(_plan_params("agency"))
        assert tx_queries.get_plan_by_name("agency").name == "agency"
        with pytest.raises(NoRowsError):
            queries.get_plan_by_name("agency")
    finally:
        other.close()


def test_no_rows_error_is_lookup_error(queries):
    with pytest.raises(LookupError):
        queries.get_user("missing@example.com")