"""Row types returned by the database query layer."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True, kw_only=True)
class Incident:
    """A period during which a monitored website was down."""

    id: uuid.UUID
    website_id: uuid.UUID
    started_at: datetime
    ended_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None
    cause: str


@dataclass(frozen=True, kw_only=True)
class PerformanceReport:
    """Timing and size measurements for one page load."""

    id: int
    website_id: uuid.UUID
    checked_at: datetime
    ttfb_ms: Optional[int] = None
    lcp_ms: Optional[int] = None
    full_load_time_ms: Optional[int] = None
    page_size_kb: Optional[int] = None


@dataclass(frozen=True, kw_only=True)
class Plan:
    """A subscription plan; the price is kept as the database's decimal text."""

    id: int
    name: str
    price_monthly: str
    max_websites: int
    check_interval_seconds: int
    has_performance_reports: bool
    has_seo_audits: bool
    has_public_status_page: bool


@dataclass(frozen=True, kw_only=True)
class SeoAudit:
    """An SEO audit whose results are stored as raw JSON."""

    id: int
    website_id: uuid.UUID
    audited_at: datetime
    results: bytes


@dataclass(frozen=True, kw_only=True)
class Subscription:
    """A user's subscription to a plan."""

    id: uuid.UUID
    user_id: uuid.UUID
    plan_id: int
    status: str
    stripe_subscription_id: Optional[str] = None
    current_period_ends_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, kw_only=True)
class UptimeCheck:
    """The outcome of a single availability check."""

    id: int
    website_id: uuid.UUID
    checked_at: datetime
    is_up: bool
    response_time_ms: int
    status_code: int
    error_message: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class User:
    """A registered account."""

    id: uuid.UUID
    name: str
    email: str
    password_hash: str
    email_verified_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, kw_only=True)
class Website:
    """A website monitored on behalf of a user."""

    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    url: str
    is_active: bool
    check_interval_seconds: int
    last_checked_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime