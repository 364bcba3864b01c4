"""API-facing domain models and their JSON representation."""

from __future__ import annotations

import dataclasses
import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

SEOResults = Dict[str, Any]

_HIDDEN = "-"
_HIDDEN_FIELD = {"json": _HIDDEN}

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass(kw_only=True)
class Incident:
    """A period during which a website was unreachable."""

    id: uuid.UUID
    website_id: uuid.UUID
    started_at: datetime
    ended_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None
    cause: str


@dataclass(kw_only=True)
class PerformanceReport:
    """Timing and size measurements for one page load."""

    id: int
    website_id: uuid.UUID
    checked_at: datetime
    ttfb_ms: Optional[int] = None
    lcp_ms: Optional[int] = None
    full_load_time_ms: Optional[int] = None
    page_size_kb: Optional[int] = None


@dataclass(kw_only=True)
class Plan:
    """A subscription plan such as free, freelancer or agency."""

    id: int
    name: str
    price_monthly: float
    max_websites: int
    check_interval_seconds: int
    has_performance_reports: bool
    has_seo_audits: bool
    has_public_status_page: bool


@dataclass(kw_only=True)
class SEOAudit:
    """An SEO audit with its free-form results."""

    id: int
    website_id: uuid.UUID
    audited_at: datetime
    results: Optional[SEOResults] = None


@dataclass(kw_only=True)
class Subscription:
    """A user's subscription; status is active, cancelled or past_due."""

    id: uuid.UUID
    user_id: uuid.UUID
    plan_id: int
    status: str
    stripe_subscription_id: Optional[str] = None
    current_period_ends_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


@dataclass(kw_only=True)
class UptimeCheck:
    """The outcome of a single availability check."""

    id: int
    website_id: uuid.UUID
    checked_at: datetime
    is_up: bool
    response_time_ms: int
    status_code: Optional[int] = None
    error_message: Optional[str] = None


@dataclass(kw_only=True)
class User:
    """A registered account; the password hash never appears in JSON."""

    id: uuid.UUID
    name: str
    email: str
    password_hash: str = field(repr=False, metadata=_HIDDEN_FIELD)
    email_verified_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


@dataclass(kw_only=True)
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


@dataclass(kw_only=True)
class WebsiteWithUser(Website):
    """A website together with its owner's name and e-mail."""

    user_name: str
    user_email: str


def seo_results_value(results: Optional[SEOResults]) -> Optional[bytes]:
    """Encode SEO results as compact JSON bytes for storage; None stays None."""
    if results is None:
        return None
    text = json.dumps(results, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def seo_results_scan(value: Any) -> Optional[SEOResults]:
    """Decode a stored JSON value into SEO results.

    Accepts ``None``, bytes or str; raises TypeError for anything else and
    ValueError when the JSON is not an object.
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        text = bytes(value).decode("utf-8")
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError("cannot scan non-string value into SEOResults")
    decoded = json.loads(text)
    if decoded is None:
        return None
    if not isinstance(decoded, dict):
        raise ValueError(f"cannot unmarshal {type(decoded).__name__} into SEOResults")
    return decoded


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    total = int(offset.total_seconds()) if offset else 0
    if total == 0:
        return text + "Z"
    sign = "+" if total > 0 else "-"
    total = abs(total)
    return f"{text}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


def _json_value(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return _format_time(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_json_dict(value)
    if isinstance(value, dict):
        return {str(key): _json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_value(item) for item in value]
    return value


def to_json_dict(model: Any) -> Dict[str, Any]:
    """Return the JSON object for a model, with hidden fields left out."""
    if not dataclasses.is_dataclass(model) or isinstance(model, type):
        raise TypeError(f"expected a model instance, got {type(model).__name__}")
    return {
        f.metadata.get("json", f.name): _json_value(getattr(model, f.name))
        for f in dataclasses.fields(model)
        if f.metadata.get("json") != _HIDDEN
    }