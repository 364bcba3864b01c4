"""Request payloads accepted by the services, with their validation rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Sequence, Tuple

_EMAIL = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*$"
)
_MIN_PRICE = Decimal("0.01")

_Check = Tuple[str, Callable[[Any], bool]]


class ValidationError(ValueError):
    """Raised when a request breaks one or more field rules.

    ``failures`` holds ``(field, tag)`` pairs, one per failing field, in field order.
    """

    def __init__(self, type_name: str, failures: Sequence[Tuple[str, str]]) -> None:
        self.failures: Tuple[Tuple[str, str], ...] = tuple(failures)
        super().__init__(
            "\n".join(
                f"Key: '{type_name}.{name}' Error:Field validation for "
                f"'{name}' failed on the '{tag}' tag"
                for name, tag in self.failures
            )
        )


def _required(value: Any) -> bool:
    return bool(value)


def _min_len(limit: int) -> _Check:
    return ("min", lambda value: len(value) >= limit)


def _max_len(limit: int) -> _Check:
    return ("max", lambda value: len(value) <= limit)


def _min(limit: int) -> _Check:
    return ("min", lambda value: value >= limit)


def _max(limit: int) -> _Check:
    return ("max", lambda value: value <= limit)


def _price_at_least_minimum(value: str) -> bool:
    try:
        price = Decimal(value.strip())
    except InvalidOperation:
        return False
    return price.is_finite() and price >= _MIN_PRICE


def _is_email(value: str) -> bool:
    return _EMAIL.match(value) is not None


def _check(model: Any, rules: Dict[str, Sequence[_Check]]) -> None:
    failures = []
    for name, checks in rules.items():
        value = getattr(model, name)
        failed = next((tag for tag, ok in checks if not ok(value)), None)
        if failed is not None:
            failures.append((name, failed))
    if failures:
        raise ValidationError(type(model).__name__, failures)


_REQUIRED: _Check = ("required", _required)

_PLAN_RULES: Dict[str, Sequence[_Check]] = {
    "name": (_REQUIRED, _min_len(1), _max_len(100)),
    "price_monthly": (_REQUIRED, ("min", _price_at_least_minimum)),
    "max_websites": (_REQUIRED, _min(1), _max(100)),
    "check_interval_seconds": (_REQUIRED, _min(1), _max(100)),
    "has_performance_reports": (_REQUIRED,),
    "has_seo_audits": (_REQUIRED,),
    "has_public_status_page": (_REQUIRED,),
}

_USER_RULES: Dict[str, Sequence[_Check]] = {
    "name": (_REQUIRED, _min_len(1), _max_len(255)),
    "email": (_REQUIRED, ("email", _is_email), _max_len(255)),
    "password": (_REQUIRED, _min_len(8), _max_len(128)),
}


@dataclass(frozen=True, kw_only=True)
class CreatePlanRequest:
    """Payload for creating a plan.

    Every flag is required, which means it must be true to pass validation.
    """

    name: str = ""
    price_monthly: str = ""
    max_websites: int = 0
    check_interval_seconds: int = 0
    has_performance_reports: bool = False
    has_seo_audits: bool = False
    has_public_status_page: bool = False

    def validate(self) -> "CreatePlanRequest":
        """Return self if every rule holds; raise ValidationError otherwise."""
        _check(self, _PLAN_RULES)
        return self


@dataclass(frozen=True, kw_only=True)
class RegisterUserRequest:
    """Payload for registering a user."""

    name: str = ""
    email: str = ""
    password: str = ""

    def validate(self) -> "RegisterUserRequest":
        """Return self if every rule holds; raise ValidationError otherwise."""
        _check(self, _USER_RULES)
        return self