"""Business operations for plans and users."""

from __future__ import annotations

from typing import Union

from .dto import CreatePlanRequest, RegisterUserRequest, ValidationError
from .passwords import hash_password
from .queries import CreatePlanParams, NoRowsError, RegisterUserParams
from .repository import PlanRepository, UserRepository

BCRYPT_COST = 12


class ServiceError(Exception):
    """Base class for errors raised by the services."""


class InvalidInputError(ServiceError):
    """The request failed validation."""


class UserAlreadyExistsError(ServiceError):
    """A user with the given e-mail is already registered."""


class PlanAlreadyExistsError(ServiceError):
    """A plan with the given name already exists."""


class HashPasswordError(ServiceError):
    """The password could not be hashed."""


def _validate(request: Union[CreatePlanRequest, RegisterUserRequest]) -> None:
    try:
        request.validate()
    except ValidationError as exc:
        raise InvalidInputError(f"invalid input: {exc}") from exc


class PlanService:
    """Creates plans."""

    def __init__(self, repo: PlanRepository) -> None:
        self._repo = repo

    def create_plan(self, request: CreatePlanRequest) -> None:
        """Validate ``request`` and store it as a new plan."""
        _validate(request)
        try:
            existing = self._repo.get_plan_by_name(request.name)
        except NoRowsError:
            existing = None
        except Exception as exc:
            raise ServiceError(f"failed to check existing user: {exc}") from exc
        if existing is not None and existing.name:
            raise PlanAlreadyExistsError("plan already exists")

        self._repo.create_plan(
            CreatePlanParams(
                name=request.name,
                price_monthly=request.price_monthly,
                max_websites=request.max_websites,
                check_interval_seconds=request.check_interval_seconds,
                has_performance_reports=request.has_performance_reports,
                has_seo_audits=request.has_seo_audits,
                has_public_status_page=request.has_public_status_page,
            )
        )


class UserService:
    """Registers users."""

    def __init__(self, repo: UserRepository) -> None:
        self._repo = repo

    def register_user(self, request: RegisterUserRequest) -> None:
        """Validate ``request``, hash its password and store the new user.

        The name is trimmed and the e-mail trimmed and lower-cased before storing;
        the e-mail verification time is left unset.
        """
        _validate(request)
        try:
            existing = self._repo.get_user_by_email(request.email)
        except NoRowsError:
            existing = None
        except Exception as exc:
            raise ServiceError(f"failed to check existing user: {exc}") from exc
        if existing is not None and existing.email:
            raise UserAlreadyExistsError("user already exists")

        try:
            password_hash = hash_password(request.password, BCRYPT_COST)
        except ValueError as exc:
            raise HashPasswordError(f"failed to hash password: {exc}") from exc

        self._repo.register_user(
            RegisterUserParams(
                name=request.name.strip(),
                email=request.email.strip().lower(),
                password_hash=password_hash,
                email_verified_at=None,
            )
        )