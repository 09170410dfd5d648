"""
FastAPI dependencies for authentication and authorization.

Each dependency runs part of the guard pipeline against the request's
``RequestContext`` and raises the matching ``AuthException`` when a guard
ends the request. Role and doctor dependencies depend on
``get_current_active_user`` so identity is always resolved first.
"""
from typing import Optional, Sequence
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..database import get_db
from ..doctors.models import Doctor
from .guards import (
    Guard,
    RequestContext,
    Terminal,
    require_role,
    require_verified_doctor,
    resolve_identity,
    resolve_optional_identity,
    run_guards,
)
from .models import User, UserRole
from .repository import AccountRepository


def get_account_repository(db: Session = Depends(get_db)) -> AccountRepository:
    """
    Account repository bound to the request's database session.
    """
    return AccountRepository(db)


def get_request_context(request: Request) -> RequestContext:
    """
    Return the request's authentication context, creating it on first use.

    The context lives on ``request.state`` and is discarded with the request.
    """
    ctx = getattr(request.state, "auth", None)
    if ctx is None:
        ctx = RequestContext(authorization=request.headers.get("Authorization"))
        request.state.auth = ctx
    return ctx


def enforce(ctx: RequestContext, repository: AccountRepository, guards: Sequence[Guard]) -> RequestContext:
    """
    Run guards and raise the HTTP exception for a terminal outcome.

    Raises:
        AuthException: When a guard ends the request
    """
    outcome = run_guards(ctx, repository, guards)
    if isinstance(outcome, Terminal):
        raise outcome.to_exception()
    return ctx


def get_current_active_user(
    ctx: RequestContext = Depends(get_request_context),
    repository: AccountRepository = Depends(get_account_repository)
) -> User:
    """
    Get the authenticated, active account for the request.

    Raises:
        UnauthenticatedException: If no valid token or active account
        InternalErrorException: If verification fails unexpectedly
    """
    enforce(ctx, repository, [resolve_identity])
    return ctx.account


def require_roles(role: UserRole):
    """
    Dependency factory to require a specific role.

    Args:
        role: Role the caller must have

    Returns:
        Function that checks the resolved account's role
    """
    guard = require_role(role)

    def role_checker(
        current_user: User = Depends(get_current_active_user),
        ctx: RequestContext = Depends(get_request_context),
        repository: AccountRepository = Depends(get_account_repository)
    ) -> User:
        enforce(ctx, repository, [guard])
        return current_user
    return role_checker

# Convenience dependencies for specific roles
require_admin = require_roles(UserRole.ADMIN)
require_patient = require_roles(UserRole.PATIENT)


def require_doctor(
    current_user: User = Depends(get_current_active_user),
    ctx: RequestContext = Depends(get_request_context),
    repository: AccountRepository = Depends(get_account_repository)
) -> Doctor:
    """
    Require a doctor account with a verified profile.

    Returns:
        Doctor: The caller's verified doctor profile
    """
    enforce(ctx, repository, [require_verified_doctor])
    return ctx.doctor_profile


def get_optional_context(
    ctx: RequestContext = Depends(get_request_context),
    repository: AccountRepository = Depends(get_account_repository)
) -> RequestContext:
    """
    Resolve the caller when a valid token is present, otherwise stay anonymous.

    Never raises for missing or bad credentials.
    """
    run_guards(ctx, repository, [resolve_optional_identity])
    return ctx


def get_optional_user(ctx: RequestContext = Depends(get_optional_context)) -> Optional[User]:
    """
    The caller's account, or None for anonymous requests.
    """
    return ctx.account
