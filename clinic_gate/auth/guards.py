"""
Access guards run before every protected route.

Each guard takes the request's ``RequestContext`` and the account repository
and returns either ``PROCEED`` or a ``Terminal`` outcome carrying the status
and message sent back to the caller. ``run_guards`` applies them in order and
stops at the first terminal outcome.

The identity resolver must run before any role or doctor guard; those guards
read ``ctx.account`` and assume it is set.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from fastapi import status

from ..core.security import decode_access_token
from ..doctors.models import Doctor
from .exceptions import (
    AuthException,
    CredentialExpiredError,
    ForbiddenException,
    InternalErrorException,
    InvalidCredentialError,
    UnauthenticatedException,
)
from .models import User, UserRole
from .repository import AccountRepository

# Set up logging
logger = logging.getLogger(__name__)

# Messages returned to clients
NO_TOKEN = "Access denied. No token provided."
INVALID_TOKEN = "Invalid token."
TOKEN_EXPIRED = "Token expired."
ACCOUNT_NOT_FOUND = "Invalid token. User not found."
ACCOUNT_DEACTIVATED = "Account is deactivated."
TOKEN_VERIFICATION_ERROR = "Server error during token verification."
DOCTOR_PROFILE_NOT_FOUND = "Doctor profile not found."
DOCTOR_PROFILE_NOT_VERIFIED = "Doctor profile not verified."
DOCTOR_VERIFICATION_ERROR = "Server error during doctor verification."
AUTHORIZATION_ERROR = "Server error during request authorization."


@dataclass
class RequestContext:
    """
    Per-request authentication state, filled in by the guards.

    Attributes:
        authorization: Raw ``Authorization`` header, if any
        account: Account resolved from the bearer token
        doctor_profile: Doctor profile of the account, when loaded
    """
    authorization: Optional[str] = None
    account: Optional[User] = None
    doctor_profile: Optional[Doctor] = None

    @property
    def is_authenticated(self) -> bool:
        return self.account is not None


class Proceed:
    """Outcome letting the request continue to the next stage."""
    def __repr__(self):
        return "PROCEED"


PROCEED = Proceed()


@dataclass(frozen=True)
class Terminal:
    """Outcome ending the request with a status code and message."""
    status_code: int
    message: str

    @classmethod
    def unauthenticated(cls, message: str) -> "Terminal":
        return cls(status.HTTP_401_UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str) -> "Terminal":
        return cls(status.HTTP_403_FORBIDDEN, message)

    @classmethod
    def internal_error(cls, message: str) -> "Terminal":
        return cls(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    def to_exception(self) -> AuthException:
        """Build the HTTP exception rendered for this outcome."""
        if self.status_code == status.HTTP_401_UNAUTHORIZED:
            return UnauthenticatedException(self.message)
        if self.status_code == status.HTTP_403_FORBIDDEN:
            return ForbiddenException(self.message)
        return InternalErrorException(self.message)


Outcome = Union[Proceed, Terminal]
Guard = Callable[[RequestContext, AccountRepository], Outcome]


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an ``Authorization`` header.

    A header without the ``Bearer`` scheme is returned as-is so that it fails
    verification as an invalid token instead of looking absent.
    """
    if not authorization or not authorization.strip():
        return None
    scheme, _, credentials = authorization.strip().partition(" ")
    if scheme.lower() == "bearer":
        return credentials.strip() or None
    return authorization.strip()


def _load_account(token: str, repository: AccountRepository) -> Optional[User]:
    subject = decode_access_token(token)
    try:
        account_id = int(subject)
    except ValueError:
        raise InvalidCredentialError(f"Token subject is not an account id: {subject!r}")
    return repository.load_account_by_id(account_id)


def resolve_identity(ctx: RequestContext, repository: AccountRepository) -> Outcome:
    """
    Establish the caller's account from the bearer token.

    Fails with 401 when the token is missing, invalid or expired, when the
    account no longer exists, or when it is deactivated. Unexpected failures
    while verifying or loading are reported as 500.
    """
    token = extract_bearer_token(ctx.authorization)
    if token is None:
        return Terminal.unauthenticated(NO_TOKEN)

    try:
        account = _load_account(token, repository)
    except CredentialExpiredError:
        return Terminal.unauthenticated(TOKEN_EXPIRED)
    except InvalidCredentialError:
        return Terminal.unauthenticated(INVALID_TOKEN)
    except Exception:
        logger.exception("Token verification failed unexpectedly")
        return Terminal.internal_error(TOKEN_VERIFICATION_ERROR)

    if account is None:
        logger.warning("Valid token presented for a missing account")
        return Terminal.unauthenticated(ACCOUNT_NOT_FOUND)

    if not account.is_active:
        logger.info(f"Rejected request from deactivated account {account.id}")
        return Terminal.unauthenticated(ACCOUNT_DEACTIVATED)

    ctx.account = account
    return PROCEED


def require_role(role: UserRole) -> Guard:
    """
    Build a guard admitting only accounts with the given role.

    Args:
        role: Role the resolved account must have

    Returns:
        Guard: Predicate over an already-resolved context
    """
    message = f"Access denied. {role.value.capitalize()} privileges required."

    def role_guard(ctx: RequestContext, repository: AccountRepository) -> Outcome:
        if ctx.account.role != role:
            return Terminal.forbidden(message)
        return PROCEED

    role_guard.__name__ = f"require_{role.value}"
    return role_guard


require_admin = require_role(UserRole.ADMIN)
require_patient = require_role(UserRole.PATIENT)
require_doctor_role = require_role(UserRole.DOCTOR)


def require_verified_doctor(ctx: RequestContext, repository: AccountRepository) -> Outcome:
    """
    Admit doctors whose profile exists and has been verified.

    Runs the doctor role check, then looks up the profile linked to the
    resolved account and attaches it to the context.
    """
    outcome = require_doctor_role(ctx, repository)
    if isinstance(outcome, Terminal):
        return outcome

    try:
        doctor = repository.load_doctor_profile_by_account_id(ctx.account.id)
    except Exception:
        logger.exception(f"Doctor profile lookup failed for account {ctx.account.id}")
        return Terminal.internal_error(DOCTOR_VERIFICATION_ERROR)

    if doctor is None:
        return Terminal.forbidden(DOCTOR_PROFILE_NOT_FOUND)

    if not doctor.is_verified:
        return Terminal.forbidden(DOCTOR_PROFILE_NOT_VERIFIED)

    ctx.doctor_profile = doctor
    return PROCEED


def resolve_optional_identity(ctx: RequestContext, repository: AccountRepository) -> Outcome:
    """
    Attach the caller's account when possible; never refuse the request.

    Any failure leaves the context unresolved. Doctors also get their
    profile attached, which may be None.
    """
    token = extract_bearer_token(ctx.authorization)
    if token is None:
        return PROCEED

    try:
        account = _load_account(token, repository)
    except Exception as e:
        logger.debug(f"Continuing anonymously: {e.__class__.__name__}")
        return PROCEED

    if account is None or not account.is_active:
        return PROCEED

    ctx.account = account

    if account.role == UserRole.DOCTOR:
        try:
            ctx.doctor_profile = repository.load_doctor_profile_by_account_id(account.id)
        except Exception:
            logger.warning(f"Could not load doctor profile for account {account.id}", exc_info=True)

    return PROCEED


def run_guards(ctx: RequestContext, repository: AccountRepository, guards: Sequence[Guard]) -> Outcome:
    """
    Apply guards left to right, stopping at the first terminal outcome.

    An exception escaping a guard is turned into a 500 outcome.
    """
    for guard in guards:
        try:
            outcome = guard(ctx, repository)
        except Exception:
            logger.exception(f"Guard {getattr(guard, '__name__', guard)!r} raised")
            return Terminal.internal_error(AUTHORIZATION_ERROR)
        if isinstance(outcome, Terminal):
            return outcome
    return PROCEED
