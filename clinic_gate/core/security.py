"""
Core security utilities: issuing and verifying access tokens.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Union
from jose import jwt, JWTError, ExpiredSignatureError
import logging

from ..config import settings
from ..auth.exceptions import InvalidCredentialError, CredentialExpiredError

# Set up logging
logger = logging.getLogger(__name__)

# Claims every access token must carry
_DECODE_OPTIONS = {"require_exp": True, "require_sub": True}


def create_access_token(subject_id: Union[int, str], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT access token for an account.

    Args:
        subject_id: Account identifier stored in the ``sub`` claim
        expires_delta: Token lifetime (default: configured lifetime, 7 days)

    Returns:
        str: Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta if expires_delta is not None else settings.access_token_lifetime)

    to_encode = {
        "sub": str(subject_id),
        "iat": issued_at,
        "exp": expire,
    }

    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> str:
    """
    Verify a JWT access token and return its subject.

    Only the configured algorithm is accepted, so unsigned ("none") tokens and
    tokens signed with another algorithm or key are rejected.

    Args:
        token: JWT token string

    Returns:
        str: The subject (account id) carried by the token

    Raises:
        CredentialExpiredError: If the signature is valid but the token expired
        InvalidCredentialError: If the token is malformed or fails verification
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options=_DECODE_OPTIONS,
        )
    except ExpiredSignatureError as e:
        logger.debug("Rejected expired access token")
        raise CredentialExpiredError(str(e)) from e
    except JWTError as e:
        logger.debug(f"Rejected access token: {e}")
        raise InvalidCredentialError(str(e)) from e

    subject = payload.get("sub")
    if not subject:
        raise InvalidCredentialError("Token has no subject")
    return subject
