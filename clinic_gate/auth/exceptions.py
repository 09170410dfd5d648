"""
Authentication-specific exceptions.

Credential errors are raised by the token codec and never reach a client
directly; the HTTP-facing exceptions carry the status and message returned to
the caller.
"""
from fastapi import status
from ..exceptions import AppException


class CredentialError(Exception):
    """Base class for token verification failures."""


class InvalidCredentialError(CredentialError):
    """Raised when a token is malformed, unsigned or signed with another key."""


class CredentialExpiredError(CredentialError):
    """Raised when a correctly signed token is past its expiry."""


class AuthException(AppException):
    """Base class for authentication and authorization exceptions."""
    def __init__(self, status_code: int, message: str, headers=None):
        super().__init__(status_code=status_code, message=message, headers=headers)

class UnauthenticatedException(AuthException):
    """Exception raised when the caller's identity could not be established."""
    def __init__(self, message: str = "Access denied. No token provided."):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=message,
            headers={"WWW-Authenticate": "Bearer"},
        )

class ForbiddenException(AuthException):
    """Exception raised when an authenticated caller is denied by policy."""
    def __init__(self, message: str = "Access denied."):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, message=message)

class InternalErrorException(AuthException):
    """Exception raised when a collaborator fails while authorizing a request."""
    def __init__(self, message: str = "Server error during token verification."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=message)

class ResourceNotFoundException(AppException):
    """Exception raised when a requested record does not exist."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message)

class TooManyRequestsException(AppException):
    """Exception raised when the rate-limit policy refuses a request."""
    def __init__(self, message: str = "Too many requests from this IP, please try again later."):
        super().__init__(status_code=status.HTTP_429_TOO_MANY_REQUESTS, message=message)
