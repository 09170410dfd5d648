"""
Rate-limit policy point for authentication endpoints.

No limiting algorithm ships with the service. Deployments provide a
``RateLimitPolicy`` by overriding ``get_rate_limit_policy``.
"""
import logging
from fastapi import Depends, Request

from ..auth.exceptions import TooManyRequestsException

# Set up logging
logger = logging.getLogger(__name__)


class RateLimitPolicy:
    """
    Decides whether a request may proceed.
    """
    def allow(self, request: Request) -> bool:
        raise NotImplementedError


class NoopRateLimitPolicy(RateLimitPolicy):
    """Policy that admits every request."""
    def allow(self, request: Request) -> bool:
        return True


_default_policy = NoopRateLimitPolicy()


def get_rate_limit_policy() -> RateLimitPolicy:
    """
    Dependency returning the active rate-limit policy.
    """
    return _default_policy


def auth_rate_limit(request: Request, policy: RateLimitPolicy = Depends(get_rate_limit_policy)) -> None:
    """
    Refuse the request with 429 when the policy does not allow it.
    """
    if not policy.allow(request):
        client_host = request.client.host if request.client else "unknown"
        logger.warning(f"Rate limit exceeded for IP: {client_host}")
        raise TooManyRequestsException()
