"""
Authentication routes for the clinic system.

Login and registration live in the account service; these endpoints only
work with an already issued token.
"""
from fastapi import APIRouter, Depends
import logging

from ..core.rate_limit import auth_rate_limit
from ..core.security import create_access_token
from .dependencies import get_account_repository, get_current_active_user
from .models import User, UserRole
from .repository import AccountRepository
from ..doctors.schemas import DoctorResponse
from .schemas import CurrentUserResponse, MessageResponse, TokenResponse, UserResponse

# Set up logging
logger = logging.getLogger(__name__)

# Create API router; every auth endpoint passes through the rate-limit policy
router = APIRouter(dependencies=[Depends(auth_rate_limit)])

@router.get("/me", response_model=CurrentUserResponse)
def read_current_user(
    current_user: User = Depends(get_current_active_user),
    repository: AccountRepository = Depends(get_account_repository)
):
    """
    Get the current user's account, with the doctor profile for doctors.
    """
    doctor_profile = None
    if current_user.role == UserRole.DOCTOR:
        doctor_profile = repository.load_doctor_profile_by_account_id(current_user.id)

    return CurrentUserResponse(
        user=UserResponse.model_validate(current_user),
        doctor_profile=DoctorResponse.model_validate(doctor_profile) if doctor_profile else None,
    )

@router.post("/refresh", response_model=TokenResponse)
def refresh_token(current_user: User = Depends(get_current_active_user)):
    """
    Issue a new access token for the current user.
    """
    logger.info(f"Refreshing token for user {current_user.id}")
    return TokenResponse(message="Token refreshed successfully", token=create_access_token(current_user.id))

@router.post("/logout", response_model=MessageResponse)
def logout(current_user: User = Depends(get_current_active_user)):
    """
    Acknowledge a logout.

    Tokens are discarded by the client; the server keeps no revocation list,
    so the token stays valid until it expires.
    """
    logger.info(f"User {current_user.id} logged out")
    return MessageResponse(message="Logged out successfully")
