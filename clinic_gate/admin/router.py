"""
Admin Router - Account and doctor management for administrators.

These endpoints change the state the access guards read: account activation
and doctor verification.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from ..auth.dependencies import require_admin
from ..auth.models import User
from ..auth.schemas import AccountStatusUpdate, TokenIssueRequest, TokenResponse, UserResponse
from ..auth.service import issue_token_for_account, set_account_active
from ..database import get_db
from ..doctors.schemas import DoctorResponse, DoctorVerificationUpdate
from ..doctors.service import set_doctor_verification

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter()

@router.put("/doctors/{doctor_id}/verify", response_model=DoctorResponse)
def verify_doctor(
    doctor_id: int,
    update: DoctorVerificationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Verify or unverify a doctor profile.
    """
    logger.info(f"Admin {current_user.id} setting verification of doctor {doctor_id} to {update.is_verified}")
    return set_doctor_verification(db, doctor_id, update.is_verified)

@router.put("/users/{user_id}/status", response_model=UserResponse)
def update_user_status(
    user_id: int,
    update: AccountStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Activate or deactivate an account.
    """
    logger.info(f"Admin {current_user.id} setting active flag of user {user_id} to {update.is_active}")
    return set_account_active(db, user_id, update.is_active)

@router.post("/tokens", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def issue_token(
    token_request: TokenIssueRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Issue an access token for an active account.
    """
    logger.info(f"Admin {current_user.id} issuing token for user {token_request.user_id}")
    return TokenResponse(message="Token issued successfully", token=issue_token_for_account(db, token_request.user_id))
