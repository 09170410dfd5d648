"""
Patient Router - Endpoints limited to patient accounts.
"""
from fastapi import APIRouter, Depends

from ..auth.dependencies import require_patient
from ..auth.models import User
from ..auth.schemas import UserResponse

router = APIRouter()

@router.get("/me", response_model=UserResponse)
def get_my_patient_account(current_user: User = Depends(require_patient)):
    """
    Get the current patient's account.
    """
    return current_user
