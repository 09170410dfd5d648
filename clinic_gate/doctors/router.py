"""
Doctor Router - Doctor profile endpoints.

The public listing serves anonymous and signed-in callers alike; the profile
endpoint is limited to verified doctors.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import get_optional_context, require_doctor
from ..auth.guards import RequestContext
from ..database import get_db
from .models import Doctor
from .schemas import DoctorListResponse, DoctorResponse, ViewerSummary
from .service import get_verified_doctors

router = APIRouter()

@router.get("/", response_model=DoctorListResponse)
def list_doctors(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_optional_context)
):
    """
    Get the list of verified doctors.

    When the caller sends a valid token the response also describes the
    viewer; bad or missing tokens are treated as anonymous.
    """
    doctors = get_verified_doctors(db)

    viewer = None
    if ctx.account is not None:
        viewer = ViewerSummary(
            user_id=ctx.account.id,
            role=ctx.account.role.value,
            doctor_id=ctx.doctor_profile.id if ctx.doctor_profile else None,
        )

    return DoctorListResponse(
        doctors=[DoctorResponse.model_validate(doctor) for doctor in doctors],
        total=len(doctors),
        viewer=viewer,
    )

@router.get("/profile/me", response_model=DoctorResponse)
def get_my_doctor_profile(doctor: Doctor = Depends(require_doctor)):
    """
    Get the current doctor's profile

    This endpoint allows verified doctors to view their own profile.
    """
    return doctor
