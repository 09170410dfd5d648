"""
Doctor Schemas - Pydantic models for doctor profile serialization.
"""
from typing import List, Optional
from pydantic import BaseModel
from decimal import Decimal
from datetime import datetime


class DoctorResponse(BaseModel):
    """
    Doctor Response Schema - Used when returning doctor profile data

    Fields:
    - id: Doctor profile id
    - user_id: Owning account id
    - license_number: Medical license number
    - specialization: Medical specialization
    - experience: Years of experience
    - consultation_fee: Consultation fee
    - bio: Professional biography
    - is_verified: Whether an administrator verified the profile
    """
    id: int
    user_id: int
    license_number: str
    specialization: str
    experience: int
    consultation_fee: Optional[Decimal] = None
    bio: Optional[str] = None
    is_verified: bool
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True


class DoctorVerificationUpdate(BaseModel):
    """
    Doctor Verification Update Schema - Used by admins to verify a doctor
    """
    is_verified: bool


class ViewerSummary(BaseModel):
    """
    Viewer Summary Schema - Who is browsing, when a token was presented
    """
    user_id: int
    role: str
    doctor_id: Optional[int] = None


class DoctorListResponse(BaseModel):
    """
    Doctor List Response Schema - Public list of verified doctors

    Fields:
    - doctors: Verified doctor profiles
    - total: Number of doctors returned
    - viewer: The resolved caller, or None for anonymous requests
    """
    doctors: List[DoctorResponse]
    total: int
    viewer: Optional[ViewerSummary] = None
