"""
Doctor Service - Business logic for doctor profiles.
"""
from typing import List
from sqlalchemy.orm import Session
import logging

from ..auth.exceptions import ResourceNotFoundException
from .models import Doctor

# Set up logging
logger = logging.getLogger(__name__)

def get_verified_doctors(db: Session) -> List[Doctor]:
    """
    Get all verified doctor profiles.

    Args:
        db: Database session

    Returns:
        List[Doctor]: Verified doctors ordered by id
    """
    return db.query(Doctor).filter(Doctor.is_verified.is_(True)).order_by(Doctor.id).all()

def set_doctor_verification(db: Session, doctor_id: int, is_verified: bool) -> Doctor:
    """
    Verify or unverify a doctor profile.

    Args:
        db: Database session
        doctor_id: ID of the doctor profile
        is_verified: New verification flag

    Returns:
        Doctor: Updated doctor profile

    Raises:
        ResourceNotFoundException: If doctor profile not found
    """
    doctor = db.query(Doctor).filter(Doctor.id == doctor_id).first()
    if not doctor:
        raise ResourceNotFoundException("Doctor not found")

    doctor.is_verified = is_verified
    db.commit()
    db.refresh(doctor)

    logger.info(f"Doctor {doctor_id} {'verified' if is_verified else 'unverified'}")
    return doctor
