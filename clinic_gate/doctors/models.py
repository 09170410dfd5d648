"""
Doctor Model - Stores doctor-specific information.

A doctor account only passes the doctor guard once its profile exists and has
been verified by an administrator.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Numeric, func
from sqlalchemy.orm import relationship
from ..database import Base


class Doctor(Base):
    """
    Doctor Model - Stores doctor-specific information

    Fields:
    - id: Primary key for doctor profile
    - user_id: Foreign key to User model (one profile per account)
    - license_number: Medical license number
    - specialization: Doctor's medical specialization
    - experience: Years of experience
    - consultation_fee: Consultation fee
    - bio: Professional biography
    - is_verified: Set by an administrator; unverified doctors are refused
    - created_at: When the doctor profile was created
    - updated_at: When the doctor profile was last updated
    """
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    license_number = Column(String, unique=True, nullable=False)
    specialization = Column(String, nullable=False)
    experience = Column(Integer, nullable=False, default=0)
    consultation_fee = Column(Numeric(10, 2), nullable=True)
    bio = Column(String, nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="doctor_profile", uselist=False)

    def __repr__(self):
        """String representation of the Doctor model"""
        return f"<Doctor(id={self.id}, user_id={self.user_id}, verified={self.is_verified})>"
