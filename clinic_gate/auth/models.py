"""
User Model - Stores the account record every request is authenticated against.
"""
import enum

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base


class UserRole(str, enum.Enum):
    """
    Enumeration for user roles in the clinic system.

    Roles:
    - PATIENT: Patients who book appointments
    - DOCTOR: Medical practitioners; access also needs a verified doctor profile
    - ADMIN: System administrators
    """
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"


class User(Base):
    """
    User Model - Stores all user accounts

    Fields:
    - id: Primary key, used as the token subject
    - email: Unique email address
    - full_name: User's complete name
    - password_hash: Hashed password, managed outside the access gate
    - role: User role (patient, doctor, admin)
    - is_active: Deactivated accounts are rejected on every request
    - created_at: Timestamp when user was created
    - updated_at: Timestamp when user was last updated
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(UserRole, values_callable=lambda roles: [r.value for r in roles]),
                  default=UserRole.PATIENT, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    doctor_profile = relationship("Doctor", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User(id={self.id}, role='{self.role.value if self.role else None}')>"
