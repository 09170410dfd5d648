"""
Account Schemas - Pydantic models for serializing authenticated callers.

None of these schemas expose the password hash.
"""
from typing import Optional
from pydantic import BaseModel
from datetime import datetime
from .models import UserRole
from ..doctors.schemas import DoctorResponse


class UserResponse(BaseModel):
    """
    User Response Schema - Account data returned to clients

    Fields:
    - id: Account id
    - email: Email address
    - full_name: Full name
    - role: User role
    - is_active: Whether the account may sign in
    - created_at: Creation timestamp
    """
    id: int
    email: str
    full_name: str
    role: UserRole
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True


class CurrentUserResponse(BaseModel):
    """
    Current User Response Schema - Returned by /auth/me

    ``doctor_profile`` is only filled in for doctor accounts.
    """
    user: UserResponse
    doctor_profile: Optional[DoctorResponse] = None


class TokenResponse(BaseModel):
    """
    Token Response Schema - A freshly issued access token
    """
    message: str
    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str


class AccountStatusUpdate(BaseModel):
    """
    Account Status Update Schema - Used by admins to (de)activate accounts
    """
    is_active: bool


class TokenIssueRequest(BaseModel):
    """
    Token Issue Request Schema - Used by admins to mint a token for an account
    """
    user_id: int
