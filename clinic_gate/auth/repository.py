"""
Read-only account lookups used by the access guards.
"""
from typing import Optional
from sqlalchemy.orm import Session, defer

from .models import User
from ..doctors.models import Doctor


class AccountRepository:
    """
    Loads accounts and doctor profiles for one request.

    Wraps the request's database session; the guards never write through it.
    """
    def __init__(self, db: Session):
        self.db = db

    def load_account_by_id(self, account_id: int) -> Optional[User]:
        """
        Load an account by id without its password hash.

        Touching ``password_hash`` on the returned object raises instead of
        issuing a second query.
        """
        return (
            self.db.query(User)
            .options(defer(User.password_hash, raiseload=True))
            .filter(User.id == account_id)
            .first()
        )

    def load_doctor_profile_by_account_id(self, account_id: int) -> Optional[Doctor]:
        """Load the doctor profile owned by an account, if any."""
        return self.db.query(Doctor).filter(Doctor.user_id == account_id).first()
