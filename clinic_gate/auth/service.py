"""
Account service layer: admin-side account changes and token issuance.
"""
import logging
from sqlalchemy.orm import Session

from ..core.security import create_access_token
from .exceptions import ResourceNotFoundException
from .models import User

# Set up logging
logger = logging.getLogger(__name__)

def set_account_active(db: Session, user_id: int, is_active: bool) -> User:
    """
    Activate or deactivate an account.

    Deactivated accounts are refused on their next request, even with a
    token that has not expired.

    Args:
        db: Database session
        user_id: ID of the account
        is_active: New active flag

    Returns:
        User: Updated account

    Raises:
        ResourceNotFoundException: If the account does not exist
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise ResourceNotFoundException("User not found")

    user.is_active = is_active
    db.commit()
    db.refresh(user)

    logger.info(f"User {user_id} {'activated' if is_active else 'deactivated'}")
    return user

def issue_token_for_account(db: Session, user_id: int) -> str:
    """
    Issue an access token for an existing, active account.

    Raises:
        ResourceNotFoundException: If the account does not exist or is inactive
    """
    user = db.query(User).filter(User.id == user_id, User.is_active.is_(True)).first()
    if not user:
        raise ResourceNotFoundException("User not found")
    return create_access_token(user.id)
