# buildmate/services/crud_users.py

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from buildmate.core.errors import ConflictError
from buildmate.db.models import User

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Exact-match lookup by email."""
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, email: str, password_hash: str) -> User:
    """
    Inserts a new account. Callers check for an existing email first to give a
    friendly error; the unique constraint on users.email settles the race when
    two signups for the same address get past that check together.
    """
    new_user = User(email=email, password_hash=password_hash)
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Concurrent signup for an existing email was rejected")
        raise ConflictError("Email already exists")
    db.refresh(new_user)
    return new_user
