# buildmate/api/v1/users.py

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from buildmate.core.config import Settings, get_settings
from buildmate.core.errors import AuthError, ConflictError, InternalError, ValidationError
from buildmate.db.database import get_db
from buildmate.schemas.user import Credentials, MessageResponse, TokenResponse
from buildmate.security.auth import create_access_token
from buildmate.security.passwords import hash_password, verify_password
from buildmate.services import crud_users

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

MISSING_CREDENTIALS = "Email and password required"
# Same answer for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid credentials"


def _require_credentials(credentials: Credentials | None) -> tuple[str, str]:
    if credentials is None or not credentials.email or not credentials.password:
        raise ValidationError(MISSING_CREDENTIALS)
    return credentials.email, credentials.password


@router.post("/signup", response_model=MessageResponse)
def signup(
    credentials: Credentials | None = None,
    db: Session = Depends(get_db),
):
    """
    Register a new user.
    Checks if the email exists, hashes the password and saves the account.
    The client has to log in separately afterwards.
    """
    email, password = _require_credentials(credentials)

    try:
        if crud_users.get_user_by_email(db, email):
            raise ConflictError("Email already exists")

        crud_users.create_user(db, email, hash_password(password))
    except SQLAlchemyError:
        logger.exception("Signup failed")
        raise InternalError()

    logger.info("Registered user %s", email)
    return MessageResponse(message="User registered")


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: Credentials | None = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Authenticate a user and return a bearer token for {id, email}.
    """
    email, password = _require_credentials(credentials)

    try:
        user = crud_users.get_user_by_email(db, email)
    except SQLAlchemyError:
        logger.exception("Login lookup failed")
        raise InternalError()

    if not user or not verify_password(password, user.password_hash):
        raise AuthError(INVALID_CREDENTIALS, status_code=status.HTTP_400_BAD_REQUEST)

    token = create_access_token(
        user_id=user.id,
        email=user.email,
        secret_key=settings.JWT_SECRET,
        algorithm=settings.ALGORITHM,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return TokenResponse(token=token)
