# buildmate/security/auth.py

from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError
from pydantic import ValidationError as PydanticValidationError

from buildmate.schemas.user import TokenPayload

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


def create_access_token(
    user_id: int,
    email: str,
    secret_key: str,
    algorithm: str = "HS256",
    expires_delta: timedelta | None = None,
) -> str:
    """Creates a signed JWT carrying the user's id and email."""
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta if expires_delta is not None else DEFAULT_TOKEN_LIFETIME)

    # 'exp' is checked by jwt.decode on every verification
    to_encode = {"id": user_id, "email": email, "iat": issued_at, "exp": expire}

    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def verify_token(token: str, secret_key: str, algorithm: str = "HS256") -> TokenPayload | None:
    """
    Verifies a JWT and returns its identity claims.

    Returns None for a bad signature, a different secret, an expired token,
    garbage input, or a payload without usable id/email claims.
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        return None

    try:
        return TokenPayload.model_validate(payload)
    except PydanticValidationError:
        return None
