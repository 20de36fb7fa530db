# buildmate/security/dependencies.py

import logging

from fastapi import Depends, Header

from buildmate.core.config import Settings, get_settings
from buildmate.core.errors import AuthError
from buildmate.schemas.user import TokenPayload
from buildmate.security.auth import verify_token

logger = logging.getLogger(__name__)


def get_current_identity(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> TokenPayload:
    """
    Auth gate for protected routes.

    Expects `Authorization: Bearer <token>`. The decoded identity is returned
    without a database lookup; expired and malformed tokens are treated alike.
    """
    if not authorization:
        raise AuthError("No token")

    parts = authorization.split()
    if len(parts) < 2:
        raise AuthError("Invalid token")

    identity = verify_token(parts[1], settings.JWT_SECRET, settings.ALGORITHM)
    if identity is None:
        logger.debug("Rejected bearer token")
        raise AuthError("Invalid token")

    return identity
