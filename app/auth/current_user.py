"""
Bearer-token authentication.

Tokens are HS256 JWTs issued by the identity provider; ``sub`` is the
user id. The caller's profile is provisioned on first authentication.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db import get_db
from app.exceptions import UnauthenticatedError
from app.infra.logging_config import get_logger
from app.services.profile_service import ProfileService

logger = get_logger("auth")

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    id: UUID
    email: str
    display_name: Optional[str] = None


def decode_access_token(token: str) -> CurrentUser:
    """Verify the token and map its claims. Raises UnauthenticatedError."""
    settings = get_settings()
    options = {"require": ["sub", "exp"]}
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=settings.jwt_algorithm_list,
            audience=settings.jwt_audience or None,
            options={**options, "verify_aud": bool(settings.jwt_audience)},
        )
    except jwt.PyJWTError as e:
        raise UnauthenticatedError(f"Invalid token: {e}") from e

    try:
        user_id = UUID(str(claims["sub"]))
    except ValueError as e:
        raise UnauthenticatedError("Invalid token subject") from e

    metadata = claims.get("user_metadata") or {}
    return CurrentUser(
        id=user_id,
        email=claims.get("email") or "",
        display_name=metadata.get("display_name") if isinstance(metadata, dict) else None,
    )


def get_current_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> CurrentUser:
    """FastAPI dependency resolving the caller; provisions the profile if missing."""
    if creds is None or creds.scheme.lower() != "bearer" or not creds.credentials:
        raise UnauthenticatedError("No authorization header")
    user = decode_access_token(creds.credentials)
    ProfileService(db).get_or_create_profile(
        user.id, email=user.email, display_name=user.display_name
    )
    logger.debug("User authenticated: %s", user.id)
    return user
