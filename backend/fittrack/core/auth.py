"""JWT access tokens, identity-provider ID token verification and login session ids."""

import hashlib
import secrets
from datetime import datetime, timezone, timedelta
from typing import Any

from jose import jwt

from fittrack.config import settings


def create_access_token(user_id: str, email: str | None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {"sub": str(user_id), "email": email, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])


def decode_id_token(id_token: str) -> dict[str, Any]:
    """Verify an ID token issued by the identity provider and return its claims.

    Audience is checked only when IDP_AUDIENCE is configured.
    """
    options = {"verify_aud": bool(settings.idp_audience)}
    return jwt.decode(
        id_token,
        settings.idp_secret,
        algorithms=[settings.idp_algorithm],
        audience=settings.idp_audience or None,
        options=options,
    )


def claims_to_user(claims: dict[str, Any]) -> dict[str, Any]:
    """Map standard OIDC claims to User columns."""
    return {
        "id": str(claims["sub"]),
        "email": claims.get("email"),
        "first_name": claims.get("first_name") or claims.get("given_name"),
        "last_name": claims.get("last_name") or claims.get("family_name"),
        "profile_image_url": claims.get("profile_image_url") or claims.get("picture"),
    }


def create_session_id() -> str:
    """New opaque session id (plain string; store only its hash)."""
    return secrets.token_urlsafe(32)


def hash_session_id(session_id: str) -> str:
    return hashlib.sha256(session_id.encode("utf-8")).hexdigest()
