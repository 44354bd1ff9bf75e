"""JWT token creation and verification for authentication.

Tokens are stateless: ``sub`` carries the user id, ``exp`` the expiry
(settings.access_token_expire_days after issue). There is no revocation list.
"""

from datetime import UTC, datetime, timedelta
from typing import cast

from jose import JWTError, jwt

from lawdesk.core.config import get_settings


def create_access_token(
    user_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT for user_id.

    Args:
        user_id: Becomes the ``sub`` claim.
        expires_delta: Optional TTL; else uses settings.access_token_expire_days.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.access_token_expire_days)
    to_encode = {
        "sub": user_id,
        "iat": now,
        "exp": now + expires_delta,
    }
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> str | None:
    """Verify a JWT and return its user id.

    Returns None for any malformed, forged, or expired token, or one
    missing ``sub``/``exp``. Never raises.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except (JWTError, AttributeError, TypeError, ValueError):
        return None
    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        return None
    return sub
