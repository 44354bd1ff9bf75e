"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a fixed-length
input so long passwords are not silently truncated. The cost factor comes from
settings.bcrypt_rounds. Both functions are CPU-bound: call them through
asyncio.to_thread from async code.
"""

import base64
import hashlib

import bcrypt

from lawdesk.core.config import get_settings


def _prehash(password: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password. Never raises."""
    try:
        result = bcrypt.checkpw(
            _prehash(plain_password),
            hashed_password.encode("utf-8"),
        )
        return bool(result)
    except (ValueError, TypeError, AttributeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password with a fresh random salt."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(_prehash(password), salt)
    return hashed.decode("utf-8")
