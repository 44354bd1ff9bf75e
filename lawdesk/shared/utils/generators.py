"""ID and value generators (CUID, temporary passwords)."""

import secrets
import string

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

_TEMP_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_temporary_password(length: int = 8) -> str:
    """Return a random alphanumeric password (one-time credential for new team members).

    Args:
        length: Number of characters; must be positive.

    Returns:
        Password drawn from ASCII letters and digits using the secrets module.
    """
    if length <= 0:
        raise ValueError("Temporary password length must be positive")
    return "".join(secrets.choice(_TEMP_PASSWORD_ALPHABET) for _ in range(length))
