"""Random human-typeable codes (booking codes, referral codes)."""

import secrets
import string

CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_code(length: int) -> str:
    """Return ``length`` characters drawn uniformly from ``[A-Z0-9]``."""
    if length <= 0:
        raise ValueError("Code length must be positive")
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))
