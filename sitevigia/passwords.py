"""Password hashing and verification with bcrypt."""

from __future__ import annotations

import bcrypt

MIN_COST = 4
MAX_COST = 31
DEFAULT_COST = 10
_MAX_PASSWORD_BYTES = 72


def hash_password(password: str, cost: int = DEFAULT_COST) -> str:
    """Return a bcrypt hash of ``password``.

    A cost below the minimum falls back to the default. Raises ValueError for a
    cost above the maximum or a password longer than 72 bytes.
    """
    if cost < MIN_COST:
        cost = DEFAULT_COST
    if cost > MAX_COST:
        raise ValueError(f"bcrypt: cost {cost} is outside allowed range ({MIN_COST},{MAX_COST})")
    encoded = password.encode()
    if len(encoded) > _MAX_PASSWORD_BYTES:
        raise ValueError("bcrypt: password length exceeds 72 bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=cost)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Return True if ``password`` matches ``password_hash``; False otherwise."""
    encoded = password.encode()[:_MAX_PASSWORD_BYTES]
    try:
        return bcrypt.checkpw(encoded, password_hash.encode())
    except ValueError:
        return False