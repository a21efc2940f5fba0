"""Credentials — registration rules and salted PBKDF2 hashing for passwords and PINs.

Invariants:
    - Hash = PBKDF2-HMAC-SHA256, >= MIN_ITERATIONS rounds, 32-byte output
    - Salt and hash stored as base64 text
    - Comparison is constant-time (hmac.compare_digest)
    - A PIN is exactly PIN_LENGTH ASCII digits
    - Usernames compare by username_key (stripped, Unicode casefolded)
"""

import base64
import hashlib
import hmac
import secrets

from daybook.core.domain_types import (
    MIN_USERNAME_LENGTH, MIN_PASSWORD_LENGTH, PIN_LENGTH,
)
from daybook.core.errors import ValidationError

MIN_ITERATIONS: int = 10_000
HASH_BYTES: int = 32
DEFAULT_SALT_BYTES: int = 32


def validate_registration(username: str | None, password: str | None) -> None:
    """Raise ValidationError for a short username or password."""
    if not username or len(username.strip()) < MIN_USERNAME_LENGTH:
        raise ValidationError(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters long.",
            "username",
        )
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.",
            "password",
        )


def username_key(username: str) -> str:
    return username.strip().casefold()


def validate_pin(pin: str | None) -> None:
    if (
        pin is None
        or len(pin) != PIN_LENGTH
        or not pin.isascii()
        or not pin.isdigit()
    ):
        raise ValidationError(f"PIN must be exactly {PIN_LENGTH} digits.", "pin")


def generate_salt(num_bytes: int = DEFAULT_SALT_BYTES) -> str:
    return base64.b64encode(secrets.token_bytes(num_bytes)).decode("ascii")


def hash_secret(secret: str, salt: str, iterations: int = MIN_ITERATIONS) -> str:
    """Derive the base64 PBKDF2-HMAC-SHA256 hash of `secret` under `salt`."""
    derived = hashlib.pbkdf2_hmac(
        "sha256",
        secret.encode("utf-8"),
        base64.b64decode(salt),
        max(iterations, MIN_ITERATIONS),
        dklen=HASH_BYTES,
    )
    return base64.b64encode(derived).decode("ascii")


def verify_secret(
    secret: str, salt: str, expected_hash: str, iterations: int = MIN_ITERATIONS,
) -> bool:
    candidate = hash_secret(secret, salt, iterations)
    return hmac.compare_digest(candidate.encode("ascii"), expected_hash.encode("ascii"))
