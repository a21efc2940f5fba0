"""Tests for credentials — registration rules, PIN format, PBKDF2 hashing."""

import base64

import pytest

from daybook.core.credentials import (
    HASH_BYTES, generate_salt, hash_secret, validate_pin,
    validate_registration, verify_secret,
)
from daybook.core.errors import ValidationError


def test_validate_registration_rejects_short_username():
    with pytest.raises(ValidationError) as exc:
        validate_registration("  ab  ", "secret1")
    assert exc.value.field == "username"


def test_validate_registration_rejects_short_password():
    with pytest.raises(ValidationError) as exc:
        validate_registration("alice", "12345")
    assert exc.value.field == "password"


def test_validate_registration_accepts_minimums():
    validate_registration("abc", "123456")


@pytest.mark.parametrize("pin", ["123", "12345", "12a4", "", None, "١٢٣٤"])
def test_validate_pin_rejects_non_four_ascii_digits(pin):
    with pytest.raises(ValidationError):
        validate_pin(pin)


def test_validate_pin_accepts_four_digits():
    validate_pin("0042")


def test_hash_is_base64_of_32_bytes_and_salted():
    salt_a, salt_b = generate_salt(), generate_salt()
    assert salt_a != salt_b
    digest = hash_secret("hunter22", salt_a)
    assert len(base64.b64decode(digest)) == HASH_BYTES
    assert digest != hash_secret("hunter22", salt_b)


def test_verify_secret_round_trip():
    salt = generate_salt()
    digest = hash_secret("hunter22", salt)
    assert verify_secret("hunter22", salt, digest)
    assert not verify_secret("hunter23", salt, digest)
