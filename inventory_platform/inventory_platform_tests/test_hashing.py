"""Tests for the password hasher."""
import pytest

from inventory_platform.inventory_platform.inventory_service.auth import PasswordHasher


def test_verify_matches_own_hash(hasher):
    digest = hasher.hash("correct horse")
    assert hasher.verify("correct horse", digest) is True


def test_verify_rejects_other_password(hasher):
    digest = hasher.hash("other password")
    assert hasher.verify("correct horse", digest) is False


def test_hash_is_salted(hasher):
    first = hasher.hash("same")
    second = hasher.hash("same")
    assert first != second
    assert hasher.verify("same", first)
    assert hasher.verify("same", second)


def test_digest_embeds_scheme_and_cost(hasher):
    digest = hasher.hash("pw")
    assert digest.startswith("$pbkdf2-sha256$1000$")
    assert "pw" not in digest.split("$")


@pytest.mark.parametrize("digest", [
    "garbage",
    "",
    "$pbkdf2-sha256$1000$notbase64",
    "$2b$10$truncated",
    None,
])
def test_malformed_digest_is_a_mismatch(hasher, digest):
    assert hasher.verify("pw", digest) is False


def test_default_cost_is_fixed():
    hasher = PasswordHasher()
    assert hasher.hash("pw").startswith("$pbkdf2-sha256$29000$")


def test_dummy_verify_does_not_raise(hasher):
    hasher.dummy_verify()
