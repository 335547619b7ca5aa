"""Tests for bcrypt password hashing."""

import pytest

from foodbuddy_users.services.password_hasher import PasswordHasher


@pytest.fixture()
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


def test_hash_never_equals_plaintext_and_verifies(hasher):
    password_hash = hasher.hash("pw1")

    assert password_hash != "pw1"
    assert hasher.verify("pw1", password_hash)


def test_same_password_hashes_differently(hasher):
    assert hasher.hash("pw1") != hasher.hash("pw1")


def test_wrong_password_is_rejected(hasher):
    assert not hasher.verify("wrong", hasher.hash("pw1"))


@pytest.mark.parametrize("corrupted", ["", "not-a-bcrypt-hash", "$2b$04$short"])
def test_corrupted_hash_reads_as_mismatch(hasher, corrupted):
    assert hasher.verify("pw1", corrupted) is False


def test_cost_factor_is_embedded(hasher):
    assert hasher.hash("pw1").startswith("$2b$04$")
