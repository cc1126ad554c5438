"""
Tests for password hashing, token signing and the login use case.
"""

from __future__ import annotations

import pytest

from app.application.exceptions import Conflict, InvalidCredentials, InvalidInput
from app.application.use_cases.login import LoginUseCase
from app.domain.entities.identity import Role
from app.infrastructure.auth.jwt_tokens import JwtTokenService
from app.infrastructure.auth.passwords import hash_password, verify_password
from app.infrastructure.identity.memory_identity_store import MemoryIdentityStore

TEST_SECRET = "test-secret-with-at-least-thirty-two-bytes"


def _use_case(ttl_minutes: int = 60) -> tuple[LoginUseCase, MemoryIdentityStore]:
    store = MemoryIdentityStore()
    return LoginUseCase(identities=store, tokens=JwtTokenService(TEST_SECRET, ttl_minutes)), store


def test_password_hash_is_salted():
    first = hash_password("hunter22")
    second = hash_password("hunter22")

    assert first != second
    assert "hunter22" not in first
    assert verify_password("hunter22", first)
    assert verify_password("hunter22", second)
    assert not verify_password("hunter23", first)


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("x", "")
    assert not verify_password("x", "no-separator")


def test_register_then_login_by_email_or_name():
    uc, _ = _use_case()
    registered = uc.register(name="Priya", email="Priya@Example.com", password="secret1", phone="98")

    assert registered.identity.email == "priya@example.com"
    assert registered.identity.role == Role.customer

    by_email = uc.login("priya@example.com", "secret1")
    by_name = uc.login("priya", "secret1")
    assert by_email.identity.id == by_name.identity.id == registered.identity.id


def test_login_wrong_password_is_rejected():
    uc, _ = _use_case()
    uc.register(name="Priya", email="priya@example.com", password="secret1")

    with pytest.raises(InvalidCredentials):
        uc.login("priya@example.com", "wrong-pass")
    with pytest.raises(InvalidCredentials):
        uc.login("nobody@example.com", "secret1")


def test_register_duplicate_email_is_conflict():
    uc, _ = _use_case()
    uc.register(name="Priya", email="priya@example.com", password="secret1")
    with pytest.raises(Conflict):
        uc.register(name="Other", email="PRIYA@example.com", password="secret2")


@pytest.mark.parametrize(
    "name,email,password",
    [("", "a@b.com", "secret1"), ("A", "", "secret1"), ("A", "not-an-email", "secret1"), ("A", "a@b.com", "123")],
)
def test_register_validates_input(name, email, password):
    uc, _ = _use_case()
    with pytest.raises(InvalidInput):
        uc.register(name=name, email=email, password=password)


def test_token_resolves_to_identity_and_role():
    uc, store = _use_case()
    admin = store.register(name="admin", email="admin@example.com", password="adminpw", role=Role.admin)

    result = uc.login("admin@example.com", "adminpw")

    assert uc.resolve(result.token) == admin


def test_tampered_or_expired_token_is_rejected():
    uc, _ = _use_case()
    token = uc.register(name="Priya", email="priya@example.com", password="secret1").token

    with pytest.raises(InvalidCredentials):
        uc.resolve(token + "x")

    expired_uc = LoginUseCase(identities=MemoryIdentityStore(), tokens=JwtTokenService(TEST_SECRET, ttl_minutes=-1))
    expired = expired_uc.register(name="Old", email="old@example.com", password="secret1").token
    with pytest.raises(InvalidCredentials):
        expired_uc.resolve(expired)


def test_token_service_requires_secret():
    with pytest.raises(ValueError):
        JwtTokenService("")


def test_duplicate_name_is_conflict():
    uc, _ = _use_case()
    uc.register(name="Asha", email="asha1@example.com", password="first-pass")

    with pytest.raises(Conflict):
        uc.register(name="asha", email="asha2@example.com", password="second-pass")

    assert uc.login("Asha", "first-pass").identity.email == "asha1@example.com"


def test_email_login_is_not_shadowed_by_a_name():
    uc, store = _use_case()
    owner = uc.register(name="Ravi", email="ravi@example.com", password="owner-pass").identity
    store.register(name="ravi@example.com", email="other@example.com", password="other-pass")

    assert uc.login("ravi@example.com", "owner-pass").identity == owner
    with pytest.raises(InvalidCredentials):
        uc.login("ravi@example.com", "other-pass")
