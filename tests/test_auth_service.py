from __future__ import annotations

import pytest

from cashcard.core.security import hash_password, verify_password
from cashcard.domain.roles import CARD_OWNER, NON_OWNER
from cashcard.repositories.sql_repository import SQLUserRepository
from cashcard.services.auth_service import (
    AuthService,
    Caller,
    ForbiddenError,
    InvalidCredentialsError,
    RegistrationError,
)


def test_password_hash_roundtrip():
    stored = hash_password("abc123")
    assert stored.startswith("argon2$")
    assert verify_password("abc123", stored)
    assert not verify_password("abc124", stored)
    assert not verify_password("abc123", None)
    assert not verify_password("abc123", "argon2$not-a-hash")


def test_authenticate_registered_user(temp_db):
    svc = AuthService(SQLUserRepository())
    svc.register_user("sarah1", "abc123", CARD_OWNER)
    assert svc.authenticate("sarah1", "abc123") == Caller("sarah1", CARD_OWNER)


@pytest.mark.parametrize("username,password", [("sarah1", "BAD-PASSWORD"), ("BAD-USER", "abc123"), ("", "")])
def test_authenticate_rejects_bad_credentials(temp_db, username, password):
    svc = AuthService(SQLUserRepository())
    svc.register_user("sarah1", "abc123", CARD_OWNER)
    with pytest.raises(InvalidCredentialsError):
        svc.authenticate(username, password)


def test_require_card_owner(temp_db):
    svc = AuthService(SQLUserRepository())
    assert svc.require_card_owner(Caller("sarah1", CARD_OWNER)).username == "sarah1"
    with pytest.raises(ForbiddenError):
        svc.require_card_owner(Caller("hank-owns-no-cards", NON_OWNER))


@pytest.mark.parametrize("username,password", [("", "pw"), ("a:b", "pw"), ("alice", "")])
def test_register_user_validates_input(temp_db, username, password):
    svc = AuthService(SQLUserRepository())
    with pytest.raises(RegistrationError):
        svc.register_user(username, password)
