"""
Authentication and authorization for API callers.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from cashcard.core.security import dummy_hash, hash_password, verify_password
from cashcard.domain.roles import CARD_OWNER
from cashcard.repositories.sql_repository import SQLUserRepository

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    pass


class ForbiddenError(AuthError):
    pass


class RegistrationError(AuthError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Caller:
    username: str
    role: str


class AuthService:
    """Checks Basic credentials against the users table and enforces roles."""

    def __init__(self, repository: SQLUserRepository) -> None:
        self.repository = repository

    def authenticate(self, username: str | None, password: str | None) -> Caller:
        name = (username or "").strip()
        user = self.repository.get_user(name) if name else None
        if user is None:
            # same hashing cost as a real check, so unknown names are not cheaper to probe
            verify_password(password or "", dummy_hash())
            logger.warning("Authentication failed for unknown user %r", name)
            raise InvalidCredentialsError("Invalid username or password")
        if not verify_password(password or "", user.password_hash):
            logger.warning("Authentication failed for user %r", name)
            raise InvalidCredentialsError("Invalid username or password")
        return Caller(username=user.username, role=user.role)

    def require_card_owner(self, caller: Caller) -> Caller:
        if caller.role != CARD_OWNER:
            logger.info("User %r with role %r denied cash card access", caller.username, caller.role)
            raise ForbiddenError(f"Role {caller.role} may not manage cash cards")
        return caller

    def register_user(self, username: str, password: str, role: str = CARD_OWNER) -> Caller:
        name = (username or "").strip()
        if not name:
            raise RegistrationError("Username is required")
        if ":" in name:
            raise RegistrationError("Username may not contain ':'")
        if not password:
            raise RegistrationError("Password is required")
        user = self.repository.upsert_user(name, hash_password(password), (role or "").strip() or CARD_OWNER)
        logger.info("Registered user %r with role %r", user.username, user.role)
        return Caller(username=user.username, role=user.role)
