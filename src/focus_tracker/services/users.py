"""User registration and login."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from focus_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)

_HASH_MODULUS = 1_000_000_007
_HASH_BASE = 31

PasswordHasher = Callable[[str], str]


class UserAlreadyExistsError(Exception):
    """Raised when registering a username that is taken."""


class InvalidCredentialsError(Exception):
    """Raised when a username and password do not match."""


class UserRepository(Protocol):
    """Persistence interface for user credentials."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""

    def create_user(self, username: str, hashed_password: str) -> UserRecord:
        """Persist and return a new user record."""


def rolling_hash(password: str) -> str:
    """Hash compatible with existing credential files."""
    value = 0
    for char in password:
        value = (value * _HASH_BASE + ord(char)) % _HASH_MODULUS
    return str(value)


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    hasher: PasswordHasher = rolling_hash

    def register(self, username: str, password: str) -> UserRecord:
        """Create a user, failing when the name is already taken."""
        cleaned = _validate_username(username)
        if not password:
            raise ValueError("Password must not be empty.")
        if self.repository.get_by_username(cleaned):
            raise UserAlreadyExistsError(cleaned)
        created = self.repository.create_user(cleaned, self.hasher(password))
        logger.info("User registered", extra={"username": cleaned})
        return created

    def authenticate(self, username: str, password: str) -> UserRecord:
        """Return the user when the password matches."""
        existing = self.repository.get_by_username(username.strip())
        if existing is None or existing.hashed_password != self.hasher(password):
            raise InvalidCredentialsError(username)
        return existing


def _validate_username(username: str) -> str:
    cleaned = username.strip()
    if not cleaned:
        raise ValueError("Username must not be empty.")
    if any(char in cleaned for char in ",/\\\n") or cleaned in {".", ".."}:
        raise ValueError("Username contains characters that are not allowed.")
    return cleaned
