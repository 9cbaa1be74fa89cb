"""Domain models for the focus tracker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the credential file."""

    username: str
    hashed_password: str
