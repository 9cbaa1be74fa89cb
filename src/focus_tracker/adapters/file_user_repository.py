"""File-backed credential store."""

from dataclasses import dataclass
from pathlib import Path

from focus_tracker.domain.models import UserRecord
from focus_tracker.services.users import UserRepository


@dataclass
class FileUserRepository(UserRepository):
    """Reads and appends ``username,hashedPassword`` lines."""

    path: Path

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        return self._load().get(username)

    def create_user(self, username: str, hashed_password: str) -> UserRecord:
        """Append a new credential line and return the record."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{username},{hashed_password}\n")
        return UserRecord(username=username, hashed_password=hashed_password)

    def _load(self) -> dict[str, UserRecord]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        users: dict[str, UserRecord] = {}
        for line in text.splitlines():
            username, sep, hashed = line.partition(",")
            if username and sep:
                users[username] = UserRecord(username=username, hashed_password=hashed)
        return users
