"""Registered chat users and the manager that authenticates them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from sysdrills.ds import HashTable

__all__ = [
    "MAX_USERNAME_LEN",
    "MAX_PASSWORD_LEN",
    "UserError",
    "User",
    "UserManager",
]

MAX_USERNAME_LEN = 32
MAX_PASSWORD_LEN = 32


class UserError(Exception):
    """Raised when registration, login or logout is refused."""


@dataclass
class User:
    """A registered account; names and passwords are cut to the protocol's limits."""

    username: str
    password: str
    socket_fd: Any = None
    is_active: bool = False

    def __post_init__(self) -> None:
        self.username = self.username[: MAX_USERNAME_LEN - 1]
        self.password = self.password[: MAX_PASSWORD_LEN - 1]


class UserManager:
    """Keeps every registered user and tracks who is logged in."""

    def __init__(self) -> None:
        self._users = HashTable()

    def register(self, username: str, password: str, socket_fd: Any) -> User:
        """Create a new, logged-out account."""
        if username in self._users:
            raise UserError(f"Username '{username}' already exists")
        user = User(username, password, socket_fd)
        self._users.insert(user.username, user)
        return user

    def login(self, username: str, password: str, socket_fd: Any) -> User:
        """Mark the user active on ``socket_fd`` if the password matches."""
        user = self._users.lookup(username)
        if user is None:
            raise UserError(f"User '{username}' not found")
        if user.password != password:
            raise UserError(f"Wrong password for '{username}'")
        user.is_active = True
        user.socket_fd = socket_fd
        return user

    def logout(self, username: str) -> None:
        """Mark the user inactive and forget their connection."""
        user = self._users.lookup(username)
        if user is None:
            raise UserError(f"User '{username}' not found")
        user.is_active = False
        user.socket_fd = None

    def get(self, username: str) -> Optional[User]:
        """Return the user with this name, or None."""
        return self._users.lookup(username)

    def find_active_by_socket(self, socket_fd: Any) -> Optional[User]:
        """Return the logged-in user attached to ``socket_fd``, or None."""
        return next(
            (user for user in self if user.is_active and user.socket_fd == socket_fd),
            None,
        )

    def __iter__(self) -> Iterator[User]:
        return (user for _, user in self._users.items())

    def __len__(self) -> int:
        return len(self._users)