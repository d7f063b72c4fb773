"""Chat groups, their members, and a table of groups by name."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from sysdrills.ds import HashTable, LinkedList

__all__ = ["MAX_GROUP_NAME_LEN", "Group", "GroupHash"]

MAX_GROUP_NAME_LEN = 32
_MAX_IP_LEN = 15


class Group:
    """A named chat group bound to one multicast address and port."""

    def __init__(self, name: str, multicast_ip: str, multicast_port: int) -> None:
        self.name = name[: MAX_GROUP_NAME_LEN - 1]
        self.multicast_ip = multicast_ip[:_MAX_IP_LEN]
        self.multicast_port = multicast_port
        self.members = LinkedList()

    def add_member(self, username: str) -> None:
        """Add a user; raise ValueError if they are already a member."""
        if self.has_member(username):
            raise ValueError(f"'{username}' is already in group '{self.name}'")
        self.members.push_back(username)

    def remove_member(self, username: str) -> None:
        """Remove a user; raise KeyError if they are not a member."""
        if not self.members.remove(username):
            raise KeyError(username)

    def has_member(self, username: str) -> bool:
        """Return True when the user belongs to the group."""
        return self.members.find(username) is not None

    def member_count(self) -> int:
        """Number of members."""
        return len(self.members)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, {self.multicast_ip!r}, "
            f"{self.multicast_port}, members={list(self.members)!r})"
        )


class GroupHash:
    """Groups indexed by name."""

    def __init__(self) -> None:
        self._table = HashTable()

    def add(self, group: Group) -> None:
        """Store a group under its own name."""
        self._table.insert(group.name, group)

    def get(self, name: str) -> Optional[Group]:
        """Return the group with this name, or None."""
        return self._table.lookup(name)

    def remove(self, name: str) -> Group:
        """Remove and return the named group; raise KeyError if absent."""
        return self._table.remove(name)

    def exists(self, name: str) -> bool:
        """Return True when a group with this name is stored."""
        return name in self._table

    def items(self) -> Iterator[Tuple[str, Group]]:
        """Yield ``(name, group)`` pairs over a snapshot."""
        return self._table.items()

    def __len__(self) -> int:
        return len(self._table)