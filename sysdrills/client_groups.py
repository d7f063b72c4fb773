"""The groups a chat client has joined and the helper processes serving them."""

from __future__ import annotations

import os
import signal
from contextlib import suppress
from dataclasses import dataclass
from typing import Iterator, Optional

from sysdrills.ds import HashTable

__all__ = ["MAX_GROUP_NAME_LEN", "ClientGroup", "ClientGroupsManager"]

MAX_GROUP_NAME_LEN = 32
_MAX_IP_LEN = 15
_KILL_SIGNAL = getattr(signal, "SIGKILL", signal.SIGTERM)


def _kill(pid: Optional[int]) -> None:
    if pid is not None and pid > 0:
        with suppress(ProcessLookupError):
            os.kill(pid, _KILL_SIGNAL)


@dataclass
class ClientGroup:
    """A joined group, its multicast endpoint and its sender/receiver processes."""

    name: str
    multicast_ip: str
    multicast_port: int
    sender_pid: Optional[int] = None
    receiver_pid: Optional[int] = None

    def __post_init__(self) -> None:
        self.name = self.name[: MAX_GROUP_NAME_LEN - 1]
        self.multicast_ip = self.multicast_ip[:_MAX_IP_LEN]


def _kill_processes(group: ClientGroup) -> None:
    _kill(group.sender_pid)
    _kill(group.receiver_pid)


class ClientGroupsManager:
    """Joined groups by name; removing a group kills its helper processes."""

    def __init__(self) -> None:
        self._groups = HashTable()

    def add(
        self,
        name: str,
        mc_ip: str,
        mc_port: int,
        sender_pid: Optional[int],
        receiver_pid: Optional[int],
    ) -> ClientGroup:
        """Record a joined group and return it."""
        group = ClientGroup(name, mc_ip, mc_port, sender_pid, receiver_pid)
        self._groups.insert(name, group)
        return group

    def get(self, name: str) -> Optional[ClientGroup]:
        """Return the named group, or None."""
        return self._groups.lookup(name)

    def remove(self, name: str) -> None:
        """Kill the group's processes and forget it; KeyError if unknown."""
        group = self._groups.lookup(name)
        if group is None:
            raise KeyError(name)
        _kill_processes(group)
        self._groups.remove(name)

    def exists(self, name: str) -> bool:
        """Return True when the named group has been joined."""
        return name in self._groups

    def remove_all(self) -> None:
        """Kill every group's processes and forget every group."""
        for _, group in self._groups.items():
            _kill_processes(group)
        self._groups = HashTable()

    def close(self) -> None:
        """Release everything the manager holds."""
        self.remove_all()

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[ClientGroup]:
        return (group for _, group in self._groups.items())

    def __enter__(self) -> "ClientGroupsManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()