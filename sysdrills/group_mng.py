"""Creation, membership and teardown of chat groups on the server."""

from __future__ import annotations

import logging
from typing import Optional

from sysdrills.group import Group, GroupHash
from sysdrills.mcpool import FreeMcIpQueue

__all__ = ["GROUP_BASE_PORT", "GroupManager"]

GROUP_BASE_PORT = 6000

_log = logging.getLogger(__name__)


class GroupManager:
    """Owns every group, the multicast address pool and port numbering."""

    def __init__(self) -> None:
        self.groups = GroupHash()
        self.mc_pool = FreeMcIpQueue()
        self.next_port = GROUP_BASE_PORT

    def create_group(self, name: str) -> Group:
        """Create an empty group with a fresh address and the next port.

        Raises ValueError if the name is taken and RuntimeError when the
        address pool is exhausted.
        """
        if self.groups.exists(name):
            raise ValueError(f"group '{name}' already exists")
        mc_ip = self.mc_pool.allocate()
        if mc_ip is None:
            raise RuntimeError("no free multicast addresses")
        port = self.next_port
        self.next_port += 1
        group = Group(name, mc_ip, port)
        self.groups.add(group)
        _log.info("Created group '%s' -> %s:%d", name, group.multicast_ip, port)
        return group

    def delete_group(self, name: str) -> None:
        """Remove a group and return its address to the pool."""
        group = self.groups.get(name)
        if group is None:
            raise KeyError(name)
        self.mc_pool.release(group.multicast_ip)
        self.groups.remove(name)

    def get_group(self, name: str) -> Optional[Group]:
        """Return the named group, or None."""
        return self.groups.get(name)

    def add_member(self, group_name: str, username: str) -> None:
        """Add a user to a group; KeyError if the group does not exist."""
        group = self.groups.get(group_name)
        if group is None:
            raise KeyError(group_name)
        group.add_member(username)

    def remove_member(self, group_name: str, username: str) -> bool:
        """Remove a user from a group, deleting the group once it is empty.

        Returns True when the group was deleted. Raises KeyError if the
        group does not exist.
        """
        group = self.groups.get(group_name)
        if group is None:
            raise KeyError(group_name)
        try:
            group.remove_member(username)
        except KeyError:
            pass
        if group.member_count() == 0:
            _log.info("Group '%s' is empty, deleting", group_name)
            self.delete_group(group_name)
            return True
        return False

    def exists(self, name: str) -> bool:
        """Return True when the named group exists."""
        return self.groups.exists(name)

    def remove_user_all(self, username: str) -> None:
        """Remove a user from every group they belong to."""
        for name, group in list(self.groups.items()):
            if group.has_member(username):
                self.remove_member(name, username)