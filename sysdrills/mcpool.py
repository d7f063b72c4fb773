"""Pool of free multicast addresses handed out to chat groups."""

from __future__ import annotations

from typing import Optional

from sysdrills.ds import Queue

__all__ = ["MC_IP_POOL_START", "MC_IP_POOL_SIZE", "FreeMcIpQueue"]

MC_IP_POOL_START = "239.1.0.1"
MC_IP_POOL_SIZE = 200
_POOL_PREFIX = "239.1.0."


class FreeMcIpQueue:
    """Multicast addresses waiting to be allocated, in first-in first-out order."""

    def __init__(self) -> None:
        self._available = Queue()
        for host in range(1, MC_IP_POOL_SIZE + 1):
            self._available.enqueue(f"{_POOL_PREFIX}{host}")

    def allocate(self) -> Optional[str]:
        """Take the next free address, or return None when none is left."""
        if self._available.is_empty():
            return None
        return self._available.dequeue()

    def release(self, ip: Optional[str]) -> None:
        """Return an address to the back of the pool; None is ignored."""
        if not ip:
            return
        self._available.enqueue(ip)

    def available(self) -> int:
        """Number of addresses that can still be allocated."""
        return len(self._available)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(available={self.available()})"