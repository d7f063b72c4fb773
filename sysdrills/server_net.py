"""Listening socket and connected clients of the chat server."""

from __future__ import annotations

import logging
import socket
from typing import List, Optional

from sysdrills.protocol import (
    REQUEST_SIZE,
    SERVER_TCP_PORT,
    ClientRequest,
    ServerResponse,
    decode_request,
)

__all__ = ["MAX_CLIENTS", "ServerNet", "recv_request", "send_response"]

MAX_CLIENTS = 64
_BACKLOG = 10

_log = logging.getLogger(__name__)


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = sock.recv(size - len(buf))
        if not chunk:
            raise ConnectionError("peer closed the connection")
        buf += chunk
    return bytes(buf)


class ServerNet:
    """A TCP listener plus the sockets of the clients it accepted."""

    def __init__(
        self, port: int = SERVER_TCP_PORT, host: str = "", max_clients: int = MAX_CLIENTS
    ) -> None:
        self.max_clients = max_clients
        self.clients: List[socket.socket] = []
        self.server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self.server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self.server_socket.bind((host, port))
            self.server_socket.listen(_BACKLOG)
        except OSError:
            self.server_socket.close()
            raise
        self.port = self.server_socket.getsockname()[1]
        _log.info("Listening on port %d", self.port)

    def accept(self) -> Optional[socket.socket]:
        """Accept one pending client; None if it failed or there is no room."""
        try:
            conn, addr = self.server_socket.accept()
        except OSError as exc:
            _log.error("accept failed: %s", exc)
            return None
        if len(self.clients) >= self.max_clients:
            _log.warning("Too many clients")
            conn.close()
            return None
        self.clients.append(conn)
        _log.info("New client fd=%d from %s", conn.fileno(), addr[0])
        return conn

    def remove_client(self, sock: socket.socket) -> bool:
        """Close and forget a client; return False if it was not known."""
        if sock not in self.clients:
            return False
        self.clients.remove(sock)
        sock.close()
        return True

    def sockets(self) -> List[socket.socket]:
        """The listener followed by every client, ready for ``select``."""
        return [self.server_socket, *self.clients]

    def close(self) -> None:
        """Close every client and the listener."""
        for client in list(self.clients):
            client.close()
        self.clients.clear()
        self.server_socket.close()

    def __enter__(self) -> "ServerNet":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def recv_request(sock: socket.socket) -> ClientRequest:
    """Read one whole request; raise ConnectionError if the peer went away."""
    return decode_request(_recv_exact(sock, REQUEST_SIZE))


def send_response(sock: socket.socket, response: ServerResponse) -> None:
    """Send one whole response."""
    sock.sendall(response.pack())