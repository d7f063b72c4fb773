"""The chat client's TCP connection to the server."""

from __future__ import annotations

import ipaddress
import socket

from sysdrills.protocol import (
    RESPONSE_SIZE,
    SERVER_TCP_PORT,
    ClientRequest,
    ServerResponse,
    decode_response,
)

__all__ = ["ClientNet"]


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = sock.recv(size - len(buf))
        if not chunk:
            raise ConnectionError("server closed the connection")
        buf += chunk
    return bytes(buf)


class ClientNet:
    """A connected socket to the chat server at an IPv4 address."""

    def __init__(self, server_ip: str, port: int = SERVER_TCP_PORT) -> None:
        try:
            ipaddress.IPv4Address(server_ip)
        except ValueError:
            raise ValueError(f"Invalid server IP: {server_ip!r}") from None
        self.sock = socket.create_connection((server_ip, port))

    def send(self, request: ClientRequest) -> None:
        """Send one whole request."""
        self.sock.sendall(request.pack())

    def recv(self) -> ServerResponse:
        """Wait for one whole response; ConnectionError if the server went away."""
        return decode_response(_recv_exact(self.sock, RESPONSE_SIZE))

    def close(self) -> None:
        """Close the connection."""
        self.sock.close()

    def __enter__(self) -> "ClientNet":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()