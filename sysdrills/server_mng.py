"""The chat server: answers client requests about users and groups."""

from __future__ import annotations

import logging
import select
import socket
import sys
from contextlib import suppress
from typing import Any, Callable, Dict, Optional, Sequence

from sysdrills.group import Group
from sysdrills.group_mng import GroupManager
from sysdrills.protocol import (
    SERVER_TCP_PORT,
    ClientMsgType,
    ClientRequest,
    ServerMsgType,
    ServerResponse,
)
from sysdrills.server_net import ServerNet, recv_request, send_response
from sysdrills.user import UserError, UserManager

__all__ = ["ServerManager", "main"]

_POLL_INTERVAL = 0.2

_log = logging.getLogger(__name__)

Handler = Callable[[ClientRequest, Any], ServerResponse]


def _ok(message: str) -> ServerResponse:
    return ServerResponse(ServerMsgType.RES_OK, message)


def _error(message: str) -> ServerResponse:
    return ServerResponse(ServerMsgType.RES_ERROR, message)


def _group_info(group: Group) -> ServerResponse:
    return ServerResponse(
        ServerMsgType.RES_GROUP_INFO,
        f"Joined group '{group.name}' -> {group.multicast_ip}:{group.multicast_port}",
        group.multicast_ip,
        group.multicast_port,
    )


class ServerManager:
    """Users, groups and the network loop of one chat server."""

    def __init__(self, port: int = SERVER_TCP_PORT, host: str = "") -> None:
        self.users = UserManager()
        self.groups = GroupManager()
        self.net = ServerNet(port, host)
        self._closed = False
        self._handlers: Dict[int, Handler] = {
            ClientMsgType.MSG_REGISTER: self._register,
            ClientMsgType.MSG_LOGIN: self._login,
            ClientMsgType.MSG_LOGOUT: self._logout,
            ClientMsgType.MSG_CREATE_GROUP: self._create_group,
            ClientMsgType.MSG_JOIN_GROUP: self._join_group,
            ClientMsgType.MSG_LEAVE_GROUP: self._leave_group,
            ClientMsgType.MSG_EXIT: self._exit,
        }

    def _register(self, request: ClientRequest, sock: Any) -> ServerResponse:
        try:
            self.users.register(request.username, request.password, sock)
        except UserError:
            return _error("Username already exists")
        return _ok("Registration successful")

    def _login(self, request: ClientRequest, sock: Any) -> ServerResponse:
        try:
            self.users.login(request.username, request.password, sock)
        except UserError:
            return _error("Invalid username or password")
        return _ok("Login successful")

    def _logout(self, request: ClientRequest, sock: Any) -> ServerResponse:
        self.groups.remove_user_all(request.username)
        with suppress(UserError):
            self.users.logout(request.username)
        return _ok("Logout successful")

    def _create_group(self, request: ClientRequest, sock: Any) -> ServerResponse:
        try:
            group = self.groups.create_group(request.group_name)
        except (ValueError, RuntimeError):
            return _error("Group name taken or no resources")
        with suppress(ValueError):
            group.add_member(request.username)
        return _group_info(group)

    def _join_group(self, request: ClientRequest, sock: Any) -> ServerResponse:
        group = self.groups.get_group(request.group_name)
        if group is None:
            return _error("Group does not exist")
        with suppress(ValueError):
            group.add_member(request.username)
        return _group_info(group)

    def _leave_group(self, request: ClientRequest, sock: Any) -> ServerResponse:
        if not self.groups.exists(request.group_name):
            return _error("Group does not exist")
        self.groups.remove_member(request.group_name, request.username)
        return _ok("Left group")

    def _exit(self, request: ClientRequest, sock: Any) -> ServerResponse:
        self.groups.remove_user_all(request.username)
        return _ok("Bye")

    def handle_request(self, request: ClientRequest, sock: Any) -> ServerResponse:
        """Apply one request from the client on ``sock`` and build the answer."""
        handler = self._handlers.get(request.type)
        if handler is None:
            return _error("Unknown request")
        return handler(request, sock)

    def _cleanup_disconnected(self, sock: socket.socket) -> None:
        user = self.users.find_active_by_socket(sock)
        if user is None:
            return
        _log.info("Cleaning up ghost user '%s'", user.username)
        self.groups.remove_user_all(user.username)
        self.users.logout(user.username)

    def handle_client(self, sock: socket.socket) -> None:
        """Read one request from ``sock``, answer it, and drop dead clients."""
        try:
            request = recv_request(sock)
        except OSError:
            _log.info("Client disconnected unexpectedly")
            self._cleanup_disconnected(sock)
            self.net.remove_client(sock)
            return
        response = self.handle_request(request, sock)
        try:
            send_response(sock, response)
        except OSError as exc:
            _log.warning("Failed to send response: %s", exc)
        if request.type == ClientMsgType.MSG_EXIT:
            self.net.remove_client(sock)

    def run(self) -> None:
        """Serve clients until :meth:`close` is called."""
        _log.info("Server running")
        listener = self.net.server_socket
        while not self._closed:
            try:
                readable, _, _ = select.select(
                    self.net.sockets(), [], [], _POLL_INTERVAL
                )
            except (OSError, ValueError) as exc:
                if not self._closed:
                    _log.error("select failed: %s", exc)
                break
            if self._closed:
                break
            if listener in readable:
                self.net.accept()
            for sock in readable:
                if sock is not listener and sock in self.net.clients:
                    self.handle_client(sock)

    def close(self) -> None:
        """Stop serving and close every socket."""
        self._closed = True
        self.net.close()

    def __enter__(self) -> "ServerManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the chat server on its well-known port."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        manager = ServerManager(SERVER_TCP_PORT)
    except OSError as exc:
        print(f"Failed to create server: {exc}", file=sys.stderr)
        return 1
    try:
        manager.run()
    except KeyboardInterrupt:
        pass
    finally:
        manager.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())