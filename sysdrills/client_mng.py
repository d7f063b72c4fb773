"""Client-side session: talks to the chat server and opens group windows."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import tempfile
import time
from contextlib import suppress
from typing import Callable, Dict, List, Optional, Tuple

from sysdrills.client_groups import ClientGroupsManager
from sysdrills.client_net import ClientNet
from sysdrills.protocol import (
    SERVER_TCP_PORT,
    ClientMsgType,
    ClientRequest,
    ServerMsgType,
    ServerResponse,
)

__all__ = ["ClientError", "ClientManager"]

_ALREADY_IN_GROUP = "Error: You are already in this group!"
_PID_REPORT_TIMEOUT = 10.0
_PID_POLL_INTERVAL = 0.05

_log = logging.getLogger(__name__)

WindowLauncher = Callable[[str, str, int, str], Tuple[Optional[int], Optional[int]]]


class ClientError(Exception):
    """Raised when the server refuses a request or cannot be reached."""


def _await_pids(report_path: str, timeout: float) -> Dict[str, int]:
    deadline = time.monotonic() + timeout
    pids: Dict[str, int] = {}
    while True:
        with suppress(OSError), open(report_path, encoding="ascii") as fh:
            for line in fh.read().splitlines():
                role, _, pid = line.partition(" ")
                if pid.isdigit():
                    pids[role] = int(pid)
        if len(pids) >= 2 or time.monotonic() >= deadline:
            return pids
        time.sleep(_PID_POLL_INTERVAL)


def _launch_xterm_windows(
    group_name: str, mc_ip: str, mc_port: int, username: str
) -> Tuple[Optional[int], Optional[int]]:
    """Open a send and a receive terminal for the group; return their pids."""
    with tempfile.TemporaryDirectory() as tmp:
        report = os.path.join(tmp, "pids")
        open(report, "w", encoding="ascii").close()
        windows: List[Tuple[str, List[str]]] = [
            (f"SEND:{group_name}", ["send", mc_ip, str(mc_port), report, username]),
            (f"RECV:{group_name}", ["recv", mc_ip, str(mc_port), report]),
        ]
        for title, args in windows:
            command = [
                "xterm", "-fa", "Monospace", "-fs", "11", "-T", title,
                "-e", sys.executable, "-m", "sysdrills.multicast", *args,
            ]
            try:
                subprocess.Popen(command)
            except OSError as exc:
                _log.error("could not open window %s: %s", title, exc)
        pids = _await_pids(report, _PID_REPORT_TIMEOUT)
    return pids.get("S"), pids.get("R")


class ClientManager:
    """One user's connection to the server and the groups they have joined."""

    def __init__(
        self,
        server_ip: str = "127.0.0.1",
        port: int = SERVER_TCP_PORT,
        window_launcher: Optional[WindowLauncher] = None,
    ) -> None:
        self.server_ip = server_ip
        self.net: Optional[ClientNet] = ClientNet(server_ip, port)
        self.groups = ClientGroupsManager()
        self.username = ""
        self.logged_in = False
        self.last_message = ""
        self._launch = window_launcher or _launch_xterm_windows

    def _transact(self, request: ClientRequest) -> ServerResponse:
        if self.net is None:
            raise ClientError("not connected to the server")
        try:
            self.net.send(request)
            response = self.net.recv()
        except OSError as exc:
            raise ClientError(f"connection to server failed: {exc}") from exc
        self.last_message = response.message
        return response

    def _expect(self, response: ServerResponse, wanted: ServerMsgType) -> None:
        if response.type != wanted:
            raise ClientError(response.message)

    def register(self, username: str, password: str) -> None:
        """Create an account on the server."""
        response = self._transact(
            ClientRequest(ClientMsgType.MSG_REGISTER, username, password)
        )
        self._expect(response, ServerMsgType.RES_OK)

    def login(self, username: str, password: str) -> None:
        """Log in; on success the manager remembers the user name."""
        response = self._transact(
            ClientRequest(ClientMsgType.MSG_LOGIN, username, password)
        )
        self._expect(response, ServerMsgType.RES_OK)
        self.username = username
        self.logged_in = True

    def logout(self) -> None:
        """Close every group window and log out."""
        request = ClientRequest(ClientMsgType.MSG_LOGOUT, self.username)
        self.groups.remove_all()
        response = self._transact(request)
        self.logged_in = False
        self.username = ""
        self._expect(response, ServerMsgType.RES_OK)

    def _already_joined(self, group_name: str) -> None:
        if self.groups.get(group_name) is not None:
            self.last_message = _ALREADY_IN_GROUP
            raise ClientError(_ALREADY_IN_GROUP)

    def _open_group_windows(self, group_name: str, response: ServerResponse) -> None:
        sender_pid, receiver_pid = self._launch(
            group_name, response.multicast_ip, response.multicast_port, self.username
        )
        self.groups.add(
            group_name,
            response.multicast_ip,
            response.multicast_port,
            sender_pid,
            receiver_pid,
        )

    def _enter_group(self, msg_type: ClientMsgType, group_name: str) -> None:
        self._already_joined(group_name)
        response = self._transact(
            ClientRequest(msg_type, self.username, group_name=group_name)
        )
        self._expect(response, ServerMsgType.RES_GROUP_INFO)
        self._open_group_windows(group_name, response)

    def create_group(self, group_name: str) -> None:
        """Create a group on the server and open its windows."""
        self._enter_group(ClientMsgType.MSG_CREATE_GROUP, group_name)

    def join_group(self, group_name: str) -> None:
        """Join an existing group and open its windows."""
        self._enter_group(ClientMsgType.MSG_JOIN_GROUP, group_name)

    def leave_group(self, group_name: str) -> None:
        """Leave a group and close its windows."""
        response = self._transact(
            ClientRequest(
                ClientMsgType.MSG_LEAVE_GROUP, self.username, group_name=group_name
            )
        )
        self._expect(response, ServerMsgType.RES_OK)
        with suppress(KeyError):
            self.groups.remove(group_name)

    def exit(self) -> None:
        """Say goodbye to the server, close all windows and disconnect."""
        if self.net is None:
            return
        request = ClientRequest(ClientMsgType.MSG_EXIT, self.username)
        self.groups.remove_all()
        with suppress(ClientError):
            self._transact(request)
        self.net.close()
        self.net = None

    def close(self) -> None:
        """Release the group windows and the connection."""
        self.groups.close()
        if self.net is not None:
            self.net.close()
            self.net = None

    def __enter__(self) -> "ClientManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()