"""Wire format of the requests and responses exchanged by chat client and server."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Type, TypeVar, Union

__all__ = [
    "MAX_USERNAME_LEN",
    "MAX_PASSWORD_LEN",
    "MAX_GROUP_NAME_LEN",
    "MAX_MSG_LEN",
    "MAX_IP_LEN",
    "MULTICAST_PORT_BASE",
    "SERVER_TCP_PORT",
    "MULTICAST_TTL",
    "REQUEST_SIZE",
    "RESPONSE_SIZE",
    "ClientMsgType",
    "ServerMsgType",
    "ClientRequest",
    "ServerResponse",
    "decode_request",
    "decode_response",
]

MAX_USERNAME_LEN = 32
MAX_PASSWORD_LEN = 32
MAX_GROUP_NAME_LEN = 32
MAX_MSG_LEN = 512
MAX_IP_LEN = 16
MULTICAST_PORT_BASE = 5000
SERVER_TCP_PORT = 8080
MULTICAST_TTL = 1

_REQUEST = struct.Struct(
    f"<i{MAX_USERNAME_LEN}s{MAX_PASSWORD_LEN}s{MAX_GROUP_NAME_LEN}s"
)
_RESPONSE = struct.Struct(f"<i{MAX_MSG_LEN}s{MAX_IP_LEN}si")

REQUEST_SIZE = _REQUEST.size
RESPONSE_SIZE = _RESPONSE.size


class ClientMsgType(IntEnum):
    """Requests a client sends to the server."""

    MSG_REGISTER = 1
    MSG_LOGIN = 2
    MSG_LOGOUT = 3
    MSG_CREATE_GROUP = 4
    MSG_JOIN_GROUP = 5
    MSG_LEAVE_GROUP = 6
    MSG_EXIT = 7


class ServerMsgType(IntEnum):
    """Kinds of response the server sends back."""

    RES_OK = 100
    RES_ERROR = 101
    RES_GROUP_INFO = 102


_E = TypeVar("_E", bound=IntEnum)


def _encode(text: str, capacity: int) -> bytes:
    # Fields are NUL-terminated, so one byte of each is reserved.
    return text.encode("utf-8")[: capacity - 1]


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _as_enum(enum_cls: Type[_E], value: int) -> Union[_E, int]:
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass
class ClientRequest:
    """A fixed-size request; ``type`` may be an unknown integer."""

    type: Union[ClientMsgType, int]
    username: str = ""
    password: str = ""
    group_name: str = ""

    def pack(self) -> bytes:
        """Encode to the fixed-size wire form, truncating long fields."""
        return _REQUEST.pack(
            int(self.type),
            _encode(self.username, MAX_USERNAME_LEN),
            _encode(self.password, MAX_PASSWORD_LEN),
            _encode(self.group_name, MAX_GROUP_NAME_LEN),
        )


@dataclass
class ServerResponse:
    """A fixed-size response; the multicast fields matter for group info."""

    type: Union[ServerMsgType, int]
    message: str = ""
    multicast_ip: str = ""
    multicast_port: int = 0

    def pack(self) -> bytes:
        """Encode to the fixed-size wire form, truncating long fields."""
        return _RESPONSE.pack(
            int(self.type),
            _encode(self.message, MAX_MSG_LEN),
            _encode(self.multicast_ip, MAX_IP_LEN),
            self.multicast_port,
        )


def decode_request(data: bytes) -> ClientRequest:
    """Decode a request; raise ValueError if ``data`` has the wrong size."""
    if len(data) != REQUEST_SIZE:
        raise ValueError(f"request must be {REQUEST_SIZE} bytes, got {len(data)}")
    msg_type, username, password, group_name = _REQUEST.unpack(data)
    return ClientRequest(
        _as_enum(ClientMsgType, msg_type),
        _decode(username),
        _decode(password),
        _decode(group_name),
    )


def decode_response(data: bytes) -> ServerResponse:
    """Decode a response; raise ValueError if ``data`` has the wrong size."""
    if len(data) != RESPONSE_SIZE:
        raise ValueError(f"response must be {RESPONSE_SIZE} bytes, got {len(data)}")
    msg_type, message, multicast_ip, multicast_port = _RESPONSE.unpack(data)
    return ServerResponse(
        _as_enum(ServerMsgType, msg_type),
        _decode(message),
        _decode(multicast_ip),
        multicast_port,
    )