"""Multicast sender and receiver helpers that serve one chat group window each."""

from __future__ import annotations

import os
import socket
import struct
import sys
from contextlib import suppress
from typing import Iterator, NamedTuple, Optional, Sequence

__all__ = [
    "MAX_MSG",
    "McArgs",
    "parse_args",
    "report_pid",
    "open_sender_socket",
    "open_receiver_socket",
    "sender_main",
    "receiver_main",
]

MAX_MSG = 512
_DEFAULT_TTL = 1


class McArgs(NamedTuple):
    """Command-line arguments shared by the sender and the receiver."""

    mc_ip: str
    port: int
    report_path: str


def parse_args(argv: Sequence[str], prog: str) -> McArgs:
    """Parse ``<mc_ip> <port> <report_path>``; extra arguments are ignored.

    Raises ValueError carrying a usage line when arguments are missing
    or the port is not a number.
    """
    usage = f"Usage: {prog} <mc_ip> <port> <report_path>"
    if len(argv) < 3:
        raise ValueError(usage)
    mc_ip, port_text, report_path = argv[0], argv[1], argv[2]
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port {port_text!r}\n{usage}") from None
    return McArgs(mc_ip, port, report_path)


def report_pid(report_path: str, role: str) -> None:
    """Append ``"<role> <pid>"`` to the file the launching client watches."""
    with open(report_path, "a", encoding="ascii") as fh:
        fh.write(f"{role} {os.getpid()}\n")


def open_sender_socket(ttl: int = _DEFAULT_TTL) -> socket.socket:
    """Return a UDP socket whose multicast datagrams live for ``ttl`` hops."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, ttl)
    return sock


def open_receiver_socket(mc_ip: str, port: int) -> socket.socket:
    """Return a UDP socket bound to ``port`` that has joined group ``mc_ip``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    membership = struct.pack(
        "4s4s", socket.inet_aton(mc_ip), socket.inet_aton("0.0.0.0")
    )
    with suppress(OSError):
        sock.setsockopt(socket.IPPROTO_IP, socket.IP_ADD_MEMBERSHIP, membership)
    return sock


def _chunks(data: bytes, size: int) -> Iterator[bytes]:
    for start in range(0, len(data), size):
        yield data[start : start + size]


def sender_main(argv: Optional[Sequence[str]] = None) -> int:
    """Send every non-empty line of standard input to the multicast group."""
    args_in = list(sys.argv[1:] if argv is None else argv)
    try:
        args = parse_args(args_in, "mc_sender")
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    with suppress(OSError):
        report_pid(args.report_path, "S")
    try:
        sock = open_sender_socket()
    except OSError as exc:
        print(f"socket: {exc}", file=sys.stderr)
        return 1
    destination = (args.mc_ip, args.port)
    print(f"[SENDER] Connected to {args.mc_ip}:{args.port} - type messages:", flush=True)
    with sock:
        try:
            for line in sys.stdin:
                text = line.split("\n", 1)[0]
                for piece in _chunks(text.encode("utf-8"), MAX_MSG - 1):
                    sock.sendto(piece, destination)
        except KeyboardInterrupt:
            pass
    return 0


def receiver_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every datagram that arrives for the multicast group."""
    args_in = list(sys.argv[1:] if argv is None else argv)
    try:
        args = parse_args(args_in, "mc_receiver")
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    with suppress(OSError):
        report_pid(args.report_path, "R")
    try:
        sock = open_receiver_socket(args.mc_ip, args.port)
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1
    print(f"[RECEIVER] Listening on {args.mc_ip}:{args.port}", flush=True)
    with sock:
        try:
            while True:
                try:
                    data, _ = sock.recvfrom(MAX_MSG - 1)
                except OSError:
                    break
                print(data.decode("utf-8", errors="replace"), flush=True)
        except KeyboardInterrupt:
            pass
    return 0


def _main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args[:1] == ["send"]:
        return sender_main(args[1:])
    if args[:1] == ["recv"]:
        return receiver_main(args[1:])
    print("Usage: multicast send|recv <mc_ip> <port> <report_path>", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(_main())