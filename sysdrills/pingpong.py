"""Parent and child processes trading one Ping and one Pong message."""

from __future__ import annotations

import multiprocessing
import sys
from multiprocessing.connection import Connection
from typing import Optional, Sequence

__all__ = ["MAX_MSG_LEN", "QUEUE_MAX_MSGS", "pipe_pingpong", "queue_pingpong", "main"]

MAX_MSG_LEN = 50
QUEUE_MAX_MSGS = 10
_TIMEOUT = 10.0
_PING = "Ping"
_PONG = "Pong"


def _check_size(message: str) -> bytes:
    data = message.encode("utf-8")
    if len(data) >= MAX_MSG_LEN:
        raise ValueError(f"message longer than {MAX_MSG_LEN - 1} bytes")
    return data


def _pipe_child(ping_in: Connection, pong_out: Connection) -> None:
    message = ping_in.recv_bytes(MAX_MSG_LEN).decode("utf-8")
    print(f"Child received:  {message}", flush=True)
    pong_out.send_bytes(_check_size(_PONG))
    ping_in.close()
    pong_out.close()


def _queue_child(ping_q: "multiprocessing.Queue[str]", pong_q: "multiprocessing.Queue[str]") -> None:
    message = ping_q.get(timeout=_TIMEOUT)
    print(f"Child received:  {message}", flush=True)
    _check_size(_PONG)
    pong_q.put(_PONG)


def pipe_pingpong() -> str:
    """Send Ping to a child over one pipe and return what comes back over another."""
    ping_in, ping_out = multiprocessing.Pipe(duplex=False)
    pong_in, pong_out = multiprocessing.Pipe(duplex=False)
    child = multiprocessing.Process(target=_pipe_child, args=(ping_in, pong_out))
    child.start()
    ping_in.close()
    pong_out.close()
    try:
        ping_out.send_bytes(_check_size(_PING))
        if not pong_in.poll(_TIMEOUT):
            raise TimeoutError("child did not answer")
        reply = pong_in.recv_bytes(MAX_MSG_LEN).decode("utf-8")
        print(f"Parent received: {reply}", flush=True)
    finally:
        ping_out.close()
        pong_in.close()
        child.join(_TIMEOUT)
    return reply


def queue_pingpong() -> str:
    """Send Ping to a child through a message queue and return the reply."""
    ping_q: "multiprocessing.Queue[str]" = multiprocessing.Queue(QUEUE_MAX_MSGS)
    pong_q: "multiprocessing.Queue[str]" = multiprocessing.Queue(QUEUE_MAX_MSGS)
    child = multiprocessing.Process(target=_queue_child, args=(ping_q, pong_q))
    child.start()
    try:
        _check_size(_PING)
        ping_q.put(_PING)
        try:
            reply = pong_q.get(timeout=_TIMEOUT)
        except Exception as exc:
            raise TimeoutError("child did not answer") from exc
        print(f"Parent received: {reply}", flush=True)
    finally:
        child.join(_TIMEOUT)
        ping_q.close()
        pong_q.close()
    return reply


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ping-pong over ``pipe`` (the default) or ``mq``."""
    args = list(sys.argv[1:] if argv is None else argv)
    mode = args[0] if args else "pipe"
    runners = {"pipe": pipe_pingpong, "mq": queue_pingpong}
    runner = runners.get(mode)
    if runner is None:
        print("Usage: pingpong [pipe|mq]", file=sys.stderr)
        return 2
    try:
        runner()
    except (OSError, TimeoutError) as exc:
        print(f"ping-pong failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())