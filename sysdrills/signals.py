"""Signal drills: a three-strike Ctrl-C catcher and a parent that terminates its child."""

from __future__ import annotations

import multiprocessing
import os
import signal
import sys
import time
from typing import Any, Optional, Sequence, TextIO

__all__ = ["STRIKE_LIMIT", "StrikeCounter", "ctrlc_main", "terminate_child_main"]

STRIKE_LIMIT = 3
_DEFAULT_TICK = 1.0
_DEFAULT_CHILD_LIFETIME = 10.0


class StrikeCounter:
    """SIGINT handler that counts strikes and exits cleanly at the limit."""

    def __init__(self, limit: int = STRIKE_LIMIT, out: Optional[TextIO] = None) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self.count = 0
        self._out = out

    def __call__(self, signum: int, frame: Any) -> None:
        out = self._out or sys.stdout
        self.count += 1
        out.write(f"\n[Caught Ctrl-C! Strike {self.count} of {self.limit}]\n")
        out.flush()
        if self.count >= self.limit:
            out.write(f"That's {self.limit} strikes! Exiting gracefully...\n")
            out.flush()
            raise SystemExit(0)


def _parse_seconds(argv: Optional[Sequence[str]], default: float) -> float:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return default
    value = float(args[0])
    if value < 0:
        raise ValueError("seconds must not be negative")
    return value


def ctrlc_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a star every tick until Ctrl-C has been pressed three times."""
    try:
        tick = _parse_seconds(argv, _DEFAULT_TICK)
    except ValueError:
        print("Usage: ctrlc [tick_seconds]", file=sys.stderr)
        return 2
    counter = StrikeCounter()
    try:
        previous = signal.signal(signal.SIGINT, counter)
    except (OSError, ValueError) as exc:
        print(f"Failed to register signal handler: {exc}", file=sys.stderr)
        return 1
    try:
        print("--- 3-Strike Ctrl-C Catcher ---")
        print("Try to stop me by pressing Ctrl-C in your terminal!\n")
        while True:
            sys.stdout.write("*")
            sys.stdout.flush()
            time.sleep(tick)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    finally:
        signal.signal(signal.SIGINT, previous)


def _print_forever() -> None:
    while True:
        print("in child", flush=True)
        time.sleep(1)


def terminate_child_main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a chatty child, sleep, then stop it with SIGTERM and reap it."""
    try:
        delay = _parse_seconds(argv, _DEFAULT_CHILD_LIFETIME)
    except ValueError:
        print("Usage: terminate-child [seconds]", file=sys.stderr)
        return 2
    print("--- Signal Exercise (Parent/Child) ---", flush=True)
    child = multiprocessing.Process(target=_print_forever, daemon=True)
    try:
        child.start()
    except OSError as exc:
        print(f"Fork failed: {exc}", file=sys.stderr)
        return 1
    print(f"Father: Created child with PID {child.pid}")
    print(f"Father: Sleeping for {delay:g} seconds...\n", flush=True)
    time.sleep(delay)
    print("\nFather: Woke up! Sending SIGTERM to child...")
    try:
        os.kill(child.pid, signal.SIGTERM)
    except OSError as exc:
        print(f"Father: Failed to send signal: {exc}", file=sys.stderr)
    else:
        print("Father: Signal sent successfully.", flush=True)
    child.join()
    print("Father: Child has been terminated. Exiting.", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(ctrlc_main())