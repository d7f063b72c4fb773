"""A minimal interactive shell that runs one command per line."""

from __future__ import annotations

import subprocess
import sys
from typing import List, Optional, Sequence

__all__ = ["MAX_INPUT_SIZE", "MAX_ARGS", "parse_command", "run_command", "main"]

MAX_INPUT_SIZE = 1024
MAX_ARGS = 64


def parse_command(line: str) -> List[str]:
    """Split a line into arguments on spaces, keeping at most MAX_ARGS - 1."""
    text = line.split("\n", 1)[0]
    return [word for word in text.split(" ") if word][: MAX_ARGS - 1]


def run_command(args: Sequence[str]) -> int:
    """Run a program, wait for it, and return its exit status (1 if it cannot start)."""
    if not args:
        raise ValueError("no command given")
    try:
        completed = subprocess.run(list(args))
    except OSError as exc:
        print(f"Command execution failed: {exc}", file=sys.stderr)
        return 1
    return completed.returncode


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input until ``exit`` or end of input."""
    print("--- Simple Custom Shell Started ---")
    print("Type 'exit' to quit.\n")
    while True:
        sys.stdout.write("MyShell> ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            print("\nExiting shell...")
            break
        args = parse_command(line)
        if not args:
            continue
        if args[0] == "exit":
            print("Goodbye!")
            break
        run_command(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())