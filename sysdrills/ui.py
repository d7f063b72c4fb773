"""Text menus of the chat client."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from sysdrills.client_mng import ClientError, ClientManager

__all__ = ["run", "main"]

_CLR = "\033[2J\033[H"
_BOLD = "\033[1m"
_RED = "\033[31m"
_GRN = "\033[32m"
_CYN = "\033[36m"
_RST = "\033[0m"

_RULE = "==============================\n"
_THIN_RULE = "------------------------------\n"

_LOGIN_PROMPTS = ("Username: ", "Password: ")


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def write(self, text: str) -> None:
        self._out.write(text)

    def read_line(self, prompt: str) -> Optional[str]:
        """Prompt and return one line without its newline, or None at end of input."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.split("\n", 1)[0]

    def pause(self) -> None:
        self._out.write("Press ENTER to continue...")
        self._out.flush()
        self._in.readline()

    def ok(self, message: str) -> None:
        self._out.write(f"{_GRN}OK  {message}\n{_RST}")

    def error(self, message: str) -> None:
        self._out.write(f"{_RED}ERR {message}\n{_RST}")


def _login_screen(manager: ClientManager, con: _Console) -> bool:
    """Return True once logged in, False when the user chooses to exit."""
    while True:
        con.write(_CLR)
        con.write(
            f"{_BOLD}{_CYN}{_RULE}      LAN CHAT APPLICATION    \n{_RULE}{_RST}"
        )
        con.write("  1. Register\n  2. Login\n  3. Exit\n")
        con.write(f"{_CYN}{_THIN_RULE}{_RST}")

        choice = con.read_line("Choice: ")
        if choice is None or choice[:1] == "3":
            return False
        if choice[:1] not in ("1", "2"):
            continue

        answers = [con.read_line(prompt) for prompt in _LOGIN_PROMPTS]
        if None in answers:
            return False

        try:
            if choice[:1] == "1":
                manager.register(*answers)
            else:
                manager.login(*answers)
        except ClientError as exc:
            con.error(str(exc))
        else:
            con.ok(manager.last_message)
            if choice[:1] == "2":
                return True
        con.pause()


def _session_screen(manager: ClientManager, con: _Console) -> None:
    actions = {
        "1": manager.create_group,
        "2": manager.join_group,
        "3": manager.leave_group,
    }
    while True:
        con.write(_CLR)
        con.write(f"{_BOLD}{_CYN}{_RULE}")
        con.write(f"  Welcome, {manager.username}\n")
        con.write(f"{_RULE}{_RST}")
        con.write("  1. Create group\n  2. Join group\n  3. Leave group\n  4. Logout\n")
        con.write(f"{_CYN}{_THIN_RULE}{_RST}")

        choice = con.read_line("Choice: ")
        if choice is None or choice[:1] == "4":
            try:
                manager.logout()
            except ClientError:
                pass
            return
        action = actions.get(choice[:1])
        if action is None:
            continue

        group_name = con.read_line("Group name: ")
        if group_name is None:
            continue
        try:
            action(group_name)
        except ClientError as exc:
            con.error(str(exc))
        else:
            con.ok(manager.last_message)
        con.pause()


def run(
    manager: ClientManager,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Drive the menus until the user exits; then leave the server."""
    con = _Console(stdin or sys.stdin, stdout or sys.stdout)
    while _login_screen(manager, con):
        _session_screen(manager, con)
    manager.exit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Connect to the server given on the command line and run the menus."""
    args = list(sys.argv[1:] if argv is None else argv)
    server_ip = args[0] if args else "127.0.0.1"
    try:
        manager = ClientManager(server_ip)
    except (OSError, ValueError):
        print(f"Failed to connect to server at {server_ip}", file=sys.stderr)
        return 1
    try:
        run(manager)
    except KeyboardInterrupt:
        pass
    finally:
        manager.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())