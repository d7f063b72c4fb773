"""Systems-programming drills: data structures, string tools, IPC demos, a shell and a LAN chat."""

__version__ = "0.1.0"