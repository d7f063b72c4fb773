[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "sysdrills"
version = "0.1.0"
description = "Systems-programming drills: linked lists, heaps, string tools, IPC demos, a tiny shell and a LAN multicast chat"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "chat",
    "multicast",
    "ipc",
    "linked-list",
    "heap",
    "shell",
    "signals",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Education",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysdrills-persons = "sysdrills.person_list:main"
sysdrills-strings = "sysdrills.strtools:main"
sysdrills-heap = "sysdrills.genheap:main"
sysdrills-chat-server = "sysdrills.server_mng:main"
sysdrills-chat-client = "sysdrills.ui:main"
sysdrills-mc-sender = "sysdrills.multicast:sender_main"
sysdrills-mc-receiver = "sysdrills.multicast:receiver_main"
sysdrills-pingpong = "sysdrills.pingpong:main"
sysdrills-ctrlc = "sysdrills.signals:ctrlc_main"
sysdrills-kill-child = "sysdrills.signals:terminate_child_main"
sysdrills-shell = "sysdrills.shell:main"

[tool.setuptools.packages.find]
include = ["sysdrills*"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
