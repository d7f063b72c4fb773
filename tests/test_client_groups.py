import signal
import subprocess
import sys

import pytest

from sysdrills.client_groups import MAX_GROUP_NAME_LEN, ClientGroupsManager


@pytest.fixture
def spawn():
    procs = []

    def _spawn():
        proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
        procs.append(proc)
        return proc

    yield _spawn
    for proc in procs:
        if proc.poll() is None:
            proc.kill()
            proc.wait()


def test_add_and_get():
    manager = ClientGroupsManager()
    added = manager.add("devs", "239.1.0.1", 6000, None, None)
    assert manager.get("devs") is added
    assert (added.multicast_ip, added.multicast_port) == ("239.1.0.1", 6000)
    assert manager.exists("devs")
    assert len(manager) == 1


def test_get_missing_returns_none():
    manager = ClientGroupsManager()
    assert manager.get("devs") is None
    assert manager.exists("devs") is False


def test_name_is_truncated():
    group = ClientGroupsManager().add("g" * 40, "239.1.0.1", 6000, None, None)
    assert group.name == "g" * (MAX_GROUP_NAME_LEN - 1)


def test_remove_missing_raises():
    with pytest.raises(KeyError):
        ClientGroupsManager().remove("devs")


def test_remove_without_processes():
    manager = ClientGroupsManager()
    manager.add("devs", "239.1.0.1", 6000, -1, 0)
    manager.remove("devs")
    assert not manager.exists("devs")


def test_remove_kills_processes(spawn):
    sender, receiver = spawn(), spawn()
    manager = ClientGroupsManager()
    manager.add("devs", "239.1.0.1", 6000, sender.pid, receiver.pid)
    manager.remove("devs")
    assert sender.wait(timeout=10) == -signal.SIGKILL
    assert receiver.wait(timeout=10) == -signal.SIGKILL
    assert len(manager) == 0


def test_remove_all_kills_every_group(spawn):
    first, second = spawn(), spawn()
    manager = ClientGroupsManager()
    manager.add("devs", "239.1.0.1", 6000, first.pid, None)
    manager.add("ops", "239.1.0.2", 6001, None, second.pid)
    manager.remove_all()
    assert first.wait(timeout=10) == -signal.SIGKILL
    assert second.wait(timeout=10) == -signal.SIGKILL
    assert list(manager) == []


def test_close_via_context_manager(spawn):
    proc = spawn()
    with ClientGroupsManager() as manager:
        manager.add("devs", "239.1.0.1", 6000, proc.pid, None)
    assert proc.wait(timeout=10) == -signal.SIGKILL
    assert len(manager) == 0