import io
import threading

import pytest

from sysdrills import ui
from sysdrills.client_mng import ClientManager
from sysdrills.server_mng import ServerManager

PASSWORD = "password"


@pytest.fixture
def server():
    manager = ServerManager(port=0, host="127.0.0.1")
    thread = threading.Thread(target=manager.run, daemon=True)
    thread.start()
    yield manager
    manager.close()
    thread.join(timeout=2)


def _no_windows(group_name, mc_ip, mc_port, username):
    return None, None


@pytest.fixture
def client(server):
    with ClientManager("127.0.0.1", server.net.port, window_launcher=_no_windows) as m:
        yield m


def _run(client, script):
    out = io.StringIO()
    ui.run(client, io.StringIO(script), out)
    return out.getvalue()


def test_full_session(client, server):
    script = (
        f"1\nalice\n{PASSWORD}\n\n"
        f"2\nalice\n{PASSWORD}\n"
        "1\nchat\n\n"
        "4\n"
        "3\n"
    )
    output = _run(client, script)
    assert "OK  Registration successful" in output
    assert "OK  Login successful" in output
    assert "Welcome, alice" in output
    assert "OK  Joined group 'chat' -> 239.1.0.1:6000" in output
    assert client.net is None
    assert server.users.get("alice").is_active is False
    assert not server.groups.exists("chat")


def test_failed_login_shows_error(client):
    output = _run(client, f"2\nbob\n{PASSWORD}\n\n3\n")
    assert "ERR Invalid username or password" in output
    assert "Welcome" not in output
    assert client.logged_in is False


def test_unknown_choice_redraws_menu(client):
    output = _run(client, "9\n3\n")
    assert output.count("LAN CHAT APPLICATION") == 2
    assert client.net is None


def test_end_of_input_exits(client):
    output = _run(client, "")
    assert output.count("Choice: ") == 1
    assert client.net is None


def test_group_error_is_reported(client):
    script = (
        f"1\nalice\n{PASSWORD}\n\n"
        f"2\nalice\n{PASSWORD}\n"
        "2\nnowhere\n\n"
        "4\n3\n"
    )
    output = _run(client, script)
    assert "ERR Group does not exist" in output


def test_main_with_bad_address_fails(capsys):
    assert ui.main(["not-an-ip"]) == 1
    assert "Failed to connect to server at not-an-ip" in capsys.readouterr().err