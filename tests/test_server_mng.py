import socket
import threading

import pytest

from sysdrills.group_mng import GROUP_BASE_PORT
from sysdrills.mcpool import MC_IP_POOL_START
from sysdrills.protocol import (
    RESPONSE_SIZE,
    ClientMsgType,
    ClientRequest,
    ServerMsgType,
    decode_response,
)
from sysdrills.server_mng import ServerManager

password = "password"
wrong_password = "secret"


def _read_exact(sock, size):
    buf = b""
    while len(buf) < size:
        chunk = sock.recv(size - len(buf))
        if not chunk:
            break
        buf += chunk
    return buf


@pytest.fixture
def manager():
    server = ServerManager(0, "127.0.0.1")
    yield server
    server.close()


def _req(msg_type, user="alice", group=""):
    return ClientRequest(msg_type, user, password, group)


def test_register_then_duplicate(manager):
    sock = object()
    first = manager.handle_request(_req(ClientMsgType.MSG_REGISTER), sock)
    second = manager.handle_request(_req(ClientMsgType.MSG_REGISTER), sock)
    assert (first.type, first.message) == (ServerMsgType.RES_OK, "Registration successful")
    assert (second.type, second.message) == (ServerMsgType.RES_ERROR, "Username already exists")


def test_login(manager):
    sock = object()
    manager.handle_request(_req(ClientMsgType.MSG_REGISTER), sock)
    bad = manager.handle_request(
        ClientRequest(ClientMsgType.MSG_LOGIN, "alice", wrong_password), sock
    )
    good = manager.handle_request(_req(ClientMsgType.MSG_LOGIN), sock)
    assert bad.message == "Invalid username or password"
    assert good.message == "Login successful"
    assert manager.users.get("alice").is_active


def test_create_group_returns_group_info(manager):
    response = manager.handle_request(_req(ClientMsgType.MSG_CREATE_GROUP, group="devs"), object())
    assert response.type is ServerMsgType.RES_GROUP_INFO
    assert response.multicast_ip == MC_IP_POOL_START
    assert response.multicast_port == GROUP_BASE_PORT
    assert response.message == f"Joined group 'devs' -> {MC_IP_POOL_START}:{GROUP_BASE_PORT}"
    assert manager.groups.get_group("devs").has_member("alice")


def test_create_existing_group_fails(manager):
    manager.handle_request(_req(ClientMsgType.MSG_CREATE_GROUP, group="devs"), object())
    response = manager.handle_request(
        _req(ClientMsgType.MSG_CREATE_GROUP, user="bob", group="devs"), object()
    )
    assert response.message == "Group name taken or no resources"


def test_join_missing_group(manager):
    response = manager.handle_request(_req(ClientMsgType.MSG_JOIN_GROUP, group="none"), object())
    assert (response.type, response.message) == (ServerMsgType.RES_ERROR, "Group does not exist")


def test_join_existing_group(manager):
    created = manager.handle_request(_req(ClientMsgType.MSG_CREATE_GROUP, group="devs"), object())
    joined = manager.handle_request(
        _req(ClientMsgType.MSG_JOIN_GROUP, user="bob", group="devs"), object()
    )
    assert joined.multicast_ip == created.multicast_ip
    assert manager.groups.get_group("devs").member_count() == 2


def test_leaving_last_member_deletes_group(manager):
    manager.handle_request(_req(ClientMsgType.MSG_CREATE_GROUP, group="devs"), object())
    response = manager.handle_request(_req(ClientMsgType.MSG_LEAVE_GROUP, group="devs"), object())
    assert response.message == "Left group"
    assert not manager.groups.exists("devs")


def test_leave_missing_group(manager):
    response = manager.handle_request(_req(ClientMsgType.MSG_LEAVE_GROUP, group="devs"), object())
    assert response.message == "Group does not exist"


def test_logout_leaves_all_groups(manager):
    sock = object()
    manager.handle_request(_req(ClientMsgType.MSG_REGISTER), sock)
    manager.handle_request(_req(ClientMsgType.MSG_LOGIN), sock)
    manager.handle_request(_req(ClientMsgType.MSG_CREATE_GROUP, group="devs"), sock)
    response = manager.handle_request(_req(ClientMsgType.MSG_LOGOUT), sock)
    assert response.message == "Logout successful"
    assert not manager.groups.exists("devs")
    assert manager.users.get("alice").is_active is False


def test_unknown_request(manager):
    response = manager.handle_request(ClientRequest(99), object())
    assert (response.type, response.message) == (ServerMsgType.RES_ERROR, "Unknown request")


def test_handle_client_answers_over_socket(manager):
    left, right = socket.socketpair()
    with left, right:
        left.sendall(_req(ClientMsgType.MSG_REGISTER).pack())
        manager.handle_client(right)
        response = decode_response(_read_exact(left, RESPONSE_SIZE))
    assert response.message == "Registration successful"


def test_handle_client_cleans_up_ghost_user(manager):
    left, right = socket.socketpair()
    with right:
        manager.handle_request(_req(ClientMsgType.MSG_REGISTER), right)
        manager.handle_request(_req(ClientMsgType.MSG_LOGIN), right)
        manager.handle_request(_req(ClientMsgType.MSG_CREATE_GROUP, group="devs"), right)
        left.close()
        manager.handle_client(right)
        assert manager.users.get("alice").is_active is False
        assert not manager.groups.exists("devs")


def test_run_serves_clients_until_closed():
    manager = ServerManager(0, "127.0.0.1")
    thread = threading.Thread(target=manager.run, daemon=True)
    thread.start()
    with socket.create_connection(("127.0.0.1", manager.net.port), timeout=5) as conn:
        conn.sendall(_req(ClientMsgType.MSG_REGISTER).pack())
        response = decode_response(_read_exact(conn, RESPONSE_SIZE))
    manager.close()
    thread.join(timeout=5)
    assert response.type is ServerMsgType.RES_OK
    assert manager.users.get("alice") is not None
    assert not thread.is_alive()