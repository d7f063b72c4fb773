import pytest

from sysdrills.user import MAX_PASSWORD_LEN, MAX_USERNAME_LEN, User, UserError, UserManager

password = "password"


def test_user_truncates_fields():
    user = User("u" * 40, "p" * 40, 3)
    assert user.username == "u" * (MAX_USERNAME_LEN - 1)
    assert user.password == "p" * (MAX_PASSWORD_LEN - 1)
    assert user.is_active is False


def test_register_creates_inactive_user():
    manager = UserManager()
    manager.register("alice", password, 5)
    user = manager.get("alice")
    assert user.username == "alice"
    assert user.is_active is False
    assert user.socket_fd == 5


def test_register_duplicate_raises():
    manager = UserManager()
    manager.register("alice", password, 5)
    with pytest.raises(UserError):
        manager.register("alice", password, 6)
    assert len(manager) == 1


def test_login_success():
    manager = UserManager()
    manager.register("alice", password, 5)
    manager.login("alice", password, 9)
    user = manager.get("alice")
    assert user.is_active is True
    assert user.socket_fd == 9


def test_login_wrong_password():
    manager = UserManager()
    manager.register("alice", password, 5)
    wrong_password = "secret"
    with pytest.raises(UserError):
        manager.login("alice", wrong_password, 9)
    assert manager.get("alice").is_active is False


def test_login_unknown_user():
    manager = UserManager()
    with pytest.raises(UserError):
        manager.login("nobody", password, 1)


def test_logout_resets_state():
    manager = UserManager()
    manager.register("alice", password, 5)
    manager.login("alice", password, 9)
    manager.logout("alice")
    user = manager.get("alice")
    assert user.is_active is False
    assert user.socket_fd is None


def test_logout_unknown_user():
    manager = UserManager()
    with pytest.raises(UserError):
        manager.logout("nobody")


def test_find_active_by_socket():
    manager = UserManager()
    manager.register("alice", password, 1)
    manager.register("bob", password, 2)
    assert manager.find_active_by_socket(2) is None
    manager.login("bob", password, 2)
    assert manager.find_active_by_socket(2).username == "bob"
    assert manager.find_active_by_socket(1) is None


def test_iteration_yields_all_users():
    manager = UserManager()
    names = ["alice", "bob", "carol"]
    for fd, name in enumerate(names):
        manager.register(name, password, fd)
    assert sorted(user.username for user in manager) == names


def test_get_missing_returns_none():
    assert UserManager().get("ghost") is None