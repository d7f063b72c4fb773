import pytest

from sysdrills.person_list import (
    create_person,
    format_list,
    insert_by_key,
    insert_by_key_rec,
    insert_head,
    iter_list,
    main,
    remove_by_key,
    remove_by_key_rec,
    remove_head,
)


def _ids(head):
    return [p.person_id for p in iter_list(head)]


def _build(insert, keys):
    head = None
    for key in keys:
        head = insert(head, key, create_person(0, f"p{key}", 30))
    return head


@pytest.mark.parametrize("insert", [insert_by_key, insert_by_key_rec])
def test_insert_by_key_keeps_sorted(insert):
    head = _build(insert, [10, 50, 20, 5, 30])
    assert _ids(head) == sorted([10, 50, 20, 5, 30])


@pytest.mark.parametrize("insert", [insert_by_key, insert_by_key_rec])
def test_insert_by_key_overwrites_id(insert):
    person = create_person(99, "Alice", 25)
    head = insert(None, 7, person)
    assert head is person
    assert person.person_id == 7


@pytest.mark.parametrize("insert", [insert_by_key, insert_by_key_rec])
def test_insert_none_returns_same_head(insert):
    head = _build(insert, [1, 2])
    assert insert(head, 3, None) is head
    assert _ids(head) == [1, 2]


def test_insert_head_ignores_order():
    head = _build(insert_by_key, [10, 20])
    diana = create_person(50, "Diana", 28)
    head = insert_head(head, diana)
    assert head is diana
    assert _ids(head) == [50, 10, 20]


def test_insert_head_none_keeps_head():
    head = _build(insert_by_key, [1])
    assert insert_head(head, None) is head


def test_remove_head_detaches_node():
    head = _build(insert_by_key, [1, 2, 3])
    new_head, removed = remove_head(head)
    assert removed.person_id == 1
    assert removed.next is None
    assert _ids(new_head) == [2, 3]


def test_remove_head_of_empty():
    assert remove_head(None) == (None, None)


@pytest.mark.parametrize("remove", [remove_by_key, remove_by_key_rec])
@pytest.mark.parametrize("key", [10, 20, 50])
def test_remove_by_key(remove, key):
    head = _build(insert_by_key, [10, 20, 50])
    head, removed = remove(head, key)
    assert removed.person_id == key
    assert removed.next is None
    assert _ids(head) == [k for k in [10, 20, 50] if k != key]


@pytest.mark.parametrize("remove", [remove_by_key, remove_by_key_rec])
def test_remove_missing_key(remove):
    head = _build(insert_by_key, [10, 20])
    new_head, removed = remove(head, 15)
    assert removed is None
    assert new_head is head
    assert _ids(new_head) == [10, 20]


@pytest.mark.parametrize("remove", [remove_by_key, remove_by_key_rec])
def test_remove_from_empty(remove):
    assert remove(None, 1) == (None, None)


def test_create_person_truncates_name():
    person = create_person(1, "x" * 300, 40)
    assert len(person.name) == 127


def test_format_empty_list():
    assert format_list(None) == "Current List:\n  [Empty List]\n\n"


def test_format_list_rows():
    head = insert_by_key(None, 10, create_person(10, "Alice", 25))
    text = format_list(head)
    assert "  [ID: 10 | Name: Alice | Age: 25] -> \n" in text
    assert text.endswith("  NULL\n\n")


def test_main_runs_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Successfully removed: Charlie" in out
    assert "Successfully removed: Diana" in out
    assert out.endswith("Cleanup complete. Program exiting.\n")