"""A singly linked list of people, optionally kept sorted by id."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple

__all__ = [
    "Person",
    "create_person",
    "insert_head",
    "remove_head",
    "insert_by_key",
    "remove_by_key",
    "insert_by_key_rec",
    "remove_by_key_rec",
    "iter_list",
    "format_list",
    "main",
]

_NAME_CAPACITY = 128


@dataclass
class Person:
    """A list node; ``person_id`` is the key."""

    person_id: int
    name: str
    age: int
    next: Optional["Person"] = field(default=None, repr=False, compare=False)


def create_person(person_id: int, name: str, age: int) -> Person:
    """Create a detached node, keeping at most 127 characters of the name."""
    return Person(person_id, name[: _NAME_CAPACITY - 1], age)


def insert_head(head: Optional[Person], person: Optional[Person]) -> Optional[Person]:
    """Put ``person`` in front of ``head`` and return the new head."""
    if person is None:
        return head
    person.next = head
    return person


def remove_head(head: Optional[Person]) -> Tuple[Optional[Person], Optional[Person]]:
    """Detach the first node; return ``(new_head, removed)``."""
    if head is None:
        return None, None
    new_head = head.next
    head.next = None
    return new_head, head


def insert_by_key(
    head: Optional[Person], key: int, person: Optional[Person]
) -> Optional[Person]:
    """Insert ``person`` with id ``key`` before the first node whose id is >= key."""
    if person is None:
        return head
    person.person_id = key
    if head is None or head.person_id >= key:
        person.next = head
        return person
    current = head
    while current.next is not None and current.next.person_id < key:
        current = current.next
    person.next = current.next
    current.next = person
    return head


def remove_by_key(
    head: Optional[Person], key: int
) -> Tuple[Optional[Person], Optional[Person]]:
    """Detach the first node with id ``key``; return ``(head, removed or None)``."""
    if head is None:
        return None, None
    if head.person_id == key:
        return remove_head(head)
    current = head
    while current.next is not None and current.next.person_id != key:
        current = current.next
    removed = current.next
    if removed is not None:
        current.next = removed.next
        removed.next = None
    return head, removed


def insert_by_key_rec(
    head: Optional[Person], key: int, person: Optional[Person]
) -> Optional[Person]:
    """Recursive form of :func:`insert_by_key`."""
    if person is None:
        return head
    person.person_id = key
    if head is None or head.person_id >= key:
        person.next = head
        return person
    head.next = insert_by_key_rec(head.next, key, person)
    return head


def remove_by_key_rec(
    head: Optional[Person], key: int
) -> Tuple[Optional[Person], Optional[Person]]:
    """Recursive form of :func:`remove_by_key`."""
    if head is None:
        return None, None
    if head.person_id == key:
        rest = head.next
        head.next = None
        return rest, head
    head.next, removed = remove_by_key_rec(head.next, key)
    return head, removed


def iter_list(head: Optional[Person]) -> Iterator[Person]:
    """Yield every node from ``head`` to the end."""
    while head is not None:
        yield head
        head = head.next


def format_list(head: Optional[Person]) -> str:
    """Render the list as a printable block of text."""
    if head is None:
        return "Current List:\n  [Empty List]\n\n"
    rows = "".join(
        f"  [ID: {p.person_id} | Name: {p.name} | Age: {p.age}] -> \n"
        for p in iter_list(head)
    )
    return f"Current List:\n{rows}  NULL\n\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Exercise the list operations and print each step."""
    out = sys.stdout
    out.write("--- Testing Single Linked List ---\n\n")

    alice = create_person(10, "Alice", 25)
    bob = create_person(50, "Bob", 30)
    charlie = create_person(20, "Charlie", 22)
    diana = create_person(5, "Diana", 28)

    out.write("Inserting Alice (10), Bob (50), and Charlie (20) BY KEY...\n")
    head = None
    for person in (alice, bob, charlie):
        head = insert_by_key(head, person.person_id, person)
    out.write(format_list(head))

    out.write("Inserting Diana (5) directly at the HEAD...\n")
    head = insert_head(head, diana)
    out.write(format_list(head))

    out.write("Removing Charlie (ID: 20) BY KEY...\n")
    head, removed = remove_by_key(head, 20)
    if removed is not None:
        out.write(f"  Successfully removed: {removed.name}\n\n")
    out.write(format_list(head))

    out.write("Removing the HEAD node...\n")
    head, removed = remove_head(head)
    if removed is not None:
        out.write(f"  Successfully removed: {removed.name}\n\n")
    out.write(format_list(head))

    out.write("Cleaning up remaining list...\n")
    while head is not None:
        head, _ = remove_head(head)
    out.write("Cleanup complete. Program exiting.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())