# sysdrills

A collection of small systems-programming exercises. Each one can be used as
a library, and most can be run from the command line.

- **Data structures**: a doubly linked list (`sysdrills.dll`), a FIFO queue
  built on it (`sysdrills.fifo`), a singly linked list of people kept sorted
  by id (`sysdrills.person_list`), a growable vector (`sysdrills.genvec`) and
  a binary heap over a vector (`sysdrills.genheap`).
- **Chat containers**: a list, a chained string-keyed hash table and a queue
  (`sysdrills.ds`), on which the chat server's users and groups are built.
- **String tools** (`sysdrills.strtools`): reversing strings and word order,
  palindrome checks, integer parsing and formatting, word counting.
- **Process and IPC demos**: a parent and a child process exchanging "Ping"
  and "Pong" (`sysdrills.pingpong`), signal handling (`sysdrills.signals`) and
  a minimal command shell (`sysdrills.shell`).
- **LAN chat**: a TCP server that manages users and chat groups, where each
  group gets its own multicast address and port, and a terminal client that
  opens a send window and a receive window for every group it joins.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from sysdrills.dll import DoublyLinkedList
from sysdrills.genheap import Heap, int_max_comparator
from sysdrills.genvec import Vector
from sysdrills import strtools

items = DoublyLinkedList()
items.push_tail("b")
items.push_head("a")
print(list(items))          # ['a', 'b']
print(items.pop_tail())     # 'b'

heap = Heap(Vector(5, 5), int_max_comparator)
for value in (50, 30, 80, 10, 90, 20):
    heap.insert(value)
print(heap.peek())          # 90
print(heap.extract())       # 90

print(strtools.reverse_str("Hello World"))                 # 'dlroW olleH'
print(strtools.reverse_words("cat dog bird"))              # 'bird dog cat'
print(strtools.count_words("   hello   world   test  "))   # 3
print(strtools.my_itoa(-9876))                             # '-9876'
print(strtools.my_atoi("-404"))                            # -404
```

Errors are raised rather than returned:

- popping from an empty `DoublyLinkedList` raises `ListUnderflowError`;
- dequeuing from an empty `sysdrills.fifo.Queue` raises `QueueUnderflowError`;
- `Vector.remove` on an empty vector raises `VectorUnderflowError`, and
  appending to a full vector whose block size is zero raises
  `VectorAllocationError`;
- `strtools.my_atoi` raises `ValueError` for anything other than an optional
  sign followed by digits.

`None` cannot be stored in the doubly linked list, the FIFO queue, the vector
or the heap; trying raises `ValueError`.

## Commands

Demonstrations:

```
sysdrills-persons           # build, print and shrink a sorted list of people
sysdrills-strings           # run the string tools on sample inputs
sysdrills-heap              # insert into a max-heap, peek and extract
sysdrills-pingpong [pipe|mq]  # parent and child exchange "Ping" and "Pong"
sysdrills-ctrlc [seconds]   # prints '*' every tick (1 s); the third Ctrl-C exits
sysdrills-kill-child [seconds]  # parent sends SIGTERM to a chatty child (after 10 s)
sysdrills-shell             # a tiny interactive shell; type 'exit' to quit
```

`sysdrills-pingpong` uses a pair of pipes by default; `mq` uses a pair of
message queues between the two processes instead.

### LAN chat

Start the server. It listens on TCP port 8080 on every interface and logs
what it does to standard error:

```
sysdrills-chat-server
```

Start a client, optionally giving the server's IPv4 address (the default is
`127.0.0.1`):

```
sysdrills-chat-client 192.168.1.10
```

The client shows a menu to register, log in or exit, and once logged in, to
create, join or leave a group or to log out. Groups get multicast addresses
from `239.1.0.1` to `239.1.0.200`, handed out in order and returned to the
pool when a group is deleted, and ports counting up from 6000. A group is
deleted when its last member leaves. When a connection drops without logging
out, the server logs that user out and takes them out of every group.

For each group joined, the client opens two `xterm` windows: one runs the
multicast sender, which sends every non-empty line typed into it to the
group, and one runs the multicast receiver, which prints every message
arriving for the group. Leaving the group, logging out or exiting closes
those windows. The helpers can also be started by hand:

```
sysdrills-mc-sender   <mc_ip> <port> <report_path>
sysdrills-mc-receiver <mc_ip> <port> <report_path>
```

Each appends a line `S <pid>` or `R <pid>` to `report_path` when it starts.

## What it does not do

- Accounts and groups live only in the server's memory; they are gone when
  the server stops, and passwords are kept and sent as plain text.
- Chat messages never pass through the server: they go straight between the
  members' multicast windows, so there is no history and no delivery check.
- The group windows need `xterm` and a POSIX system; without them a group
  can still be joined, but no windows open.