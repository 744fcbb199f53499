import pytest

from dsakit.errors import EmptyContainerError
from dsakit.linked_queue import LinkedQueue


def test_source_example():
    q = LinkedQueue()
    for v in (3, 2, 1):
        q.push(v)
    assert q.display() == "3 2 1"
    q.pop()
    assert q.display() == "2 1"
    assert q.front() == 2


def test_fifo_round_trip():
    q = LinkedQueue()
    items = [5, 9, 1, 4]
    for v in items:
        q.push(v)
    assert list(q) == items
    assert [q.pop() for _ in items] == items
    assert q.is_empty() is True


def test_reuse_after_draining():
    q = LinkedQueue()
    q.push(1)
    q.pop()
    q.push(8)
    assert q.front() == 8
    assert len(q) == 1


def test_empty_display_message():
    assert LinkedQueue().display() == "Queue is empty Nothing to display"


def test_pop_empty_raises():
    with pytest.raises(EmptyContainerError, match="Queue is empty"):
        LinkedQueue().pop()


def test_front_empty_raises():
    with pytest.raises(EmptyContainerError):
        LinkedQueue().front()