from dsakit.linked_list import LinkedList


def test_source_example():
    ll = LinkedList()
    ll.append(3)
    ll.prepend(2)
    ll.prepend(1)
    ll.append(7)
    assert ll.remove(7) is True
    assert ll.display() == "1->2->3->NULL"


def test_empty_display():
    assert LinkedList().display() == "NULL"


def test_append_keeps_order():
    ll = LinkedList()
    items = [4, 8, 15, 16]
    for v in items:
        ll.append(v)
    assert list(ll) == items
    assert len(ll) == len(items)


def test_prepend_reverses_order():
    ll = LinkedList()
    items = [4, 8, 15]
    for v in items:
        ll.prepend(v)
    assert list(ll) == items[::-1]


def test_remove_head_and_middle():
    ll = LinkedList()
    for v in (1, 2, 3, 4):
        ll.append(v)
    assert ll.remove(1) is True
    assert ll.remove(3) is True
    assert list(ll) == [2, 4]


def test_remove_only_first_occurrence():
    ll = LinkedList()
    for v in (5, 6, 5):
        ll.append(v)
    ll.remove(5)
    assert list(ll) == [6, 5]


def test_remove_missing_value():
    ll = LinkedList()
    ll.append(1)
    assert ll.remove(42) is False
    assert list(ll) == [1]


def test_remove_from_empty():
    assert LinkedList().remove(1) is False