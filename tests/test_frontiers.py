import pytest

from gensearch.core.frontiers import FIFOQueue, LIFOStack, PriorityQueue


def test_lifo_pops_most_recent_first():
    s = LIFOStack()
    for x in (1, 2, 3):
        s.push(x)
    assert s.peek() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert len(s) == 0 and not s


def test_fifo_pops_oldest_first():
    q = FIFOQueue()
    for x in "abc":
        q.push(x)
    assert len(q) == 3
    assert q.peek() == "a"
    assert [q.pop() for _ in range(3)] == ["a", "b", "c"]
    assert not q


def test_priority_queue_orders_by_key():
    pq = PriorityQueue(key=lambda x: x[1])
    for item in [("c", 3), ("a", 1), ("b", 2)]:
        pq.push(item)
    assert pq.peek() == ("a", 1)
    assert [pq.pop()[0] for _ in range(3)] == ["a", "b", "c"]


def test_priority_queue_ties_pop_in_insertion_order():
    pq = PriorityQueue(key=lambda x: 0)
    # dicts are not orderable: the counter must settle ties before the items are compared
    items = [{"id": i} for i in range(5)]
    for it in items:
        pq.push(it)
    assert [pq.pop()["id"] for _ in range(5)] == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("frontier", [LIFOStack(), FIFOQueue(), PriorityQueue(key=lambda x: x)])
def test_pop_on_empty_frontier_raises(frontier):
    with pytest.raises(IndexError):
        frontier.pop()
