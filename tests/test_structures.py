import pytest

from graphkit.structures import PriorityQueue, Queue, UnionFind


def test_union_find_already_connected():
    uf = UnionFind(5)
    uf.unite(0, 1)
    uf.unite(1, 2)
    assert uf.find(0) == uf.find(2)
    uf.unite(0, 2)
    assert uf.find(0) == uf.find(2)


def test_union_find_correct_roots():
    uf = UnionFind(5)
    uf.unite(0, 1)
    uf.unite(2, 3)
    assert uf.find(0) == uf.find(1)
    assert uf.find(2) == uf.find(3)
    assert uf.find(0) != uf.find(2)


def test_union_find_singletons_are_own_roots():
    uf = UnionFind(4)
    assert [uf.find(x) for x in range(4)] == [0, 1, 2, 3]


def test_union_find_out_of_range():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.unite(-1, 0)


def test_pq_extract_from_empty():
    with pytest.raises(IndexError):
        PriorityQueue(5).extract_min()


def test_pq_decrease_missing():
    with pytest.raises(ValueError):
        PriorityQueue(5).decrease_priority(3, 1)


def test_pq_insert_and_extract():
    pq = PriorityQueue(5)
    pq.insert(1, 10)
    pq.insert(2, 5)
    pq.insert(3, 15)
    assert pq.extract_min() == 2
    assert pq.extract_min() == 1
    assert pq.extract_min() == 3
    assert pq.is_empty()


def test_pq_contains():
    pq = PriorityQueue(5)
    pq.insert(1, 10)
    pq.insert(2, 5)
    assert 1 in pq
    assert 2 in pq
    assert 3 not in pq
    assert len(pq) == 2


def test_pq_decrease_priority():
    pq = PriorityQueue(5)
    pq.insert(1, 10)
    pq.insert(2, 5)
    pq.decrease_priority(1, 3)
    assert pq.extract_min() == 1
    assert pq.extract_min() == 2


def test_pq_decrease_to_higher():
    pq = PriorityQueue(5)
    pq.insert(1, 10)
    with pytest.raises(ValueError):
        pq.decrease_priority(1, 15)


def test_pq_decrease_to_same_keeps_entry():
    pq = PriorityQueue(5)
    pq.insert(1, 10)
    pq.decrease_priority(1, 10)
    assert 1 in pq
    assert pq.extract_min() == 1


def test_pq_contains_after_decrease():
    pq = PriorityQueue(5)
    pq.insert(1, 10)
    pq.insert(2, 5)
    pq.decrease_priority(1, 3)
    assert 1 in pq
    assert 2 in pq


def test_pq_full():
    pq = PriorityQueue(5)
    for index, priority in [(1, 10), (2, 5), (3, 15), (4, 20), (5, 25)]:
        pq.insert(index, priority)
    with pytest.raises(OverflowError):
        pq.insert(6, 30)


def test_pq_duplicate_index():
    pq = PriorityQueue(5)
    pq.insert(1, 10)
    with pytest.raises(ValueError):
        pq.insert(1, 4)


def test_pq_ties_keep_first_found():
    pq = PriorityQueue(5)
    pq.insert(7, 1)
    pq.insert(8, 1)
    assert pq.extract_min() == 7
    assert pq.extract_min() == 8


def test_queue_fifo():
    q = Queue(5)
    for v in (1, 2, 3):
        q.enqueue(v)
    assert [q.dequeue() for _ in range(3)] == [1, 2, 3]


def test_queue_dequeue_empty():
    with pytest.raises(IndexError):
        Queue(5).dequeue()


def test_queue_enqueue_after_dequeue():
    q = Queue(5)
    q.enqueue(10)
    assert q.dequeue() == 10
    q.enqueue(20)
    assert q.dequeue() == 20


def test_queue_contains():
    q = Queue(5)
    q.enqueue(1)
    q.enqueue(2)
    assert 1 in q
    assert 2 in q
    assert 3 not in q


def test_queue_full():
    q = Queue(5)
    for v in range(1, 6):
        q.enqueue(v)
    with pytest.raises(OverflowError):
        q.enqueue(6)


def test_queue_empty_check():
    q = Queue(5)
    assert q.is_empty()
    q.enqueue(1)
    assert not q.is_empty()
    q.dequeue()
    assert q.is_empty()


def test_queue_contains_after_dequeue():
    q = Queue(5)
    q.enqueue(1)
    q.enqueue(2)
    q.dequeue()
    assert 2 in q
    assert 1 not in q


def test_queue_wrap_around():
    q = Queue(5)
    for i in range(5):
        q.enqueue(i)
    assert [q.dequeue() for _ in range(5)] == [0, 1, 2, 3, 4]


def test_queue_wrap_around_enqueue_after_dequeue():
    q = Queue(5)
    for i in range(5):
        q.enqueue(i)
    assert [q.dequeue() for _ in range(3)] == [0, 1, 2]
    q.enqueue(5)
    assert 5 in q
    assert 0 not in q
    assert [q.dequeue() for _ in range(3)] == [3, 4, 5]


def test_queue_contains_after_multiple_enqueues():
    q = Queue(5)
    for i in range(5):
        q.enqueue(i)
        assert i in q
    q.dequeue()
    assert 0 not in q
    assert 1 in q
    q.enqueue(5)
    assert 5 in q
    assert len(q) == 5