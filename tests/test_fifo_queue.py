import pytest

from dsakit.fifo_queue import Queue


def filled():
    queue = Queue()
    for number in (5, 10, 15):
        queue.enqueue(number)
    return queue


def test_queue():
    assert filled().peek() == 5


def test_size():
    assert len(filled()) == 3


def test_peek():
    assert Queue().peek() is None
    assert filled().peek() == 5


def test_peek_last():
    assert Queue().peek_last() is None
    assert filled().peek_last() == 15


def test_dequeue():
    queue = filled()
    assert queue.dequeue() == 5
    assert queue.peek() == 10
    assert len(queue) == 2


def test_dequeue_empty_raises():
    with pytest.raises(IndexError, match="queue is empty"):
        Queue().dequeue()


def test_render():
    assert filled().render() == "5 -> 10 -> 15\n"


def test_render_empty_raises():
    with pytest.raises(IndexError):
        Queue().render()


def test_fifo_order():
    queue = filled()
    assert list(queue) == [5, 10, 15]
    assert [queue.dequeue() for _ in range(3)] == [5, 10, 15]
    assert len(queue) == 0
    assert queue.peek_last() is None