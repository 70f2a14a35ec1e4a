from dataclasses import dataclass

from kata.structures import LinkedList, Queue, Stack


@dataclass
class Node:
    id: int
    elem: str


def test_stack_operations():
    stack = Stack()
    assert stack.is_empty()
    assert stack.pop() is None
    assert stack.peek() is None

    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert len(stack) == 3
    assert stack.peek() == 1

    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.is_empty()


def test_stack_operations_items_struct():
    stack = Stack()
    stack.push(Node(1, "Element1"))
    stack.push(Node(2, "Element2"))
    assert len(stack) == 2

    peeked = stack.peek()
    assert peeked.id == 1
    assert peeked.elem == "Element1"

    popped = stack.pop()
    assert popped.id == 2
    assert popped.elem == "Element2"
    assert len(stack) == 1

    stack.pop()
    assert stack.is_empty()


def test_queue_operations():
    queue = Queue()
    assert queue.is_empty()
    assert queue.dequeue() is None
    assert queue.peek() is None

    queue.enqueue(1)
    queue.enqueue(2)
    queue.enqueue(3)
    assert len(queue) == 3
    assert queue.peek() == 1

    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert queue.dequeue() == 3
    assert queue.is_empty()


def test_queue_operations_items_struct():
    queue = Queue()
    queue.enqueue(Node(1, "Element1"))
    queue.enqueue(Node(2, "Element2"))
    assert len(queue) == 2

    peeked = queue.peek()
    assert peeked.id == 1
    assert peeked.elem == "Element1"

    dequeued = queue.dequeue()
    assert dequeued == Node(1, "Element1")
    assert len(queue) == 1

    queue.dequeue()
    assert queue.is_empty()


def test_new_list_is_empty():
    assert LinkedList().first() is None


def test_add_single_element():
    linked = LinkedList()
    linked.add(32)
    assert linked.first() == 32
    assert linked.find(32) == 32


def test_add_multiple_elements():
    linked = LinkedList()
    for value in (10, 20, 30):
        linked.add(value)
    assert linked.find(10) == 10
    assert linked.find(20) == 20
    assert linked.find(30) == 30


def test_find_non_existent_element():
    linked = LinkedList()
    linked.add(42)
    assert linked.find(100) is None


def test_add_and_find_multiple_times():
    linked = LinkedList()
    values = [1, 5, 10, 15, 20]
    for value in values:
        linked.add(value)
    for value in values:
        assert linked.find(value) == value


def test_iteration_order_and_str():
    linked = LinkedList()
    for value in (10, 20, 30):
        linked.add(value)
    assert list(linked) == [30, 20, 10]
    assert str(linked) == "30 20 10"
    assert linked.first() == 30