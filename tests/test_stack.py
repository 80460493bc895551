from algokata.stack import Stack


def test_push_pop_order():
    stack = Stack()
    for i in range(10):
        stack.push(i)
    assert [stack.pop() for _ in range(10)] == list(range(9, -1, -1))
    assert stack.is_empty() is True

    stack.push(1)
    assert stack.top() == 1
    assert stack.is_empty() is False
    assert stack.pop() == 1
    assert stack.is_empty() is True


def test_empty_stack_yields_zero():
    stack = Stack()
    assert stack.pop() == 0
    assert stack.top() == 0
    assert len(stack) == 0


def test_top_does_not_remove():
    stack = Stack()
    stack.push(4)
    stack.push(7)
    assert stack.top() == 7
    assert len(stack) == 2