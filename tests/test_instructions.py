from jadio.instructions import InstructionQueue


def test_instructions_come_out_in_order():
    queue = InstructionQueue()
    queue.add("first")
    queue.add("second")
    assert queue.pop().text == "first"
    assert queue.pop().text == "second"
    assert queue.pop() is None


def test_peek_does_not_remove():
    queue = InstructionQueue()
    queue.add("only")
    assert queue.peek().text == "only"
    assert len(queue) == 1
    assert queue.pop().text == "only"
    assert queue.peek() is None


def test_len_and_truthiness():
    queue = InstructionQueue()
    assert not queue
    queue.add("a")
    queue.add("b")
    assert len(queue) == 2
    assert queue


def test_clear_empties_queue():
    queue = InstructionQueue()
    queue.add("a")
    queue.clear()
    assert len(queue) == 0
    assert queue.pop() is None


def test_timestamps_follow_insertion_order():
    queue = InstructionQueue()
    queue.add("a")
    queue.add("b")
    first, second = queue.pop(), queue.pop()
    assert first.timestamp <= second.timestamp