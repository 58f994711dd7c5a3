from delaycontrol.action import ActionKind, ControlAction, Queue


def test_constructors_set_kind_and_control():
    assert ControlAction.calibrate(2) == ControlAction(ActionKind.CALIBRATE, 2)
    assert ControlAction.map(3) == ControlAction(ActionKind.MAP, 3)


def test_empty_queue_pops_none():
    queue = Queue()
    assert queue.pop() is None
    assert len(queue) == 0


def test_queue_is_first_in_first_out():
    queue = Queue()
    queue.push(ControlAction.calibrate(1))
    queue.push(ControlAction.map(1))
    queue.push(ControlAction.map(2))
    assert queue.pop() == ControlAction.calibrate(1)
    assert queue.pop() == ControlAction.map(1)
    assert queue.pop() == ControlAction.map(2)
    assert queue.pop() is None


def test_contains_and_len():
    queue = Queue()
    queue.push(ControlAction.map(0))
    queue.push(ControlAction.calibrate(1))
    assert len(queue) == 2
    assert ControlAction.map(0) in queue
    assert ControlAction.calibrate(1) in queue
    assert ControlAction.map(1) not in queue


def test_remove_control_drops_all_its_actions():
    queue = Queue()
    queue.push(ControlAction.map(0))
    queue.push(ControlAction.calibrate(1))
    queue.push(ControlAction.map(1))
    queue.push(ControlAction.map(2))
    queue.remove_control(1)
    assert len(queue) == 2
    assert queue.pop() == ControlAction.map(0)
    assert queue.pop() == ControlAction.map(2)


def test_push_beyond_capacity_is_dropped():
    queue = Queue()
    for i in range(8):
        queue.push(ControlAction.map(i))
    queue.push(ControlAction.calibrate(9))
    assert len(queue) == 8
    assert ControlAction.calibrate(9) not in queue