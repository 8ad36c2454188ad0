from __future__ import annotations

import pytest

from custom_components.exercise_editor.const import DELETE_UNDO_SECONDS
from custom_components.exercise_editor.exceptions import SchedulerClosedError
from custom_components.exercise_editor.scheduler import DeleteScheduler


def _scheduler(timers, committed: list[int]) -> DeleteScheduler:
    return DeleteScheduler(schedule_later=timers.schedule_later, on_commit=committed.append)


def test_request_marks_pending_without_committing(timers) -> None:
    committed: list[int] = []
    sched = _scheduler(timers, committed)
    sched.request_delete(3)
    assert sched.pending_id == 3
    assert committed == []
    assert len(timers.armed) == 1
    assert timers.armed[0][0] == DELETE_UNDO_SECONDS


def test_expiry_commits_and_returns_to_idle(timers) -> None:
    committed: list[int] = []
    sched = _scheduler(timers, committed)
    sched.request_delete(3)
    timers.fire_all()
    assert committed == [3]
    assert sched.pending_id is None
    assert timers.armed == []


def test_undo_cancels_without_committing(timers) -> None:
    committed: list[int] = []
    sched = _scheduler(timers, committed)
    sched.request_delete(3)
    assert sched.undo() == 3
    assert sched.pending_id is None
    assert timers.armed == []
    assert timers.cancelled == 1
    timers.fire_all()
    assert committed == []


def test_undo_when_idle_is_a_noop(timers) -> None:
    sched = _scheduler(timers, [])
    assert sched.undo() is None
    assert timers.cancelled == 0


def test_second_request_commits_first_before_arming(timers) -> None:
    committed: list[int] = []
    order: list[str] = []
    original = timers.schedule_later

    def _schedule(delay, action):
        order.append(f"arm:{list(committed)}")
        return original(delay, action)

    sched = DeleteScheduler(schedule_later=_schedule, on_commit=committed.append)
    sched.request_delete(1)
    sched.request_delete(2)
    assert committed == [1]
    assert order == ["arm:[]", "arm:[1]"]
    assert sched.pending_id == 2
    assert len(timers.armed) == 1
    timers.fire_all()
    assert committed == [1, 2]


def test_at_most_one_timer_is_ever_armed(timers) -> None:
    committed: list[int] = []
    sched = _scheduler(timers, committed)
    for step in [1, 2, "undo", 3, 3, 4, "undo", "undo", 5, 6]:
        if step == "undo":
            sched.undo()
        else:
            sched.request_delete(step)
        assert len(timers.armed) <= 1
        assert (sched.pending_id is None) == (len(timers.armed) == 0)
    assert committed == [1, 3, 5]


def test_same_id_rearms_without_commit(timers) -> None:
    committed: list[int] = []
    sched = _scheduler(timers, committed)
    sched.request_delete(4)
    sched.request_delete(4)
    assert committed == []
    assert timers.scheduled == 2
    assert len(timers.armed) == 1


def test_shutdown_cancels_timer_and_rejects_requests(timers) -> None:
    committed: list[int] = []
    sched = _scheduler(timers, committed)
    sched.request_delete(9)
    sched.shutdown()
    assert timers.armed == []
    assert sched.pending_id is None
    assert committed == []
    with pytest.raises(SchedulerClosedError):
        sched.request_delete(10)


def test_stale_fire_after_shutdown_does_nothing(timers) -> None:
    committed: list[int] = []
    sched = _scheduler(timers, committed)
    sched.request_delete(9)
    # Grab the action before shutdown cancels it, then fire it anyway.
    _delay, action = timers.armed[0]
    sched.shutdown()
    action(None)
    assert committed == []
