"""TimerService: intents wired to tracker, habit list and tick loop."""
import pytest

from services.timer_service import TimerService
from storage.repos import HabitRepo


@pytest.fixture
def habits(habit_repo):
    return habit_repo.add("Read", 30), habit_repo.add("Write", 15)


def test_track_starts_tick_loop(timer_service, scheduler, habits):
    a, _ = habits
    timer_service.track(a.id)
    assert timer_service.get_snapshot().is_running
    assert timer_service.ticker.is_active
    assert len(scheduler.pending) == 1


def test_track_unknown_habit_raises(timer_service):
    with pytest.raises(ValueError):
        timer_service.track("missing")
    with pytest.raises(ValueError):
        timer_service.track("")


def test_ticks_accumulate_elapsed(timer_service, scheduler, habits):
    a, _ = habits
    timer_service.track(a.id)
    scheduler.advance(3)
    assert timer_service.get_snapshot().elapsed_sec == 3


def test_switch_flushes_into_previous_habit(timer_service, scheduler, habit_repo, habits):
    a, b = habits
    timer_service.track(a.id)
    scheduler.advance(5)
    timer_service.track(b.id)

    assert habit_repo.get(a.id).time_spent == 5
    assert habit_repo.get(b.id).time_spent == 0
    snap = timer_service.get_snapshot()
    assert snap.active_habit_id == b.id
    assert snap.elapsed_sec == 0
    # still exactly one pending tick
    assert len(scheduler.pending) == 1


def test_pause_cancels_tick_and_keeps_elapsed(timer_service, scheduler, habit_repo, habits):
    a, _ = habits
    timer_service.track(a.id)
    scheduler.advance(2)
    timer_service.pause()

    assert scheduler.pending == {}
    scheduler.advance(10)
    assert timer_service.get_snapshot().elapsed_sec == 2
    assert habit_repo.get(a.id).time_spent == 0


def test_resume_restarts_tick(timer_service, scheduler, habits):
    a, _ = habits
    timer_service.track(a.id)
    scheduler.advance(2)
    timer_service.pause()
    timer_service.resume()
    scheduler.advance(3)
    assert timer_service.get_snapshot().elapsed_sec == 5


def test_resume_when_idle_does_not_schedule(timer_service, scheduler):
    timer_service.resume()
    assert scheduler.pending == {}
    assert not timer_service.get_snapshot().is_running


def test_stop_flushes_and_cancels(timer_service, scheduler, habit_repo, habits):
    a, _ = habits
    timer_service.track(a.id)
    scheduler.advance(4)
    timer_service.stop()

    assert habit_repo.get(a.id).time_spent == 4
    assert scheduler.pending == {}
    assert timer_service.get_snapshot().is_idle
    assert timer_service.active_habit() is None


def test_stop_when_idle_is_noop(timer_service, habit_repo, habits):
    timer_service.stop()
    assert timer_service.get_snapshot().active_habit_id is None
    assert all(h.time_spent == 0 for h in habit_repo.list())


def test_flushed_time_survives_reload(timer_service, scheduler, store, habits):
    a, _ = habits
    timer_service.track(a.id)
    scheduler.advance(6)
    timer_service.stop()

    assert HabitRepo(store).get(a.id).time_spent == 6


def test_close_flushes_and_leaves_no_pending_tick(timer_service, scheduler, habit_repo, habits):
    a, _ = habits
    timer_service.track(a.id)
    scheduler.advance(3)
    timer_service.close()

    assert scheduler.pending == {}
    assert habit_repo.get(a.id).time_spent == 3


def test_callbacks_receive_snapshots(timer_service, scheduler, habits):
    a, _ = habits
    ticks, states = [], []
    timer_service.set_on_tick(ticks.append)
    timer_service.set_on_state_change(states.append)

    timer_service.track(a.id)
    scheduler.advance(2)
    timer_service.pause()

    assert [s.elapsed_sec for s in ticks] == [1, 2]
    assert [s.is_running for s in states] == [True, False]


def test_active_habit_returns_tracked_habit(timer_service, habits):
    a, _ = habits
    timer_service.track(a.id)
    assert timer_service.active_habit().id == a.id


def test_failed_flush_write_is_not_counted_twice(flaky_store, scheduler):

    repo = HabitRepo(flaky_store)
    habit = repo.add("Read", 30)
    service = TimerService(repo, schedule=scheduler.after, cancel=scheduler.after_cancel)

    service.track(habit.id)
    scheduler.advance(5)

    flaky_store.failures = 1
    with pytest.raises(OSError):
        service.stop()
    # session kept so the seconds can be saved on retry
    assert service.get_snapshot().elapsed_sec == 5

    service.stop()
    assert repo.get(habit.id).time_spent == 5
    assert HabitRepo(flaky_store).get(habit.id).time_spent == 5
    assert service.get_snapshot().is_idle


def test_switch_restarts_pending_tick(timer_service, scheduler, habits):
    a, b = habits
    timer_service.track(a.id)
    scheduler.advance(2)
    (old_job,) = scheduler.pending

    timer_service.track(b.id)

    assert old_job in scheduler.cancelled
    assert len(scheduler.pending) == 1
    assert old_job not in scheduler.pending
