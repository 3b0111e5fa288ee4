"""HabitService: form validation, save (add/edit), delete with confirm and stop-first."""
import pytest


def test_save_without_id_adds(habit_service):
    habit = habit_service.save_habit("  Read ", "30")
    assert habit.name == "Read"
    assert habit.daily_goal == 30
    assert habit.time_spent == 0
    assert habit_service.list_habits() == [habit]


def test_save_with_id_edits(habit_service, habit_repo):
    habit = habit_service.save_habit("Read", 30)
    habit_repo.add_time(habit.id, 120)

    updated = habit_service.save_habit("Read more", 45, habit_id=habit.id)
    assert updated.id == habit.id
    assert updated.name == "Read more"
    assert updated.daily_goal == 45
    assert updated.time_spent == 120


def test_save_with_unknown_id_returns_none(habit_service):
    assert habit_service.save_habit("Read", 30, habit_id="missing") is None
    assert habit_service.list_habits() == []


@pytest.mark.parametrize("name", ["", "   ", None])
def test_save_rejects_empty_name(habit_service, name):
    with pytest.raises(ValueError):
        habit_service.save_habit(name, 30)


@pytest.mark.parametrize("goal", [0, -5, "abc", "", None, "1.5"])
def test_save_rejects_invalid_goal(habit_service, goal):
    with pytest.raises(ValueError):
        habit_service.save_habit("Read", goal)


def test_delete_with_confirm_declined_keeps_habit(habit_service):
    habit = habit_service.save_habit("Read", 30)
    messages = []

    def confirm(msg):
        messages.append(msg)
        return False

    assert habit_service.delete_habit(habit.id, confirm=confirm) is False
    assert habit_service.get_habit(habit.id) is not None
    assert "Read" in messages[0]


def test_delete_with_confirm_accepted(habit_service):
    habit = habit_service.save_habit("Read", 30)
    assert habit_service.delete_habit(habit.id, confirm=lambda msg: True) is True
    assert habit_service.get_habit(habit.id) is None


def test_delete_unknown_is_noop_and_does_not_ask(habit_service):
    asked = []
    assert habit_service.delete_habit("missing", confirm=asked.append) is False
    assert asked == []


def test_delete_active_habit_stops_session_first(
    habit_service, timer_service, scheduler, habit_repo
):
    habit = habit_service.save_habit("Read", 30)
    flushed = []
    real_add_time = habit_repo.add_time

    def recording_add_time(habit_id, seconds):
        flushed.append((habit_id, seconds, habit_repo.get(habit_id) is not None))
        real_add_time(habit_id, seconds)

    timer_service.tracker._flush_sink = recording_add_time

    timer_service.track(habit.id)
    scheduler.advance(7)
    assert habit_service.delete_habit(habit.id) is True

    # flushed while the habit still existed
    assert flushed == [(habit.id, 7, True)]
    assert timer_service.get_snapshot().is_idle
    assert scheduler.pending == {}


def test_delete_other_habit_keeps_session_running(habit_service, timer_service, scheduler):
    a = habit_service.save_habit("Read", 30)
    b = habit_service.save_habit("Write", 15)
    timer_service.track(a.id)
    scheduler.advance(2)

    habit_service.delete_habit(b.id)

    snap = timer_service.get_snapshot()
    assert snap.active_habit_id == a.id
    assert snap.is_running
    assert snap.elapsed_sec == 2
