# -*- coding: utf-8 -*-

from domain.models import Habit, SessionSnapshot
from storage.repos import HabitRepo


def format_hms(sec: int) -> str:
    sec = max(0, int(sec))
    h = sec // 3600
    m = (sec % 3600) // 60
    s = sec % 60
    if h > 0:
        return f"{h}h {m:02d}m"
    return f"{m}m {s:02d}s"


def format_clock(sec: int) -> str:
    sec = max(0, int(sec))
    h = sec // 3600
    m = (sec % 3600) // 60
    s = sec % 60
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"


class StatsService:
    def __init__(self, habit_repo: HabitRepo):
        self.habit_repo = habit_repo

    def live_time_spent(self, habit: Habit, snap: SessionSnapshot) -> int:
        """Stored total plus the unflushed session when this habit is active."""
        if snap.active_habit_id == habit.id:
            return habit.time_spent + snap.elapsed_sec
        return habit.time_spent

    def goal_progress(self, habit: Habit, snap: SessionSnapshot) -> float:
        goal_sec = habit.daily_goal * 60
        if goal_sec <= 0:
            return 0.0
        return min(1.0, self.live_time_spent(habit, snap) / goal_sec)

    def total_time_spent(self) -> int:
        return sum(h.time_spent for h in self.habit_repo.list())
