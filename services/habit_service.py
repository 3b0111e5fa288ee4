# services/habit_service.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from domain.models import Habit
from services.timer_service import TimerService
from storage.repos import HabitRepo

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


class HabitService:
    def __init__(self, habit_repo: HabitRepo, timer_service: TimerService):
        self.habits = habit_repo
        self.timer = timer_service

    # ---- form boundary ----
    @staticmethod
    def _clean_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValueError("Habit name cannot be empty.")
        return name

    @staticmethod
    def _clean_goal(daily_goal) -> int:
        try:
            goal = int(str(daily_goal).strip())
        except (TypeError, ValueError):
            raise ValueError("Daily goal must be a whole number of minutes.")
        if goal <= 0:
            raise ValueError("Daily goal must be greater than zero.")
        return goal

    # ---- habits ----
    def list_habits(self) -> List[Habit]:
        return self.habits.list()

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        return self.habits.get(habit_id)

    def save_habit(
        self, name: str, daily_goal, habit_id: Optional[str] = None
    ) -> Optional[Habit]:
        """
        Add when habit_id is empty, otherwise edit name/goal in place.
        Editing an unknown id returns None.
        """
        name = self._clean_name(name)
        goal = self._clean_goal(daily_goal)
        if habit_id:
            return self.habits.edit(habit_id, name, goal)
        return self.habits.add(name, goal)

    def delete_habit(self, habit_id: str, confirm: Optional[Confirm] = None) -> bool:
        habit = self.habits.get(habit_id)
        if habit is None:
            return False

        if confirm is not None and not confirm(
            f"Are you sure you want to delete '{habit.name}'?"
        ):
            return False

        # flush the running session before the habit disappears
        if self.timer.get_snapshot().active_habit_id == habit_id:
            self.timer.stop()

        return self.habits.delete(habit_id)
