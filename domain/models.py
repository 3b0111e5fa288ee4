# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Habit:
    id: str
    name: str
    daily_goal: int  # minutes per day
    time_spent: int = 0  # seconds, all sessions

    def to_dict(self) -> Dict[str, Any]:
        # stored with camelCase keys
        return {
            "id": self.id,
            "name": self.name,
            "dailyGoal": self.daily_goal,
            "timeSpent": self.time_spent,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Habit":
        daily_goal = int(data["dailyGoal"])
        if daily_goal <= 0:
            raise ValueError(f"dailyGoal must be positive, got {daily_goal}")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            daily_goal=daily_goal,
            time_spent=max(0, int(data.get("timeSpent") or 0)),
        )


@dataclass(frozen=True)
class SessionSnapshot:
    active_habit_id: Optional[str]
    is_running: bool
    elapsed_sec: int

    @property
    def is_idle(self) -> bool:
        return self.active_habit_id is None
