# storage/repos.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import json
import logging
import uuid
from dataclasses import replace
from typing import List, Optional

from domain.models import Habit
from storage.db import Database

logger = logging.getLogger(__name__)

HABITS_KEY = "habits"


class AppStateRepo:
    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.conn.execute(
            "SELECT value FROM app_state WHERE key=?",
            (key,),
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        self.db.conn.execute(
            """
            INSERT INTO app_state(key, value) VALUES(?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            (key, value),
        )
        self.db.conn.commit()


class HabitRepo:
    """
    In-memory habit list mirrored to a key/value store.

    The store is read once here; every mutation writes the whole list
    back before returning.
    """

    def __init__(self, store: AppStateRepo, key: str = HABITS_KEY):
        self.store = store
        self.key = key
        self._habits: List[Habit] = self._load()

    def _load(self) -> List[Habit]:
        try:
            raw = self.store.get(self.key)
        except Exception:
            logger.warning("Habit store unavailable, starting empty", exc_info=True)
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Stored habits under %r are not valid JSON, starting empty", self.key)
            return []
        if not isinstance(data, list):
            logger.warning("Stored habits under %r are not a list, starting empty", self.key)
            return []

        habits: List[Habit] = []
        seen = set()
        for item in data:
            try:
                h = Habit.from_dict(item)
            except (KeyError, TypeError, ValueError, OverflowError):
                logger.warning("Skipping malformed habit entry: %r", item)
                continue
            if h.id in seen:
                continue
            seen.add(h.id)
            habits.append(h)
        return habits

    def _persist(self, habits: Optional[List[Habit]] = None) -> None:
        habits = self._habits if habits is None else habits
        payload = json.dumps([h.to_dict() for h in habits])
        self.store.set(self.key, payload)

    def _find(self, habit_id: str) -> Optional[Habit]:
        for h in self._habits:
            if h.id == habit_id:
                return h
        return None

    def list(self) -> List[Habit]:
        return list(self._habits)

    def get(self, habit_id: str) -> Optional[Habit]:
        return self._find(habit_id)

    def add(self, name: str, daily_goal: int) -> Habit:
        habit = Habit(id=str(uuid.uuid4()), name=name, daily_goal=int(daily_goal))
        self._habits.append(habit)
        self._persist()
        logger.info("Added habit %s (%s)", habit.id, habit.name)
        return habit

    def edit(self, habit_id: str, name: str, daily_goal: int) -> Optional[Habit]:
        habit = self._find(habit_id)
        if habit is None:
            logger.debug("Edit ignored, unknown habit %s", habit_id)
            return None
        habit.name = name
        habit.daily_goal = int(daily_goal)
        self._persist()
        return habit

    def delete(self, habit_id: str) -> bool:
        habit = self._find(habit_id)
        if habit is None:
            logger.debug("Delete ignored, unknown habit %s", habit_id)
            return False
        self._habits.remove(habit)
        self._persist()
        logger.info("Deleted habit %s (%s)", habit.id, habit.name)
        return True

    def add_time(self, habit_id: str, seconds: int) -> None:
        seconds = int(seconds)
        if seconds <= 0:
            return
        habit = self._find(habit_id)
        if habit is None:
            logger.debug("Dropping %ss for unknown habit %s", seconds, habit_id)
            return
        # write first; memory only changes once the store accepted it
        updated = replace(habit, time_spent=habit.time_spent + seconds)
        self._persist([updated if h is habit else h for h in self._habits])
        habit.time_spent = updated.time_spent
