# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from core.session_tracker import SessionTracker
from core.ticker import Cancel, Schedule, Ticker
from domain.models import Habit, SessionSnapshot
from storage.repos import HabitRepo

logger = logging.getLogger(__name__)


class TimerService:
    """
    Orchestrates:
    - SessionTracker state
    - flushing elapsed seconds into the habit list
    - the one-second tick loop (started/cancelled with is_running)
    - Callbacks for UI
    """

    def __init__(
        self,
        habit_repo: HabitRepo,
        schedule: Schedule,
        cancel: Cancel,
        tick_ms: int = 1000,
    ):
        self.habit_repo = habit_repo

        self.tracker = SessionTracker(flush=self.habit_repo.add_time)
        self.ticker = Ticker(schedule, cancel, self.tick, interval_ms=tick_ms)

        self._on_tick: Optional[Callable[[SessionSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[SessionSnapshot], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[SessionSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_state_change(self, fn: Callable[[SessionSnapshot], None]) -> None:
        self._on_state_change = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.tracker.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.tracker.snapshot())

    # ----- Public API -----
    def get_snapshot(self) -> SessionSnapshot:
        return self.tracker.snapshot()

    def active_habit(self) -> Optional[Habit]:
        habit_id = self.tracker.active_habit_id
        if habit_id is None:
            return None
        return self.habit_repo.get(habit_id)

    def track(self, habit_id: str) -> None:
        if not habit_id:
            raise ValueError("Habit must be selected before tracking.")
        if self.habit_repo.get(habit_id) is None:
            raise ValueError("Selected habit not found.")

        self.tracker.track(habit_id)
        # new session gets a full first second
        self.ticker.stop()
        self.ticker.start()
        logger.info("Tracking habit %s", habit_id)
        self._emit_state_change()

    def pause(self) -> None:
        self.tracker.pause()
        self.ticker.stop()
        self._emit_state_change()

    def resume(self) -> None:
        self.tracker.resume()
        if self.tracker.is_running:
            self.ticker.start()
        self._emit_state_change()

    def stop(self) -> None:
        self.tracker.stop()
        self.ticker.stop()
        self._emit_state_change()

    def tick(self) -> bool:
        """
        Called once per second by the ticker.
        Returns True while the loop should keep going.
        """
        if not self.tracker.tick():
            return False
        self._emit_tick()
        return True

    def close(self) -> None:
        # teardown: no dangling tick, no lost seconds
        self.ticker.stop()
        self.tracker.stop()
