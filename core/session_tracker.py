# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from domain.models import SessionSnapshot

logger = logging.getLogger(__name__)

FlushSink = Callable[[str, int], None]


class SessionTracker:
    """
    Pure session state machine (no Tkinter, no storage).
    Owner calls tick() once per second while running.

    Elapsed seconds leave the tracker only through the flush sink,
    and always before the counter is zeroed.
    """

    def __init__(self, flush: FlushSink):
        self._flush_sink = flush

        self.active_habit_id: Optional[str] = None
        self.is_running = False
        self.elapsed_sec = 0

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            active_habit_id=self.active_habit_id,
            is_running=self.is_running,
            elapsed_sec=self.elapsed_sec,
        )

    def track(self, habit_id: str) -> None:
        # same habit again => restart session
        if self.active_habit_id is not None:
            self._flush()
        self.active_habit_id = habit_id
        self.is_running = True
        self.elapsed_sec = 0

    def pause(self) -> None:
        self.is_running = False

    def resume(self) -> None:
        if self.active_habit_id is None:
            return
        self.is_running = True

    def stop(self) -> None:
        if self.active_habit_id is None:
            return
        self._flush()
        self.active_habit_id = None
        self.is_running = False
        self.elapsed_sec = 0

    def tick(self) -> bool:
        """
        Returns True if a second was counted.
        """
        if self.active_habit_id is None or not self.is_running:
            return False
        self.elapsed_sec += 1
        return True

    def _flush(self) -> None:
        seconds = self.elapsed_sec
        if seconds > 0 and self.active_habit_id is not None:
            logger.info("Flushing %ss into habit %s", seconds, self.active_habit_id)
            self._flush_sink(self.active_habit_id, seconds)
        self.elapsed_sec = 0
