# -*- coding: utf-8 -*-

from typing import Any, Callable, Optional

Schedule = Callable[[int, Callable[[], None]], Any]
Cancel = Callable[[Any], None]


class Ticker:
    """
    Recurring tick as an explicit schedule/cancel pair.
    With Tk: schedule=root.after, cancel=root.after_cancel.

    At most one tick is pending at a time. The callback decides whether
    the loop continues by returning True.
    """

    def __init__(
        self,
        schedule: Schedule,
        cancel: Cancel,
        callback: Callable[[], bool],
        interval_ms: int = 1000,
    ):
        self._schedule = schedule
        self._cancel = cancel
        self._callback = callback
        self.interval_ms = int(interval_ms)

        self._job: Optional[Any] = None

    @property
    def is_active(self) -> bool:
        return self._job is not None

    def start(self) -> None:
        if self._job is None:
            self._job = self._schedule(self.interval_ms, self._fire)

    def stop(self) -> None:
        if self._job is not None:
            job = self._job
            self._job = None
            self._cancel(job)

    def _fire(self) -> None:
        self._job = None
        if self._callback():
            self.start()
