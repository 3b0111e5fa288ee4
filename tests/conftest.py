"""Pytest fixtures: in-memory SQLite store per test, fake Tk-style scheduler."""
import pytest

from services.habit_service import HabitService
from services.stats_service import StatsService
from services.timer_service import TimerService
from storage.db import Database
from storage.repos import AppStateRepo, HabitRepo


class FakeScheduler:
    """Stands in for root.after / root.after_cancel."""

    def __init__(self):
        self._next = 0
        self.pending = {}
        self.cancelled = []

    def after(self, ms, fn):
        self._next += 1
        job = f"after#{self._next}"
        self.pending[job] = (ms, fn)
        return job

    def after_cancel(self, job):
        self.pending.pop(job, None)
        self.cancelled.append(job)

    def advance(self, seconds=1):
        """Fire pending callbacks once per simulated second."""
        for _ in range(seconds):
            jobs = list(self.pending.items())
            self.pending.clear()
            for _job, (_ms, fn) in jobs:
                fn()


class FlakyStore(AppStateRepo):
    """AppStateRepo whose next `failures` writes raise."""

    def __init__(self, db):
        super().__init__(db)
        self.failures = 0

    def set(self, key, value):
        if self.failures:
            self.failures -= 1
            raise OSError("disk full")
        super().set(key, value)


@pytest.fixture
def db():
    database = Database(":memory:")
    database.init_schema()
    yield database
    database.close()


@pytest.fixture
def store(db):
    return AppStateRepo(db)


@pytest.fixture
def flaky_store(db):
    return FlakyStore(db)


@pytest.fixture
def habit_repo(store):
    return HabitRepo(store)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def timer_service(habit_repo, scheduler):
    return TimerService(habit_repo, schedule=scheduler.after, cancel=scheduler.after_cancel)


@pytest.fixture
def habit_service(habit_repo, timer_service):
    return HabitService(habit_repo, timer_service)


@pytest.fixture
def stats_service(habit_repo):
    return StatsService(habit_repo)
