#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import tkinter as tk

from config import AppConfig
from services.habit_service import HabitService
from services.stats_service import StatsService
from services.timer_service import TimerService
from storage.db import Database
from storage.repos import AppStateRepo, HabitRepo
from ui.main_window import MainWindow


def main():
    config = AppConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db = Database(db_path=config.db_path)
    db.init_schema()

    habit_repo = HabitRepo(AppStateRepo(db), key=config.storage_key)

    root = tk.Tk()
    timer_service = TimerService(
        habit_repo,
        schedule=root.after,
        cancel=root.after_cancel,
        tick_ms=config.tick_ms,
    )
    habit_service = HabitService(habit_repo, timer_service)
    stats_service = StatsService(habit_repo)

    app = MainWindow(root, habit_service, timer_service, stats_service)
    try:
        app.run()
    finally:
        db.close()


if __name__ == "__main__":
    main()
