# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from domain.models import SessionSnapshot
from services.stats_service import format_clock
from services.timer_service import TimerService


class TimerWidget(ttk.Frame):
    def __init__(
        self,
        master,
        timer_service: TimerService,
    ):
        super().__init__(master)

        self.timer_service = timer_service

        self._build_ui()

        # initial render
        self.render(self.timer_service.get_snapshot())

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        self.time_var = tk.StringVar(value="00:00")
        self.info_var = tk.StringVar(value="Select a habit to start")

        title = ttk.Label(self, text="Session", font=("Sans", 12, "bold"))
        title.grid(row=0, column=0, sticky="w", pady=(0, 6))

        self.time_label = ttk.Label(
            self, textvariable=self.time_var, font=("Sans", 32, "bold")
        )
        self.time_label.grid(row=1, column=0, sticky="w", pady=(8, 4))

        self.info_label = ttk.Label(self, textvariable=self.info_var)
        self.info_label.grid(row=2, column=0, sticky="w", pady=(0, 10))

        btns = ttk.Frame(self)
        btns.grid(row=3, column=0, sticky="w")

        self.pause_btn = ttk.Button(btns, text="Pause", command=self._pause)
        self.resume_btn = ttk.Button(btns, text="Resume", command=self._resume)
        self.stop_btn = ttk.Button(btns, text="Stop", command=self._stop)

        self.pause_btn.grid(row=0, column=0, padx=(0, 6))
        self.resume_btn.grid(row=0, column=1, padx=(0, 6))
        self.stop_btn.grid(row=0, column=2)

    def _update_buttons(self, snap: SessionSnapshot):
        # Pause enabled only if running
        if snap.is_running:
            self.pause_btn.state(["!disabled"])
        else:
            self.pause_btn.state(["disabled"])

        # Resume only for a paused session
        if not snap.is_idle and not snap.is_running:
            self.resume_btn.state(["!disabled"])
        else:
            self.resume_btn.state(["disabled"])

        if snap.is_idle:
            self.stop_btn.state(["disabled"])
        else:
            self.stop_btn.state(["!disabled"])

    def _pause(self):
        self.timer_service.pause()

    def _resume(self):
        self.timer_service.resume()

    def _stop(self):
        self.timer_service.stop()

    def render(self, snap: SessionSnapshot):
        self.time_var.set(format_clock(snap.elapsed_sec))

        if snap.is_idle:
            self.info_var.set("Select a habit to start")
        elif snap.is_running:
            self.info_var.set("Running...")
        else:
            self.info_var.set("Paused")

        self._update_buttons(snap)
