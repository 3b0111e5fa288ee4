# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from domain.models import Habit


class HabitForm:
    """
    Modal add/edit dialog.
    on_save(name, daily_goal, habit_id) may raise ValueError; the message
    is shown inline and the dialog stays open.
    """

    def __init__(
        self,
        master,
        on_save: Callable[[str, str, Optional[str]], object],
        habit: Optional[Habit] = None,
    ):
        self.on_save = on_save
        self.habit = habit

        self.top = tk.Toplevel(master)
        self.top.title("Edit habit" if habit else "New habit")
        self.top.transient(master)
        self.top.resizable(False, False)

        self._build_ui()

        self.top.grab_set()
        self.name_entry.focus_set()

    def _build_ui(self):
        frame = ttk.Frame(self.top, padding=12)
        frame.pack(fill="both", expand=True)
        frame.columnconfigure(1, weight=1)

        self.name_var = tk.StringVar(value=self.habit.name if self.habit else "")
        self.goal_var = tk.StringVar(
            value=str(self.habit.daily_goal) if self.habit else "30"
        )
        self.err_var = tk.StringVar(value="")

        ttk.Label(frame, text="Name").grid(row=0, column=0, sticky="w")
        self.name_entry = ttk.Entry(frame, textvariable=self.name_var, width=28)
        self.name_entry.grid(row=0, column=1, sticky="ew", pady=(0, 6))

        ttk.Label(frame, text="Daily goal (min)").grid(row=1, column=0, sticky="w")
        ttk.Spinbox(
            frame, from_=1, to=1440, textvariable=self.goal_var, width=8
        ).grid(row=1, column=1, sticky="w")

        ttk.Label(frame, textvariable=self.err_var, foreground="red").grid(
            row=2, column=0, columnspan=2, sticky="w", pady=(6, 6)
        )

        btns = ttk.Frame(frame)
        btns.grid(row=3, column=0, columnspan=2, sticky="e")
        ttk.Button(btns, text="Cancel", command=self.close).pack(side="right")
        ttk.Button(btns, text="Save", command=self._save).pack(
            side="right", padx=(0, 6)
        )

        self.top.bind("<Return>", lambda e: self._save())
        self.top.bind("<Escape>", lambda e: self.close())

    def _save(self):
        try:
            self.on_save(
                self.name_var.get(),
                self.goal_var.get(),
                self.habit.id if self.habit else None,
            )
        except ValueError as e:
            self.err_var.set(str(e))
            return
        self.close()

    def close(self):
        self.top.grab_release()
        self.top.destroy()
