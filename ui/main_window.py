# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Dict, Optional

from tkinterweb import HtmlFrame

from domain.models import SessionSnapshot
from services.habit_service import HabitService
from services.stats_service import StatsService, format_hms
from services.timer_service import TimerService
from ui.habit_form import HabitForm
from ui.markdown_renderer import MarkdownRenderer
from ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


class MainWindow:
    def __init__(
        self,
        root: tk.Tk,
        habit_service: HabitService,
        timer_service: TimerService,
        stats_service: StatsService,
    ):
        self.habit_service = habit_service
        self.timer_service = timer_service
        self.stats_service = stats_service

        self.root = root
        self.root.title("LilyPad Focus")
        self.root.geometry("900x520")

        self.selected_habit_id: Optional[str] = None
        self._list_index_to_habit_id: Dict[int, str] = {}
        self._md = MarkdownRenderer()

        self._build_ui()

        # wire callbacks from service -> window
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_state_change(self._on_state_change)

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._refresh_all()

    def _build_ui(self):
        root = self.root

        outer = ttk.Frame(root, padding=10)
        outer.pack(fill="both", expand=True)

        outer.columnconfigure(0, weight=1)
        outer.columnconfigure(1, weight=1)
        outer.rowconfigure(0, weight=1)
        outer.rowconfigure(1, weight=1)

        # TOP LEFT: active habit
        active = ttk.Labelframe(outer, text="Active habit", padding=6)
        active.grid(row=0, column=0, sticky="nsew", padx=(0, 10))
        self.active_view = HtmlFrame(active, horizontal_scrollbar="auto")
        self.active_view.pack(fill="both", expand=True)

        # TOP RIGHT: timer
        self.timer_widget = TimerWidget(
            outer,
            timer_service=self.timer_service,
        )
        self.timer_widget.grid(row=0, column=1, sticky="nsew")

        # BOTTOM: habits
        habits = ttk.Labelframe(outer, text="Habits", padding=10)
        habits.grid(row=1, column=0, columnspan=2, sticky="nsew", pady=(10, 0))
        habits.columnconfigure(0, weight=1)
        habits.rowconfigure(1, weight=1)

        self.err_var = tk.StringVar(value="")
        ttk.Label(habits, textvariable=self.err_var, foreground="red").grid(
            row=0, column=0, sticky="w", pady=(0, 6)
        )

        self.habit_list = tk.Listbox(habits, height=8)
        self.habit_list.grid(row=1, column=0, sticky="nsew")
        self.habit_list.bind("<<ListboxSelect>>", self._on_select_habit)
        self.habit_list.bind("<Double-Button-1>", lambda e: self._track_selected())

        actions = ttk.Frame(habits)
        actions.grid(row=2, column=0, sticky="ew", pady=(8, 0))

        ttk.Button(actions, text="Track", command=self._track_selected).pack(
            side="left"
        )
        ttk.Button(actions, text="Edit", command=self._edit_selected).pack(
            side="left", padx=(6, 0)
        )
        ttk.Button(actions, text="Delete", command=self._delete_selected).pack(
            side="left", padx=(6, 0)
        )
        ttk.Button(actions, text="Add habit", command=self._add_habit).pack(
            side="right"
        )

        self.total_var = tk.StringVar(value="")
        ttk.Label(actions, textvariable=self.total_var).pack(side="right", padx=10)

    def run(self):
        self.root.mainloop()

    # ----- Selection -----
    def _on_select_habit(self, event=None):
        sel = self.habit_list.curselection()
        if not sel:
            self.selected_habit_id = None
        else:
            self.selected_habit_id = self._list_index_to_habit_id.get(int(sel[0]))

    # ----- UI actions -----
    def _track_selected(self):
        if not self.selected_habit_id:
            self.err_var.set("Select a habit first.")
            return
        try:
            self.timer_service.track(self.selected_habit_id)
            self.err_var.set("")
        except ValueError as e:
            self.err_var.set(str(e))
            self._refresh_all()

    def _add_habit(self):
        HabitForm(self.root, on_save=self._save_habit)

    def _edit_selected(self):
        habit = (
            self.habit_service.get_habit(self.selected_habit_id)
            if self.selected_habit_id
            else None
        )
        if habit is None:
            self.err_var.set("Select a habit first.")
            return
        HabitForm(self.root, on_save=self._save_habit, habit=habit)

    def _save_habit(self, name: str, daily_goal: str, habit_id: Optional[str]):
        # ValueError propagates to the form
        self.habit_service.save_habit(name, daily_goal, habit_id=habit_id)
        self.err_var.set("")
        self._refresh_all()

    def _confirm(self, message: str) -> bool:
        return messagebox.askyesno("Delete habit?", message, parent=self.root)

    def _delete_selected(self):
        if not self.selected_habit_id:
            self.err_var.set("Select a habit first.")
            return
        if self.habit_service.delete_habit(self.selected_habit_id, confirm=self._confirm):
            self.selected_habit_id = None
        self._refresh_all()

    def _on_close(self):
        self.timer_service.close()
        self.root.destroy()

    # ----- Service callbacks -----
    def _on_tick(self, snap: SessionSnapshot):
        self.timer_widget.render(snap)
        self._refresh_active(snap)

    def _on_state_change(self, snap: SessionSnapshot):
        self.timer_widget.render(snap)
        self._refresh_habits_only()
        self._refresh_active(snap)

    # ----- Refresh -----
    def _refresh_all(self):
        snap = self.timer_service.get_snapshot()
        self.timer_widget.render(snap)
        self._refresh_habits_only()
        self._refresh_active(snap)

    def _refresh_habits_only(self):
        habits = self.habit_service.list_habits()
        snap = self.timer_service.get_snapshot()

        prev = self.selected_habit_id
        self.habit_list.delete(0, tk.END)
        self._list_index_to_habit_id.clear()

        selected_index = None
        for i, h in enumerate(habits):
            marker = "▶ " if h.id == snap.active_habit_id else "  "
            label = f"{marker}{h.name}  ({format_hms(h.time_spent)} / {h.daily_goal} min)"
            self.habit_list.insert(tk.END, label)
            self._list_index_to_habit_id[i] = h.id
            if prev and h.id == prev:
                selected_index = i

        if selected_index is not None:
            self.habit_list.selection_set(selected_index)
            self.habit_list.activate(selected_index)
        else:
            self.selected_habit_id = None

        self.total_var.set(
            f"Total tracked: {format_hms(self.stats_service.total_time_spent())}"
        )

    def _refresh_active(self, snap: SessionSnapshot):
        habit = self.timer_service.active_habit()
        if habit is None:
            md_text = self._md.habit_summary(None, snap)
        else:
            md_text = self._md.habit_summary(
                habit,
                snap,
                live_sec=self.stats_service.live_time_spent(habit, snap),
                progress=self.stats_service.goal_progress(habit, snap),
            )
        self.active_view.load_html(self._md.to_html(md_text))
