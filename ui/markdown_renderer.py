# ui/markdown_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from markdown import markdown

from domain.models import Habit, SessionSnapshot
from services.stats_service import format_clock, format_hms


@dataclass(frozen=True)
class MarkdownTheme:
    text: str = "#F9FAFB"
    muted: str = "#CBD5E1"
    border: str = "#334155"
    panel: str = "#1E293B"
    accent: str = "#34D399"


def progress_bar(ratio: float, width: int = 20) -> str:
    ratio = max(0.0, min(1.0, ratio))
    filled = int(round(ratio * width))
    return "▓" * filled + "░" * (width - filled)


def _escape_md(text: str) -> str:
    out = []
    for ch in text:
        if ch in "\\`*_{}[]()#+-.!<>|":
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


class MarkdownRenderer:
    """
    Single responsibility:
    - Build the active-habit summary as Markdown
    - Convert MD -> HTML (+ CSS) for tkinterweb
    """

    def __init__(self, theme: Optional[MarkdownTheme] = None):
        self.theme = theme or MarkdownTheme()

    # ---------- content ----------
    def habit_summary(
        self,
        habit: Optional[Habit],
        snap: SessionSnapshot,
        live_sec: int = 0,
        progress: float = 0.0,
    ) -> str:
        if habit is None:
            return "\n".join(
                [
                    "## No active habit",
                    "",
                    "Pick a habit below and press **Track** to start a session.",
                ]
            )

        state = "Running" if snap.is_running else "Paused"
        return "\n".join(
            [
                f"## {_escape_md(habit.name)}",
                "",
                f"> {state} &middot; session **{format_clock(snap.elapsed_sec)}**",
                "",
                "| | |",
                "|---|---|",
                f"| Daily goal | {habit.daily_goal} min |",
                f"| Time spent | {format_hms(live_sec)} |",
                f"| Progress | {int(progress * 100)}% |",
                "",
                f"`{progress_bar(progress)}`",
            ]
        )

    # ---------- extensions ----------
    def extensions(self) -> Tuple[List[str], Dict]:
        exts: List[str] = [
            "extra",
            "sane_lists",
            "tables",
            "nl2br",
        ]
        cfg: Dict = {}
        return exts, cfg

    # ---------- CSS ----------
    def css(self) -> str:
        t = self.theme
        return f"""
        body {{
          font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
          margin: 14px;
          color: {t.text};
          background: {t.panel};
          font-size: 14px;
          line-height: 1.55;
        }}

        h2 {{ font-size: 1.35em; margin: 0.4em 0 0.6em; }}

        blockquote {{
          margin: 0.8em 0;
          padding: 0.2em 0 0.2em 0.9em;
          border-left: 4px solid {t.accent};
          color: {t.muted};
        }}

        table {{
          border-collapse: collapse;
          width: 100%;
          margin: 0.8em 0;
        }}
        td {{
          border-bottom: 1px solid {t.border};
          padding: 6px 8px;
        }}

        code {{
          font-family: ui-monospace, Menlo, Consolas, monospace;
          color: {t.accent};
        }}
        """

    # ---------- render ----------
    def to_html(self, md_text: str) -> str:
        exts, cfg = self.extensions()
        body = markdown(
            md_text or "",
            extensions=exts,
            extension_configs=cfg,
            output_format="html5",
        )
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css()}</style>
          </head>
          <body>{body}</body>
        </html>
        """
