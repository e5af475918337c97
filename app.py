# app.py
# CustomTkinter prompt for creating a note, with the existing-notes hint.
# - Choose a vault folder; notes are listed fresh on every query.
# - Live hint with debounce driven by Tk's after()/after_cancel().
# - Click a matching note to "open" it, Enter to submit a new title.

from __future__ import annotations
import argparse
from typing import Callable, List, Optional

import tkinter.filedialog as fd
import customtkinter as ctk

from notehint import CandidateSource, Engine, PromptSession, SearchConfiguration, load_settings, make_source
from notehint.models import Candidate, QueryResult, ScoredMatch
from frontend import format_hint, prefix_instructions


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


class _AfterHandle:
    def __init__(self, widget: ctk.CTk, after_id: str) -> None:
        self._widget = widget
        self._after_id = after_id

    def cancel(self) -> None:
        self._widget.after_cancel(self._after_id)


class TkScheduler:
    """Debounce timers on the Tk event loop (callbacks run on the UI thread)."""

    def __init__(self, widget: ctk.CTk) -> None:
        self._widget = widget

    def call_later(self, delay: float, fn: Callable[[], None]) -> _AfterHandle:
        return _AfterHandle(self._widget, self._widget.after(int(delay * 1000), fn))


# -------------------- main app --------------------

class NotePromptApp(ctk.CTk):
    """Dark-themed prompt that shows which notes already exist while typing a title."""

    def __init__(self, config: SearchConfiguration, vault: Optional[str] = None) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("New note")
        self.geometry("720x480")
        self.minsize(560, 380)

        # State
        self._config = config
        self._session: Optional[PromptSession] = None
        self._source: Optional[CandidateSource] = None
        self._match_buttons: List[ctk.CTkBaseClass] = []

        # Fonts
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_source_bar()
        self._build_prompt()
        self._build_hint()
        self._build_log()

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        if vault:
            self._open_vault(vault)

    # --------- UI sections ---------

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        bar.grid_columnconfigure(1, weight=1)

        btn = ctk.CTkButton(bar, text="Choose Vault", command=self._choose_vault)
        btn.grid(row=0, column=0, padx=(12, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No vault selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

    def _build_prompt(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(0, weight=1)

        self.entry = ctk.CTkEntry(box, placeholder_text="Note title…")
        self.entry.grid(row=0, column=0, sticky="ew", padx=12, pady=(10, 4))
        self.entry.bind("<KeyRelease>", self._on_key)
        self.entry.bind("<Return>", self._on_enter)

        prefixes = prefix_instructions(self._config)
        text = "Prefixed folders: " + (", ".join(repr(p) for p in prefixes) if prefixes else "(none)")
        ctk.CTkLabel(box, text=text, anchor="w").grid(row=1, column=0, sticky="w", padx=12, pady=(0, 10))

    def _build_hint(self) -> None:
        self.hint_frame = ctk.CTkFrame(self, corner_radius=10)
        self.hint_frame.grid(row=2, column=0, sticky="nsew", padx=12, pady=6)
        self.hint_frame.grid_columnconfigure(0, weight=1)

        self.lbl_hint = ctk.CTkLabel(self.hint_frame, text="", anchor="w", font=self.font_label)
        self.lbl_hint.grid(row=0, column=0, sticky="w", padx=12, pady=(10, 2))

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=3, column=0, sticky="ew", padx=12, pady=(6, 12))

    # --------- vault ---------

    def _choose_vault(self) -> None:
        path = fd.askdirectory(title="Choose vault folder")
        if path:
            self._open_vault(path)

    def _open_vault(self, path: str) -> None:
        if self._session is not None:
            self._session.on_close()
        self._source = make_source(f"vault://{path}")
        self.lbl_source.configure(text=f"Vault: {shorten_path(path)}")
        self._log(f"Vault ready: {path}")
        self._new_prompt()

    def _new_prompt(self) -> None:
        engine = Engine(self._config, self._source, on_result=self._show_result, scheduler=TkScheduler(self))
        self._session = PromptSession(engine, on_submit=self._on_submit,
                                      on_open=self._on_open, on_cancel=lambda: self._log("Cancelled."))
        self.entry.delete(0, "end")
        self._show_result(None)
        self.entry.focus_set()

    # --------- input ---------

    def _on_key(self, _ev=None) -> None:
        if self._session is not None:
            self._session.on_input(self.entry.get())

    def _on_enter(self, _ev=None) -> None:
        if self._session is not None:
            self._session.on_submit(self.entry.get())
            self._new_prompt()

    def _on_submit(self, title: str) -> None:
        self._log(f"Create note: {title!r}")

    def _on_open(self, c: Candidate) -> None:
        self._log(f"Open existing note: {c.path}")

    # --------- hint ---------

    def _show_result(self, result: Optional[QueryResult]) -> None:
        for b in self._match_buttons:
            b.destroy()
        self._match_buttons = []
        lines = format_hint(result)
        self.lbl_hint.configure(text=lines[0] if lines else "")
        if result is None or not lines:
            return
        for i, m in enumerate(result.matches, start=1):
            b = ctk.CTkButton(self.hint_frame, text=f"{m.candidate.display_name}   {m.candidate.path}",
                              anchor="w", fg_color="transparent", font=self.font_mono,
                              command=lambda m=m: self._select(m))
            b.grid(row=i, column=0, sticky="ew", padx=12, pady=2)
            self._match_buttons.append(b)
        if result.truncated_count > 0:
            more = ctk.CTkLabel(self.hint_frame, text=lines[-1].strip(), anchor="w")
            more.grid(row=len(result.matches) + 1, column=0, sticky="w", padx=12, pady=2)
            self._match_buttons.append(more)

    def _select(self, m: ScoredMatch) -> None:
        if self._session is not None:
            self._session.select(m)
            self._new_prompt()

    # --------- misc UI helpers ---------

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        # the engine's timer must not fire into destroyed widgets
        if self._session is not None:
            self._session.on_close()
        self.destroy()


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="New-note prompt with existing-notes hint")
    ap.add_argument("--vault", default=None)
    ap.add_argument("--settings", default=None)
    args = ap.parse_args()
    cfg = load_settings(args.settings) if args.settings else SearchConfiguration()
    NotePromptApp(cfg, vault=args.vault).mainloop()
