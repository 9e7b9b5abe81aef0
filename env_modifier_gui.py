#!/usr/bin/env python3
"""Simple Tkinter GUI for writing the project .env file.

One field per key in DEFAULT_KEYS plus a target directory. Saving replaces
the whole .env file with the rendered KEY=value lines.
"""

from __future__ import annotations

import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox
from tkinter import font as tkfont
from tkinter import scrolledtext

from env_modifier import (
    DEFAULT_KEYS,
    EnvKey,
    format_env_content,
    mask_secret,
    validate_env_values,
    write_env_file,
)

PRIMARY_BG = "#F7F7F6"
WINDOW_BG = "#FFFFFF"
PRIMARY_FG = "#111827"
ACCENT_BG = "#0058A3"
ACCENT_BG_HOVER = "#004580"
SECONDARY_ACCENT = "#1E3A8A"
FIELD_BG = "#FFFFFF"
FIELD_BORDER = "#004580"


class EnvModifierGUI(tk.Tk):
    """Form that collects key values and writes them to .env."""

    def __init__(self, keys: tuple[EnvKey, ...] = DEFAULT_KEYS) -> None:
        super().__init__()
        self.title("Env Modifier")
        self.configure(bg=WINDOW_BG)
        self.geometry("640x480")
        self.minsize(560, 400)

        self._keys = keys
        self._init_fonts()
        self._init_state()
        self._build_layout()

    def _init_fonts(self) -> None:
        self.header_font = tkfont.Font(family="Montserrat", size=20, weight="bold")
        self.body_font = tkfont.Font(family="Inter", size=12)
        self.small_font = tkfont.Font(family="Inter", size=10)

    def _init_state(self) -> None:
        self.value_vars = {env_key.key: tk.StringVar() for env_key in self._keys}
        self.dir_var = tk.StringVar(value=str(Path.cwd()))

    def _build_layout(self) -> None:
        self.columnconfigure(0, weight=1)
        container = tk.Frame(self, bg=PRIMARY_BG, padx=32, pady=32, bd=1, relief="solid", highlightbackground=FIELD_BORDER, highlightthickness=1)
        container.grid(row=0, column=0, sticky="nsew")
        container.grid_columnconfigure(1, weight=1)

        header = tk.Label(
            container,
            text="Create or update .env",
            font=self.header_font,
            bg=ACCENT_BG,
            fg="#FFFFFF",
            padx=12,
            pady=8,
        )
        header.grid(row=0, column=0, columnspan=2, sticky="ew", pady=(0, 24))

        row = 1
        for env_key in self._keys:
            self._add_label_and_entry(container, env_key.key, self.value_vars[env_key.key], row=row, secret=True)
            row += 1

        dir_label = tk.Label(container, text="Project directory", font=self.body_font, bg=PRIMARY_BG, fg=PRIMARY_FG)
        dir_label.grid(row=row, column=0, sticky="w")
        dir_frame = tk.Frame(container, bg=PRIMARY_BG)
        dir_frame.grid(row=row, column=1, sticky="ew", pady=(0, 16))
        dir_frame.grid_columnconfigure(0, weight=1)
        dir_entry = tk.Entry(
            dir_frame,
            textvariable=self.dir_var,
            font=self.body_font,
            bg=FIELD_BG,
            fg=PRIMARY_FG,
            bd=1,
            relief="solid",
            highlightthickness=1,
            highlightbackground=FIELD_BORDER,
            highlightcolor=FIELD_BORDER,
        )
        dir_entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        browse_btn = tk.Button(
            dir_frame,
            text="Browse",
            command=self._choose_directory,
            font=self.body_font,
            bg=SECONDARY_ACCENT,
            fg="#FFFFFF",
            activebackground=ACCENT_BG,
            activeforeground="#FFFFFF",
            bd=0,
            padx=12,
            pady=6,
            cursor="hand2",
        )
        browse_btn.grid(row=0, column=1)
        row += 1

        self.save_btn = tk.Button(
            container,
            text="Save .env",
            command=self._on_save_clicked,
            font=self.body_font,
            bg=ACCENT_BG,
            fg="#FFFFFF",
            activebackground=ACCENT_BG_HOVER,
            activeforeground="#FFFFFF",
            bd=0,
            padx=16,
            pady=10,
            cursor="hand2",
        )
        self.save_btn.grid(row=row, column=0, columnspan=2, sticky="ew", pady=(8, 20))
        row += 1

        status_label = tk.Label(container, text="Status", font=self.body_font, bg=PRIMARY_BG, fg=ACCENT_BG)
        status_label.grid(row=row, column=0, sticky="nw")
        self.log = scrolledtext.ScrolledText(
            container,
            height=6,
            font=self.small_font,
            bg=FIELD_BG,
            fg=PRIMARY_FG,
            bd=1,
            relief="solid",
            state="disabled",
            wrap="word",
        )
        self.log.grid(row=row, column=1, sticky="nsew")
        container.rowconfigure(row, weight=1)

    def _add_label_and_entry(self, parent: tk.Misc, label: str, variable: tk.StringVar, row: int, secret: bool = False) -> None:
        lbl = tk.Label(parent, text=label, font=self.body_font, bg=PRIMARY_BG, fg=PRIMARY_FG)
        lbl.grid(row=row, column=0, sticky="w", padx=(0, 12))
        entry = tk.Entry(
            parent,
            textvariable=variable,
            show="•" if secret else "",
            font=self.body_font,
            bg=FIELD_BG,
            fg=PRIMARY_FG,
            bd=1,
            relief="solid",
            highlightthickness=1,
            highlightbackground=FIELD_BORDER,
            highlightcolor=FIELD_BORDER,
        )
        entry.grid(row=row, column=1, sticky="ew", pady=(0, 16))

    def _choose_directory(self) -> None:
        current = Path(self.dir_var.get()).expanduser()
        initial = current if current.exists() else Path.cwd()
        selected = filedialog.askdirectory(initialdir=initial)
        if selected:
            self.dir_var.set(selected)

    def _on_save_clicked(self) -> None:
        values = {key: var.get().strip() for key, var in self.value_vars.items()}
        invalid = validate_env_values(self._keys, values)
        if invalid:
            messagebox.showerror("Missing values", "Please provide a value for: " + ", ".join(invalid))
            return

        directory = self.dir_var.get().strip() or None
        try:
            path = write_env_file(format_env_content(values), directory)
        except (OSError, UnicodeError) as exc:
            self._append_log(f"Failed to create/update .env file: {exc}", reset=True)
            messagebox.showerror("Save failed", str(exc))
            return

        lines = [f"✓ .env file created/updated: {path}"]
        lines += [f"{key}={mask_secret(value)}" for key, value in values.items()]
        self._append_log("\n".join(lines), reset=True)

    def _append_log(self, message: str, *, reset: bool = False) -> None:
        self.log.configure(state="normal")
        if reset:
            self.log.delete("1.0", "end")
        self.log.insert("end", message + "\n")
        self.log.see("end")
        self.log.configure(state="disabled")


def main() -> None:
    app = EnvModifierGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
