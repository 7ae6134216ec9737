import tkinter as tk
from tkinter import ttk


class CellDialog(tk.Toplevel):
    """Modal window showing a single cell value, titled cell[row,col]."""

    def __init__(self, parent, title: str, value: str):
        super().__init__(parent)
        self.title(title)
        self.geometry("300x180")
        self.transient(parent)

        ttk.Button(self, text="Close", command=self.destroy).pack(side="bottom", fill="x")
        lbl = ttk.Label(self, text=value, anchor="center", justify="center",
                        font=("Arial", 18), wraplength=280)
        lbl.pack(fill="both", expand=True, padx=6, pady=6)

        self.bind("<Escape>", lambda e: self.destroy())

    def show(self):
        self.grab_set()
        self.wait_window(self)
