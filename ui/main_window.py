import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from config.settings import AppSettings
from controllers.csv_controller import CSVController
from services.csv_service import CSVFileNotFoundError, CSVReadError, EmptyCSVError
from ui.cell_dialog import CellDialog
from ui.table_view import TableView


class MainWindow:
    def __init__(self, settings: AppSettings, log: logging.Logger):
        self.settings = settings
        self.log = log
        self.controller = CSVController(log=log.getChild("controller"))

        self.window = tk.Tk()
        self.window.title(settings.title)
        self.window.geometry(settings.geometry)
        self.window.report_callback_exception = self._report_callback_exception

        top = ttk.Frame(self.window, relief=tk.RAISED, borderwidth=1)
        top.pack(side="top", fill="x")
        ttk.Button(top, text="Load CSV", width=14, command=self.load_csv_action).pack(side="left", padx=6, pady=8)
        ttk.Label(top, text="Double-click any cell to open the value in a new window.").pack(side="left", padx=10)

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Ready", anchor="w")
        self.lbl_status.pack(side="left", fill="x")

        self.table = TableView(self.window, on_cell_activate=self.show_cell)
        self.table.pack(fill="both", expand=True, padx=10, pady=10)

    def run(self):
        self.window.mainloop()

    def _report_callback_exception(self, exc_type, exc, tb):
        self.log.error("Unhandled exception in UI callback", exc_info=(exc_type, exc, tb))
        messagebox.showerror("Error", f"Unexpected error. See {self.settings.log_file.name} for details.")

    def _busy(self, busy: bool):
        self.window.config(cursor="watch" if busy else "")
        self.window.update_idletasks()

    def load_csv_action(self):
        path = filedialog.askopenfilename(
            title="Select a CSV file to load",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")],
        )
        if not path: return
        self._busy(True)
        try:
            table = self.controller.load_csv(path)
        except CSVFileNotFoundError:
            messagebox.showerror("Error", "File not found.")
            return
        except EmptyCSVError:
            self.table.clear()
            self.lbl_status.config(text="Empty file")
            messagebox.showwarning("Warning", "CSV file is empty.")
            return
        except CSVReadError:
            # Already logged by the controller
            self.lbl_status.config(text="Error")
            messagebox.showerror("Error", f"Failed to load CSV. See {self.settings.log_file.name} for details.")
            return
        except Exception:
            self.log.exception("load_csv_action failed for %s", path)
            self.lbl_status.config(text="Error")
            messagebox.showerror("Error", f"Failed to load CSV. See {self.settings.log_file.name} for details.")
            return
        finally:
            self._busy(False)
        self.table.show_table(table)
        self.lbl_status.config(text=f"{table.row_count} rows, {table.column_count} columns")

    def show_cell(self, row: int, column: int):
        try:
            cell = self.controller.get_cell(row, column)
            CellDialog(self.window, cell.title, cell.value).show()
        except Exception:
            self.log.exception("show_cell failed for (%d, %d)", row, column)
            messagebox.showerror("Error", f"Failed to open cell window. See {self.settings.log_file.name} for details.")
