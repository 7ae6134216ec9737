import tkinter as tk
from tkinter import ttk


class TableView(ttk.Frame):
    """
    Read-only grid; on_cell_activate receives (row, column), both zero-based
    indices into the loaded table, even while a search filter is active.
    """

    def __init__(self, parent, on_cell_activate=None, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_cell_activate = on_cell_activate
        self._all_data = ()
        self._build_search_bar()
        self._build_grid()

    def _build_search_bar(self):
        bar = ttk.Frame(self)
        bar.pack(side="top", fill="x", pady=(0, 5))
        self.search_var = tk.StringVar()
        self.search_var.trace_add("write", lambda *_: self._on_search())
        ttk.Label(bar, text="Search:").grid(row=0, column=0, padx=(0, 5))
        ttk.Entry(bar, textvariable=self.search_var, width=30).grid(row=0, column=1, padx=(0, 10))
        ttk.Button(bar, text="Clear", command=self._clear_search).grid(row=0, column=2)
        self.status_label = ttk.Label(bar, text="")
        self.status_label.grid(row=0, column=3, sticky="e")
        bar.columnconfigure(3, weight=1)

    def _build_grid(self):
        body = ttk.Frame(self)
        body.pack(side="top", fill="both", expand=True)
        self._tree = ttk.Treeview(body, show="headings", selectmode="browse")
        scroll_y = ttk.Scrollbar(body, orient="vertical", command=self._tree.yview)
        scroll_x = ttk.Scrollbar(body, orient="horizontal", command=self._tree.xview)
        self._tree.configure(yscrollcommand=scroll_y.set, xscrollcommand=scroll_x.set)
        self._tree.grid(row=0, column=0, sticky="nsew")
        scroll_y.grid(row=0, column=1, sticky="ns")
        scroll_x.grid(row=1, column=0, sticky="ew")
        body.rowconfigure(0, weight=1)
        body.columnconfigure(0, weight=1)
        self._tree.bind("<Double-1>", self._on_double_click)

    def _on_search(self):
        search_term = self.search_var.get().lower()
        if not search_term:
            self._display_rows(range(len(self._all_data)))
            self.status_label.config(text=f"Showing all {len(self._all_data)} rows")
            return
        matches = [i for i, row in enumerate(self._all_data)
                   if any(search_term in cell.lower() for cell in row)]
        self._display_rows(matches)
        self.status_label.config(text=f"Showing {len(matches)} of {len(self._all_data)} rows")

    def _clear_search(self):
        self.search_var.set("")

    def _display_rows(self, indices):
        for r in self._tree.get_children(): self._tree.delete(r)
        # Item id is the source row index
        for i in indices:
            self._tree.insert("", "end", iid=str(i), values=self._all_data[i])

    def _on_double_click(self, event):
        if self._tree.identify_region(event.x, event.y) != "cell": return
        item = self._tree.identify_row(event.y)
        col_id = self._tree.identify_column(event.x)
        if not item or not col_id: return
        row = int(item)
        column = int(col_id.lstrip("#")) - 1
        if self.on_cell_activate:
            self.on_cell_activate(row, column)

    def clear(self):
        for r in self._tree.get_children(): self._tree.delete(r)
        self._tree["columns"] = ()
        self._all_data = ()
        self.status_label.config(text="")

    def show_table(self, table):
        self.clear()
        self.search_var.set("")
        self._all_data = table.rows
        self._tree["columns"] = tuple(table.columns)
        for col in table.columns:
            self._tree.heading(col, text=col)
            self._tree.column(col, anchor="w", width=120, stretch=True)
        self._display_rows(range(len(table.rows)))
        self.status_label.config(text=f"Total: {table.row_count} rows")
