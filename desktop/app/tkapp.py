"""Tkinter desktop application for the income and expense ledger."""

from __future__ import annotations

import argparse
import tkinter as tk
from decimal import Decimal
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Callable, Iterable, Optional

from ledger.config import Settings
from ledger.exceptions import PersistenceError
from ledger.forms import EntryForm
from ledger.logging_config import setup_logging
from ledger.models import Category
from ledger.services import CLEAR_CONFIRMATION_PROMPT, LedgerStore
from ledger.storage import FileStorage


PRIMARY_BG = "#0f172a"
SECONDARY_BG = "#1e293b"
ACCENT_BG = "#1d4ed8"
ACCENT_ACTIVE_BG = "#2563eb"
TEXT_PRIMARY = "#e2e8f0"
TEXT_MUTED = "#94a3b8"
INCOME_FG = "#4ade80"
EXPENSE_FG = "#f87171"


def format_amount_display(value: Decimal) -> str:
    return f"${value:,.2f}"


class CategoryColumn(ttk.Frame):
    """Add form and entry list for one category."""

    def __init__(
        self,
        master: tk.Misc,
        store: LedgerStore,
        category: Category,
        on_change: Callable[[], None],
    ) -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.store = store
        self.category = category
        self.on_change = on_change
        self.form = EntryForm(store, category)

        self.description_var = tk.StringVar()
        self.amount_var = tk.StringVar()

        self._build_form()
        self._build_table()
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

    def _build_form(self) -> None:
        noun = "Income" if self.category is Category.INCOME else "Expense"
        form = ttk.LabelFrame(self, text=self.category.label, style="Card.TLabelframe")
        form.grid(row=0, column=0, sticky="ew", padx=4, pady=(0, 12))
        form.columnconfigure(0, weight=1)

        ttk.Label(form, text=f"{noun} description", style="FormLabel.TLabel").grid(
            column=0, row=0, sticky="w", padx=4, pady=4
        )
        desc_entry = ttk.Entry(form, textvariable=self.description_var, style="App.TEntry")
        desc_entry.grid(column=0, row=1, sticky="ew", padx=4, pady=(0, 8))

        ttk.Label(form, text="Amount ($)", style="FormLabel.TLabel").grid(
            column=0, row=2, sticky="w", padx=4, pady=4
        )
        amount_entry = ttk.Entry(form, textvariable=self.amount_var, style="App.TEntry")
        amount_entry.grid(column=0, row=3, sticky="ew", padx=4, pady=(0, 8))

        for widget in (desc_entry, amount_entry):
            widget.bind("<Return>", self._handle_key)
            widget.bind("<KP_Enter>", self._handle_key)

        ttk.Button(
            form,
            text=f"Add {noun}",
            command=self.submit,
            style="Primary.TButton",
        ).grid(column=0, row=4, sticky="ew", padx=4, pady=4)

    def _build_table(self) -> None:
        table_frame = ttk.Frame(self, style="Panel.TFrame")
        table_frame.grid(row=1, column=0, sticky="nsew")
        table_frame.columnconfigure(0, weight=1)
        table_frame.rowconfigure(0, weight=1)

        columns = ("description", "amount")
        self.tree = ttk.Treeview(
            table_frame,
            columns=columns,
            show="headings",
            height=10,
            style="App.Treeview",
        )
        self.tree.heading("description", text="Description", anchor="w")
        self.tree.column("description", width=220, anchor="w")
        self.tree.heading("amount", text="Amount", anchor="e")
        self.tree.column("amount", width=120, anchor="e")

        vsb = ttk.Scrollbar(table_frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscroll=vsb.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

        self.empty_label = ttk.Label(
            table_frame,
            text=f"No {self.category.value} entries yet",
            style="FormLabel.TLabel",
        )

        button_bar = ttk.Frame(table_frame, style="Panel.TFrame")
        button_bar.grid(row=2, column=0, columnspan=2, sticky="e", pady=8)
        ttk.Button(
            button_bar,
            text="Remove Selected",
            command=self.remove_selected,
            style="Secondary.TButton",
        ).grid(row=0, column=0, padx=4)

    def _handle_key(self, event: tk.Event) -> str:
        self._run(lambda: self.form.handle_key(event.keysym))
        return "break"

    def submit(self) -> None:
        self._run(self.form.submit)

    def _run(self, action: Callable[[], object]) -> None:
        self.form.description = self.description_var.get()
        self.form.amount = self.amount_var.get()
        try:
            entry = action()
        except PersistenceError as exc:
            messagebox.showerror("Storage Error", str(exc), parent=self)
            return
        if entry is None:
            return
        # EntryForm only resets after a successful add.
        self.description_var.set(self.form.description)
        self.amount_var.set(self.form.amount)
        self.on_change()

    def remove_selected(self) -> None:
        for item_id in self.tree.selection():
            try:
                self.store.remove_entry(self.category, int(item_id))
            except PersistenceError as exc:
                messagebox.showerror("Storage Error", str(exc), parent=self)
                break
        self.on_change()

    def populate(self) -> None:
        self.tree.delete(*self.tree.get_children())
        entries = self.store.entries(self.category)
        for entry in entries:
            self.tree.insert(
                "",
                "end",
                iid=str(entry.id),
                values=(entry.description, format_amount_display(entry.amount)),
            )
        if entries:
            self.empty_label.grid_remove()
        else:
            self.empty_label.grid(row=1, column=0, sticky="w", pady=4)


class LedgerApp(tk.Tk):
    """Main application window."""

    def __init__(self, store: LedgerStore) -> None:
        super().__init__()
        self.title("Income & Expense Tracker")
        self.geometry("960x640")
        self.minsize(820, 560)
        self.configure(bg=PRIMARY_BG)

        self._configure_styles()

        self.store = store
        self.income_total_var = tk.StringVar(value=format_amount_display(Decimal("0")))
        self.expense_total_var = tk.StringVar(value=format_amount_display(Decimal("0")))
        self.net_var = tk.StringVar(value=format_amount_display(Decimal("0")))

        self._build_layout()
        self.refresh_all()

    def _configure_styles(self) -> None:
        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass

        style.configure("TFrame", background=PRIMARY_BG)
        style.configure("TLabel", background=PRIMARY_BG, foreground=TEXT_PRIMARY)
        style.configure("Panel.TFrame", background=SECONDARY_BG, relief="flat")
        style.configure("Card.TLabelframe", background=SECONDARY_BG, foreground=TEXT_PRIMARY)
        style.configure("Card.TLabelframe.Label", background=SECONDARY_BG, foreground=TEXT_PRIMARY)
        style.configure("Header.TFrame", background=PRIMARY_BG)
        style.configure("Summary.TFrame", background=SECONDARY_BG)
        style.configure("Metric.TFrame", background=SECONDARY_BG)

        style.configure("FormLabel.TLabel", background=SECONDARY_BG, foreground=TEXT_MUTED, font=("Segoe UI", 9))
        style.configure("Header.TLabel", background=PRIMARY_BG, foreground=TEXT_PRIMARY, font=("Segoe UI", 20, "bold"))
        style.configure("Subheader.TLabel", background=PRIMARY_BG, foreground=TEXT_MUTED, font=("Segoe UI", 10))
        style.configure("MetricLabel.TLabel", background=SECONDARY_BG, foreground=TEXT_MUTED, font=("Segoe UI", 9, "bold"))
        style.configure("MetricValue.TLabel", background=SECONDARY_BG, foreground=TEXT_PRIMARY, font=("Segoe UI", 16, "bold"))
        style.configure("IncomeValue.TLabel", background=SECONDARY_BG, foreground=INCOME_FG, font=("Segoe UI", 16, "bold"))
        style.configure("ExpenseValue.TLabel", background=SECONDARY_BG, foreground=EXPENSE_FG, font=("Segoe UI", 16, "bold"))
        style.configure(
            "MetricNegative.TFrame",
            background="#321524",
            bordercolor="#f87171",
            relief="solid",
            borderwidth=1,
        )
        style.configure(
            "MetricValueNegative.TLabel",
            background="#321524",
            foreground="#fca5a5",
            font=("Segoe UI", 16, "bold"),
        )

        style.configure(
            "App.TEntry",
            fieldbackground=SECONDARY_BG,
            background=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            insertcolor=TEXT_PRIMARY,
            bordercolor=ACCENT_BG,
        )
        style.configure(
            "Primary.TButton",
            background=ACCENT_BG,
            foreground=TEXT_PRIMARY,
            bordercolor=ACCENT_BG,
            padding=(18, 6),
        )
        style.map("Primary.TButton", background=[("active", ACCENT_ACTIVE_BG)])
        style.configure(
            "Secondary.TButton",
            background=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            bordercolor=SECONDARY_BG,
            padding=(14, 6),
        )
        style.map("Secondary.TButton", background=[("active", ACCENT_BG)])
        style.configure(
            "Danger.TButton",
            background=SECONDARY_BG,
            foreground=EXPENSE_FG,
            bordercolor=EXPENSE_FG,
            padding=(14, 6),
        )
        style.configure(
            "App.Treeview",
            background=SECONDARY_BG,
            fieldbackground=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            bordercolor=SECONDARY_BG,
            rowheight=28,
        )
        style.configure(
            "App.Treeview.Heading",
            background=SECONDARY_BG,
            foreground=TEXT_MUTED,
            relief="flat",
        )
        style.map(
            "App.Treeview",
            background=[("selected", ACCENT_BG)],
            foreground=[("selected", TEXT_PRIMARY)],
        )

    def _build_layout(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(2, weight=1)

        header = ttk.Frame(self, padding=20, style="Header.TFrame")
        header.grid(row=0, column=0, sticky="ew")
        ttk.Label(header, text="Income & Expense Tracker", style="Header.TLabel").grid(
            row=0, column=0, sticky="w"
        )
        ttk.Label(
            header,
            text="Data automatically saved to your device",
            style="Subheader.TLabel",
        ).grid(row=1, column=0, sticky="w")

        summary = ttk.Frame(self, padding=(20, 10), style="Summary.TFrame")
        summary.grid(row=1, column=0, sticky="ew")
        summary.columnconfigure((0, 1, 2), weight=1)

        def build_metric(
            column: int, label: str, var: tk.StringVar, value_style: str
        ) -> tuple[ttk.Frame, ttk.Label]:
            container = ttk.Frame(summary, style="Metric.TFrame", padding=(16, 12))
            container.grid(row=0, column=column, sticky="ew", padx=6)
            ttk.Label(container, text=label, style="MetricLabel.TLabel").grid(row=0, column=0, sticky="w")
            value_label = ttk.Label(container, textvariable=var, style=value_style)
            value_label.grid(row=1, column=0, sticky="w")
            return container, value_label

        build_metric(0, "Total Income", self.income_total_var, "IncomeValue.TLabel")
        build_metric(1, "Total Expenses", self.expense_total_var, "ExpenseValue.TLabel")
        self.net_container, self.net_value_label = build_metric(
            2, "Net Total", self.net_var, "MetricValue.TLabel"
        )

        ttk.Button(
            summary,
            text="Clear All Data",
            command=self.clear_all,
            style="Danger.TButton",
        ).grid(row=1, column=0, columnspan=3, pady=(12, 0))

        columns = ttk.Frame(self, style="TFrame")
        columns.grid(row=2, column=0, sticky="nsew", padx=12, pady=12)
        columns.columnconfigure((0, 1), weight=1)
        columns.rowconfigure(0, weight=1)

        self.income_column = CategoryColumn(columns, self.store, Category.INCOME, self.refresh_all)
        self.expense_column = CategoryColumn(columns, self.store, Category.EXPENSE, self.refresh_all)
        self.income_column.grid(row=0, column=0, sticky="nsew", padx=6)
        self.expense_column.grid(row=0, column=1, sticky="nsew", padx=6)

    def clear_all(self) -> None:
        try:
            cleared = self.store.clear_all(
                lambda: messagebox.askyesno("Clear All Data", CLEAR_CONFIRMATION_PROMPT, parent=self)
            )
        except PersistenceError as exc:
            messagebox.showerror("Storage Error", str(exc), parent=self)
            return
        if cleared:
            self.refresh_all()

    def refresh_all(self) -> None:
        self.income_column.populate()
        self.expense_column.populate()
        self.refresh_summary()

    def refresh_summary(self) -> None:
        totals = self.store.totals()
        self.income_total_var.set(format_amount_display(totals.income))
        self.expense_total_var.set(format_amount_display(totals.expense))
        self.net_var.set(format_amount_display(totals.net))
        if totals.is_negative:
            self.net_container.configure(style="MetricNegative.TFrame")
            self.net_value_label.configure(style="MetricValueNegative.TLabel")
        else:
            self.net_container.configure(style="Metric.TFrame")
            self.net_value_label.configure(style="MetricValue.TLabel")


def main(argv: Optional[Iterable[str]] = None) -> None:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Tkinter desktop app for the income and expense ledger")
    parser.add_argument(
        "--data-dir",
        default=settings.data_dir,
        type=Path,
        help=f"Directory containing ledger storage files (default: {settings.data_dir})",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(settings.log_level, log_file=settings.log_file)

    app = LedgerApp(LedgerStore(FileStorage(args.data_dir)))
    app.mainloop()


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
