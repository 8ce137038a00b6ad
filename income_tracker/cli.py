"""Console interface for the income and expense ledger."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from ledger.config import Settings
from ledger.exceptions import PersistenceError, ValidationError
from ledger.logging_config import setup_logging
from ledger.models import Category, Entry
from ledger.services import CLEAR_CONFIRMATION_PROMPT, LedgerStore
from ledger.storage import FileStorage


def _load_store(data_dir: Path) -> LedgerStore:
    return LedgerStore(FileStorage(data_dir))


def _format_entry(entry: Entry) -> str:
    return f"[{entry.id}] {entry.description}: {entry.amount:.2f}"


def _prompt_confirmation(prompt: str = CLEAR_CONFIRMATION_PROMPT) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def handle_entries(args: argparse.Namespace, store: LedgerStore) -> None:
    category = Category.parse(args.entity)
    if args.command == "add":
        entry = store.add(category, args.description, args.amount)
        print(f"{category.label} entry added: {_format_entry(entry)}")
    elif args.command == "list":
        entries = store.entries(category)
        if not entries:
            print(f"No {category.value} entries yet.")
            return
        print(f"Found {len(entries)} {category.value} entries (total {store.total(category):.2f}):")
        for entry in entries:
            print("  " + _format_entry(entry))
    elif args.command == "remove":
        if store.remove_entry(category, args.id):
            print(f"{category.label} entry {args.id} removed.")
        else:
            print(f"No {category.value} entry with id {args.id}; nothing removed.")


def handle_totals(store: LedgerStore) -> None:
    totals = store.totals()
    print(f"Total income:   {totals.income:.2f}")
    print(f"Total expenses: {totals.expense:.2f}")
    print(f"Net total:      {totals.net:.2f}")


def handle_clear(
    args: argparse.Namespace,
    store: LedgerStore,
    confirm: Callable[[], bool] = _prompt_confirmation,
) -> None:
    cleared = store.clear_all((lambda: True) if args.yes else confirm)
    print("All data cleared." if cleared else "Clear cancelled; nothing changed.")


def handle_serve(args: argparse.Namespace, store: LedgerStore, settings: Settings) -> None:
    from api.app import create_app

    app = create_app(store=store, settings=settings)
    app.run(host=args.host, port=args.port, threaded=False)


def handle_desktop(store: LedgerStore) -> None:
    from desktop.app.tkapp import LedgerApp

    LedgerApp(store).mainloop()


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    settings = settings or Settings.from_env()
    parser = argparse.ArgumentParser(description="Income & Expense Tracker CLI")
    parser.add_argument(
        "--data-dir",
        default=settings.data_dir,
        type=Path,
        help=f"Directory to store ledger data (default: {settings.data_dir})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    subparsers = parser.add_subparsers(dest="entity", required=True)

    for category in Category:
        entity_parser = subparsers.add_parser(category.value, help=f"Manage {category.value} entries")
        entity_sub = entity_parser.add_subparsers(dest="command", required=True)

        add_parser = entity_sub.add_parser("add", help=f"Add a new {category.value} entry")
        add_parser.add_argument("description")
        add_parser.add_argument("amount")

        entity_sub.add_parser("list", help=f"List {category.value} entries")

        remove_parser = entity_sub.add_parser("remove", help=f"Remove a {category.value} entry")
        remove_parser.add_argument("id", type=int)

    subparsers.add_parser("totals", help="Show income, expense and net totals")

    clear_parser = subparsers.add_parser("clear", help="Remove all entries and stored data")
    clear_parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", default=5000, type=int)

    subparsers.add_parser("desktop", help="Open the desktop window")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(args.log_level, log_file=settings.log_file)

    try:
        store = _load_store(args.data_dir)
        if args.entity in {category.value for category in Category}:
            handle_entries(args, store)
        elif args.entity == "totals":
            handle_totals(store)
        elif args.entity == "clear":
            handle_clear(args, store)
        elif args.entity == "serve":
            handle_serve(args, store, settings)
        elif args.entity == "desktop":
            handle_desktop(store)
        else:  # pragma: no cover - argparse should prevent this
            parser.error(f"Unknown command: {args.entity}")
            return 2
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except PersistenceError as exc:
        print(f"Storage error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
