"""
CLI entry point for namestore.

Usage
─────
  # Open the names window (default when no subcommand is given)
  python -m namestore
  python -m namestore --db ./names.db gui

  # Script the same store from a terminal
  python -m namestore list
  python -m namestore add "Ada Lovelace"
  python -m namestore delete 3

Subcommands are implemented as standalone functions (cmd_gui, cmd_list,
cmd_add, cmd_delete) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
from typing import Optional

from namestore.app import DEFAULT_DB_PATH, AppConfig, AppContext
from namestore.exceptions import StorageUnavailable
from namestore.store.db import NameStore
from namestore.store.models import Name

__all__ = ["build_parser", "cmd_gui", "cmd_list", "cmd_add", "cmd_delete", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: gui | list | add | delete
    """
    parser = argparse.ArgumentParser(
        prog="namestore",
        description="A persisted list of names with a live view",
    )
    parser.add_argument(
        "--db",
        default=DEFAULT_DB_PATH,
        metavar="PATH",
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── gui ───────────────────────────────────────────────────────────────
    sub.add_parser("gui", help="Open the names window")

    # ── list ──────────────────────────────────────────────────────────────
    sub.add_parser("list", help="Print every stored name")

    # ── add ───────────────────────────────────────────────────────────────
    add = sub.add_parser("add", help="Store a new name")
    add.add_argument("name", metavar="NAME", help="Name to store (may be empty)")

    # ── delete ────────────────────────────────────────────────────────────
    rm = sub.add_parser("delete", help="Delete a stored name by id")
    rm.add_argument("id", type=int, metavar="ID", help="Record id to delete")

    return parser


# ── Command implementations ───────────────────────────────────────────────────


def cmd_list(store: NameStore) -> None:
    """Print stored names to stdout."""
    records = store.snapshot()
    if not records:
        print("0 names stored.")
        return
    for rec in records:
        print(f"[{rec.id:>4}]  {rec.name}")


def cmd_add(store: NameStore, name: str) -> int:
    """Insert *name* and print the id it was given."""
    new_id = store.insert(name)
    print(f"Added [{new_id}] {name}")
    return new_id


def cmd_delete(store: NameStore, record_id: int) -> None:
    """Delete record *record_id*; unknown ids are silently ignored."""
    store.delete(Name(name="", id=record_id))
    logger.info("Deleted record %d (if it existed)", record_id)


def cmd_gui(context: AppContext, argv: Optional[list[str]] = None) -> int:
    """Run the Qt event loop until the main window is closed."""
    from PyQt6.QtWidgets import QApplication
    from namestore.gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(argv or sys.argv[:1])
    window = MainWindow(context)
    window.show()
    return app.exec()


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    try:
        context = AppContext.create(AppConfig(db_path=ns.db))

        if ns.subcommand == "list":
            cmd_list(store=context.store)
            return 0

        if ns.subcommand == "add":
            cmd_add(store=context.store, name=ns.name)
            return 0

        if ns.subcommand == "delete":
            cmd_delete(store=context.store, record_id=ns.id)
            return 0

        return cmd_gui(context)
    except StorageUnavailable as exc:
        logger.debug("%s failed", ns.subcommand or "startup", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
