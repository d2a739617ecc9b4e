"""
GUI ViewModels — pure-Python observable state containers.

No Qt imports here; every class is testable without a display.
Qt widgets observe these objects and update themselves in response to state
changes.  (Signal emission is handled by the Qt layer, not here.)

Public API
──────────
NameListViewModel  — current snapshot of the names table + entry field text
"""

import logging

from namestore.store.models import Name, Snapshot

__all__ = ["NameListViewModel"]

logger = logging.getLogger(__name__)


class NameListViewModel:
    """
    Holds what the names page shows.

    Attributes
    ──────────
    records   — latest snapshot received from the live query (read-only)
    new_name  — text currently typed into the entry field
    is_empty  — derived: True when there are no records to show
    """

    def __init__(self) -> None:
        self.records:  Snapshot = ()
        self.new_name: str      = ""

    def apply_snapshot(self, snapshot: Snapshot) -> None:
        """Replace the displayed records with *snapshot*."""
        self.records = tuple(snapshot)
        logger.debug("View model now shows %d record(s)", len(self.records))

    def submit(self) -> str:
        """
        Return the name to insert for the current entry text.

        The entry text is kept after submit, so the same name can be added
        again with one click.
        """
        return self.new_name

    @property
    def is_empty(self) -> bool:
        return not self.records

    @staticmethod
    def row_title(record: Name) -> str:
        return record.name

    @staticmethod
    def row_subtitle(record: Name) -> str:
        return f"ID: {record.id if record.id is not None else 0}"
