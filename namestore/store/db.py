"""
NameStore — SQLite-backed persistence layer for Name records.

Usage::

    store = NameStore(db_path="~/.namestore/names.db")

    # Observe the whole table
    sub = store.get_all().subscribe(on_snapshot)

    # Mutate; every subscriber receives a fresh snapshot afterwards
    new_id = store.insert("Ada")
    store.delete(Name(name="Ada", id=new_id))

    sub.dispose()
"""

import logging
import sqlite3
from pathlib import Path

from namestore.exceptions import StorageUnavailable
from namestore.store.live import LiveQuery
from namestore.store.models import Name, Snapshot

__all__ = ["NameStore"]

logger = logging.getLogger(__name__)

# Path to the SQL schema file bundled with this package
_SCHEMA_PATH = Path(__file__).parent / "migrations" / "schema.sql"


class NameStore:
    """
    CRUD interface for the local SQLite names table.

    The database file and schema are created automatically on first open.
    All operations use context-managed connections; no persistent connection
    is kept open between calls, so the store may be used from any thread.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = Path(db_path).expanduser()
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(
                f"Cannot create database directory {self._db_path.parent}: {exc}"
            ) from exc
        self._ensure_schema()
        self._live = LiveQuery(self.snapshot)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ── Internal helpers ──────────────────────────────────────────────────

    def _connect(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._db_path))
            conn.row_factory = sqlite3.Row
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Cannot open {self._db_path}: {exc}") from exc
        return conn

    def _ensure_schema(self) -> None:
        """Create tables if they don't already exist; switch the file to WAL."""
        sql = _SCHEMA_PATH.read_text(encoding="utf-8")
        conn = self._connect()
        try:
            # journal_mode is stored in the file, so once is enough
            conn.execute("PRAGMA journal_mode=WAL")
            with conn:
                conn.executescript(sql)
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Cannot create schema in {self._db_path}: {exc}") from exc
        finally:
            conn.close()

    def _publish(self) -> None:
        """Push a fresh snapshot to live subscribers after a committed write."""
        try:
            self._live.refresh()
        except StorageUnavailable:
            # The write itself is committed; only the notification is lost
            logger.exception("Live query refresh failed after a committed write")

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> Name:
        return Name(id=row["Id"], name=row["name"])

    # ── Public API ────────────────────────────────────────────────────────

    def insert(self, name: str) -> int:
        """
        Append a new record called *name*; the id is assigned by SQLite.

        Empty and duplicate names are accepted.  All live subscribers receive
        a fresh snapshot once the row is committed; a failed re-read is
        logged and does not turn the committed insert into an error.

        Returns:
            The id of the new record.

        Raises:
            StorageUnavailable: if the database cannot be written.
        """
        conn = self._connect()
        try:
            with conn:
                cur = conn.execute("INSERT INTO name (name) VALUES (?)", (name,))
            new_id = cur.lastrowid
        except sqlite3.Error as exc:
            logger.error("insert(%r) failed: %s", name, exc)
            raise StorageUnavailable(f"Cannot write to {self._db_path}: {exc}") from exc
        finally:
            conn.close()

        logger.debug("Inserted %r as id=%s", name, new_id)
        self._publish()
        return new_id  # type: ignore[return-value]

    def delete(self, record: Name) -> None:
        """
        Remove the row whose id matches *record.id*.

        Deleting an id that does not exist (or an unsaved record) is a
        successful no-op; subscribers still receive an unchanged snapshot.

        Raises:
            StorageUnavailable: if the database cannot be written.
        """
        if record.id is None:
            logger.debug("delete(%s): record was never saved, nothing to do", record)
        else:
            conn = self._connect()
            try:
                with conn:
                    cur = conn.execute("DELETE FROM name WHERE Id=?", (record.id,))
                removed = cur.rowcount
            except sqlite3.Error as exc:
                logger.error("delete(%s) failed: %s", record, exc)
                raise StorageUnavailable(f"Cannot write to {self._db_path}: {exc}") from exc
            finally:
                conn.close()
            logger.debug("delete(%s): %d row(s) removed", record, removed)

        self._publish()

    def snapshot(self) -> Snapshot:
        """
        Read the whole table once.

        Returns:
            Tuple of Name records in ascending id order.
        """
        conn = self._connect()
        try:
            rows = conn.execute("SELECT Id, name FROM name ORDER BY Id").fetchall()
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Cannot read {self._db_path}: {exc}") from exc
        finally:
            conn.close()
        return tuple(self._row_to_record(r) for r in rows)

    def get_all(self) -> LiveQuery:
        """Return the live view of the full table (same object on every call)."""
        return self._live

    def count(self) -> int:
        """Number of stored records."""
        conn = self._connect()
        try:
            (total,) = conn.execute("SELECT COUNT(*) FROM name").fetchone()
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Cannot read {self._db_path}: {exc}") from exc
        finally:
            conn.close()
        return total
