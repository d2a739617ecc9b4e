"""
StoreWorker / SnapshotRelay — move store traffic off and back onto the UI thread.

Usage (MainWindow)::

    self._thread = QThread()
    self._worker = StoreWorker(store)
    self._worker.moveToThread(self._thread)
    page.insert_requested.connect(self._worker.insert)   # queued → worker thread
    page.delete_requested.connect(self._worker.delete)
    self._thread.start()

    self._relay = SnapshotRelay()
    self._relay.snapshot_ready.connect(page.show_snapshot)  # queued → UI thread
    self._subscription = store.get_all().subscribe(self._relay.publish)

Signals
───────
StoreWorker.failed(str)           — human-readable storage error message
SnapshotRelay.snapshot_ready(obj) — one live-query snapshot (tuple[Name, ...])
"""

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from namestore.exceptions import StorageUnavailable
from namestore.store.db import NameStore
from namestore.store.models import Name, Snapshot

__all__ = ["StoreWorker", "SnapshotRelay"]

logger = logging.getLogger(__name__)


class StoreWorker(QObject):
    """
    Runs NameStore mutations inside a QThread.

    Callers never wait for a result; the outcome shows up as the next
    live-query snapshot, or as a failed() signal.
    """

    failed = pyqtSignal(str)  # error message

    def __init__(self, store: NameStore) -> None:
        super().__init__()
        self._store = store

    @pyqtSlot(str)
    def insert(self, name: str) -> None:
        try:
            self._store.insert(name)
        except StorageUnavailable as exc:
            logger.exception("StoreWorker.insert() failed")
            self.failed.emit(str(exc))

    @pyqtSlot(object)
    def delete(self, record: Name) -> None:
        try:
            self._store.delete(record)
        except StorageUnavailable as exc:
            logger.exception("StoreWorker.delete() failed")
            self.failed.emit(str(exc))


class SnapshotRelay(QObject):
    """Re-emits live-query callbacks as a Qt signal, whatever thread they come from."""

    snapshot_ready = pyqtSignal(object)

    def publish(self, snapshot: Snapshot) -> None:
        self.snapshot_ready.emit(snapshot)
