"""
MainWindow — top-level application window for the names GUI.

Hosts a single NamesPage.  Store mutations run on a background QThread
(StoreWorker); live-query snapshots come back through SnapshotRelay so the
page is always updated on the UI thread.
"""

import logging

from PyQt6.QtCore import QThread
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QWidget

from namestore.app import AppContext
from namestore.gui.pages.names import NamesPage
from namestore.gui.worker import SnapshotRelay, StoreWorker
from namestore.store.live import Subscription

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)

_STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Root window: hosts the names page and wires it to the store."""

    def __init__(self, context: AppContext, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._context = context
        self.setWindowTitle(context.config.window_title)
        self.resize(360, 560)

        # Worker / thread references — kept to prevent premature GC
        self._thread: QThread | None = None
        self._worker: StoreWorker | None = None
        self._subscription: Subscription | None = None

        self._build_ui()
        # Subscribe before the worker thread starts
        self._subscribe()
        self._start_worker()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self._page_names = NamesPage()
        self.setCentralWidget(self._page_names)
        self.statusBar()

    # ── Store wiring ───────────────────────────────────────────────────────

    def _start_worker(self) -> None:
        self._worker = StoreWorker(self._context.store)
        self._thread = QThread()
        self._worker.moveToThread(self._thread)

        self._page_names.insert_requested.connect(self._worker.insert)
        self._page_names.delete_requested.connect(self._worker.delete)
        self._worker.failed.connect(self._on_store_failed)

        self._thread.start()

    def _subscribe(self) -> None:
        self._relay = SnapshotRelay()
        self._relay.snapshot_ready.connect(self._page_names.show_snapshot)
        self._subscription = self._context.store.get_all().subscribe(self._relay.publish)

    def _on_store_failed(self, error: str) -> None:
        """Called when the worker emits failed(error)."""
        self.statusBar().showMessage(f"Error: {error}", _STATUS_TIMEOUT_MS)

    # ── Qt overrides ───────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent) -> None:
        self.shutdown()
        super().closeEvent(event)

    # ── Public API ─────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Stop receiving snapshots and stop the worker thread."""
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        if self._thread is not None and self._thread.isRunning():
            self._thread.quit()
            self._thread.wait(3000)  # wait up to 3s
