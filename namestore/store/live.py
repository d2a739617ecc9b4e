"""
LiveQuery — push-based view of the full ``name`` table.

Usage::

    live = store.get_all()
    sub = live.subscribe(lambda snapshot: render(snapshot))   # fires at once
    store.insert("Ada")                                       # fires again
    sub.dispose()

No Qt imports here; callbacks run on whichever thread triggered the refresh.
The GUI layer is responsible for hopping back onto its own thread.
"""

import logging
import threading
from typing import Callable, Optional

from namestore.store.models import Snapshot

__all__ = ["LiveQuery", "Subscription"]

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[Snapshot], None]


class Subscription:
    """Handle returned by LiveQuery.subscribe(); dispose() stops delivery."""

    def __init__(self, live: "LiveQuery", callback: SnapshotCallback) -> None:
        self._live = live
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def dispose(self) -> None:
        """Unregister the callback. Safe to call more than once."""
        if self._active:
            self._active = False
            self._live._remove(self)


class LiveQuery:
    """
    Holds subscriber callbacks and pushes a fresh snapshot to each of them
    whenever refresh() is called.

    A new subscriber immediately receives the current snapshot.  Refreshes are
    serialized, so subscribers see snapshots in the order they were read.
    """

    def __init__(self, loader: Callable[[], Snapshot]) -> None:
        self._loader = loader
        self._subscriptions: list[Subscription] = []
        self._subs_lock = threading.Lock()
        self._publish_lock = threading.RLock()
        self._latest: Optional[Snapshot] = None

    # ── Internal helpers ──────────────────────────────────────────────────

    def _remove(self, subscription: Subscription) -> None:
        with self._subs_lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    @staticmethod
    def _deliver(subscription: Subscription, snapshot: Snapshot) -> None:
        if not subscription.active:
            return
        try:
            subscription._callback(snapshot)
        except Exception:  # noqa: BLE001
            logger.exception("LiveQuery subscriber %r failed", subscription._callback)

    # ── Public API ────────────────────────────────────────────────────────

    @property
    def latest(self) -> Optional[Snapshot]:
        """Most recently emitted snapshot, or None before the first emission."""
        return self._latest

    @property
    def subscriber_count(self) -> int:
        with self._subs_lock:
            return len(self._subscriptions)

    def subscribe(self, callback: SnapshotCallback) -> Subscription:
        """
        Register *callback* and invoke it at once with the current snapshot.

        Raises:
            StorageUnavailable: if the initial read fails (the callback is
                                not registered in that case).
        """
        subscription = Subscription(self, callback)
        with self._publish_lock:
            snapshot = self._loader()
            self._latest = snapshot
            with self._subs_lock:
                self._subscriptions.append(subscription)
            self._deliver(subscription, snapshot)
        logger.debug("LiveQuery: subscriber added (%d active)", self.subscriber_count)
        return subscription

    def refresh(self) -> Snapshot:
        """Re-read the table and push the snapshot to every active subscriber."""
        with self._publish_lock:
            snapshot = self._loader()
            self._latest = snapshot
            with self._subs_lock:
                targets = list(self._subscriptions)
            for subscription in targets:
                self._deliver(subscription, snapshot)
        return snapshot
