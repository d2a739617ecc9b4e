"""
store — SQLite-backed persistence layer for Name records.

Public API
──────────
Name          — frozen dataclass representing one stored name
NameStore     — CRUD interface (insert, delete, get_all, snapshot, …)
LiveQuery     — push-based view of the full table
Subscription  — handle returned by LiveQuery.subscribe()
"""

from namestore.store.models import Name, Snapshot
from namestore.store.live import LiveQuery, Subscription
from namestore.store.db import NameStore

__all__ = ["Name", "Snapshot", "NameStore", "LiveQuery", "Subscription"]
