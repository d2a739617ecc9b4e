"""Data models for the store module."""

from dataclasses import dataclass
from typing import Optional

__all__ = ["Name", "Snapshot"]


@dataclass(frozen=True)
class Name:
    """
    One persisted row of the ``name`` table.

    Fields
    ──────
    name — free text, no uniqueness or format constraint
    id   — SQLite row id assigned on insert (None until saved)
    """
    name: str
    id:   Optional[int] = None

    def __str__(self) -> str:
        return f"Name(id={self.id}, name={self.name!r})"


# One immutable emission of the full table, in ascending id order
Snapshot = tuple[Name, ...]
