"""Catalog operations on top of a RecordStore.

Every user-supplied string goes through `sanitize_line` before it reaches the
store, with a per-field length limit.
"""

from __future__ import annotations
from typing import Optional

from .records import Record
from .sanitize import sanitize_line
from .store import RecordStore


MAX_ID = 40
MAX_NAME = 80
MAX_CATEGORY = 80
MAX_DESCRIPTION = 200
MAX_TOKEN = 80

UNCATEGORIZED = "(uncategorized)"


class CatalogService:
    def __init__(self, store: RecordStore) -> None:
        if store is None:
            raise ValueError("store is required")
        self._store = store

    @property
    def store(self) -> RecordStore:
        return self._store

    def upsert_item(self, rec_id: str, name: str, category: str, description: str) -> Record:
        """Sanitize the four fields and save the resulting record.

        Raises:
            ValidationError: a field is missing, empty after cleaning, or too long.
            WriteError: the store could not be persisted.
        """
        rec = Record(
            sanitize_line(rec_id, MAX_ID),
            sanitize_line(name, MAX_NAME),
            sanitize_line(category, MAX_CATEGORY),
            sanitize_line(description, MAX_DESCRIPTION),
        )
        self._store.save(rec)
        return rec

    def delete_item(self, rec_id: str) -> str:
        """Delete by sanitized id and return that id.

        Raises:
            NotFoundError: no record has this id.
        """
        sid = sanitize_line(rec_id, MAX_ID)
        self._store.delete_by_id(sid)
        return sid

    def find_by_id(self, rec_id: str) -> Optional[Record]:
        return self._store.find_by_id(sanitize_line(rec_id, MAX_ID))

    def find_all(self) -> list[Record]:
        return self._store.find_all()

    def search(self, token: str) -> list[Record]:
        """Records whose name or category contains `token`, ignoring case."""
        t = sanitize_line(token, MAX_TOKEN).lower()
        return [
            r for r in self._store.find_all()
            if t in r.name.lower() or t in r.category.lower()
        ]

    def category_tree(self) -> dict[str, list[Record]]:
        """Group records by category, categories in first-seen order."""
        tree: dict[str, list[Record]] = {}
        for r in self._store.find_all():
            tree.setdefault(r.category or UNCATEGORIZED, []).append(r)
        return tree
