"""In-memory record index mirrored to a CSV-like file.

The whole file is read once when the store is built. Every mutation updates
the in-memory map first and then rewrites the whole file, header included.

Failure policy:
- load never raises. Malformed rows are skipped with a warning, and an
  unreadable file leaves the store empty (logged, not raised) so the
  application can still start.
- save/delete raise WriteError when the file cannot be rewritten. The
  in-memory change is kept, so callers should treat WriteError as "state may
  be out of sync with the file".

This load/save asymmetry is deliberate policy and is open for review.
"""

from __future__ import annotations
import logging
import re
import threading
from pathlib import Path
from typing import Optional, Union

from .errors import NotFoundError, ReadError
from .records import FIELD_COUNT, HEADER, Record, is_header, parse_line, record_from_fields, render_record
from .safe_io import read_utf8, write_utf8


logger = logging.getLogger(__name__)

# only real line terminators; str.splitlines() also splits on \x1c-\x1e
_LINE_BREAK = re.compile(r"\r\n|[\n\r\v\f\x85\u2028\u2029]")


class RecordStore:
    """Ordered id -> Record map backed by one file.

    All public methods hold one lock for the whole store, reads included.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        if path is None:
            raise ValueError("path is required")
        self._path = Path(path)
        self._index: dict[str, Record] = {}
        self._lock = threading.Lock()
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def save(self, record: Record) -> None:
        """Insert or replace `record` by id, then rewrite the file.

        New ids go to the end; an existing id keeps its position.

        Raises:
            WriteError: the file could not be rewritten (memory is already updated).
        """
        with self._lock:
            self._index[record.id] = record
            self._persist()

    def find_by_id(self, rec_id: str) -> Optional[Record]:
        with self._lock:
            return self._index.get(rec_id)

    def find_all(self) -> list[Record]:
        """Snapshot of all records in store order."""
        with self._lock:
            return list(self._index.values())

    def delete_by_id(self, rec_id: str) -> None:
        """Remove a record and rewrite the file.

        Raises:
            NotFoundError: no record has this id (nothing is changed).
            WriteError: the file could not be rewritten (memory is already updated).
        """
        with self._lock:
            if rec_id not in self._index:
                raise NotFoundError(f"Item with ID '{rec_id}' not found")
            del self._index[rec_id]
            self._persist()
        logger.debug("deleted record id=%s", rec_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._index)

    def _load(self) -> None:
        try:
            content = read_utf8(self._path)
        except ReadError as ex:
            if isinstance(ex.__cause__, FileNotFoundError):
                logger.debug("no data file at %s, starting empty", self._path)
            else:
                logger.warning("Unable to load %s: %s", self._path, ex, exc_info=True)
            return

        for line in _LINE_BREAK.split(content):
            if not line.strip() or is_header(line):
                continue
            fields = parse_line(line)
            if len(fields) < FIELD_COUNT:
                logger.warning("Skipping malformed line: %r", line)
                continue
            try:
                rec = record_from_fields(fields)
            except ValueError:
                logger.warning("Skipping line without id: %r", line)
                continue
            self._index[rec.id] = rec
        logger.info("Loaded %d records from %s", len(self._index), self._path)

    def _persist(self) -> None:
        # TODO: write to a sibling temp file and rename, so a failed write
        # cannot truncate the existing data.
        lines = [HEADER]
        lines.extend(render_record(r) for r in self._index.values())
        write_utf8(self._path, "\n".join(lines) + "\n")
        logger.debug("persisted %d records to %s", len(self._index), self._path)
