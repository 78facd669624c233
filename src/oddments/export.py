"""JSON export of the catalog.

Only needs something with a `find_all()` returning records, so it works with
a RecordStore or a CatalogService alike.
"""

from __future__ import annotations
import json
from typing import Iterable, Protocol

from .records import Record
from .safe_io import PathLike, write_utf8


class RecordSource(Protocol):
    def find_all(self) -> list[Record]: ...


def to_json(records: Iterable[Record], indent: int = 2) -> str:
    """Render records as ``{"data": [{...}, ...]}``."""
    data = [
        {"id": r.id, "name": r.name, "category": r.category, "description": r.description}
        for r in records
    ]
    return json.dumps({"data": data}, indent=indent, ensure_ascii=False)


def export_json(source: RecordSource, path: PathLike) -> int:
    """Write every record from `source` to `path` as JSON.

    Returns the number of records written.

    Raises:
        WriteError: the file could not be written.
    """
    records = source.find_all()
    write_utf8(path, to_json(records) + "\n")
    return len(records)
