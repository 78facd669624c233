"""Catalog records and their one-line text form.

A record is stored as a single CSV-like line:
    <id>,<name>,<category>,<description>

Example:
    id-1,Sky Spoon,Tools,"Scoops clouds, mostly"

Design notes:
- A field is quoted only when it contains a comma, a quote or a line break;
  quotes inside a quoted field are doubled.
- `parse_line` never raises. A short line comes back with fewer than four
  fields and the caller decides what to do with it.
- Line breaks inside quoted values are quoted on write but are NOT protected
  when the file is later split into lines. One record per physical line is
  assumed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence


HEADER = "ID,Name,Category,Description"
FIELD_COUNT = 4

_NEEDS_QUOTES = (",", '"', "\n", "\r")


@dataclass(frozen=True, eq=False)
class Record:
    """One catalog entry. Two records are equal when their ids are equal."""
    id: str
    name: str = ""
    category: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("id is required")
        rid = self.id.strip()
        if not rid:
            raise ValueError("id cannot be empty")
        object.__setattr__(self, "id", rid)
        for name in ("name", "category", "description"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value or "").strip())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def fields(self) -> list[str]:
        return [self.id, self.name, self.category, self.description]


def escape_field(value: Optional[str]) -> str:
    """Render one field value, quoting it when needed."""
    if value is None:
        return ""
    if any(ch in value for ch in _NEEDS_QUOTES):
        return '"' + value.replace('"', '""') + '"'
    return value


def render_record(r: Record) -> str:
    """Render a Record to its line form (no trailing newline)."""
    return ",".join(escape_field(v) for v in r.fields())


def parse_line(line: str) -> list[str]:
    """Split one line into raw field values.

    Inside quotes, ``""`` is a literal quote and any other quote closes the
    quoted span. Outside quotes, a comma ends the field. Quoted and unquoted
    segments may be mixed within one field.
    """
    out: list[str] = []
    cur: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < n and line[i + 1] == '"':
                    cur.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                cur.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            out.append("".join(cur))
            cur = []
        else:
            cur.append(ch)
        i += 1
    out.append("".join(cur))
    return out


def record_from_fields(fields: Sequence[str]) -> Record:
    """Build a Record from parsed fields; extra trailing fields are ignored.

    Raises:
        ValueError: fewer than four fields, or an empty id.
    """
    if len(fields) < FIELD_COUNT:
        raise ValueError(f"expected {FIELD_COUNT} fields, got {len(fields)}")
    return Record(fields[0], fields[1], fields[2], fields[3])


def is_header(line: str) -> bool:
    return line[: len(HEADER)].lower() == HEADER.lower()
