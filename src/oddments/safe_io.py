"""Whole-file UTF-8 read/write that fail with the package's own errors."""

from __future__ import annotations
from pathlib import Path
from typing import Union

from .errors import ReadError, WriteError


PathLike = Union[str, Path]


def read_utf8(path: PathLike) -> str:
    """Read the full file as UTF-8 text.

    Raises:
        ReadError: the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise ReadError("Failed to read file") from ex


def write_utf8(path: PathLike, text: str) -> None:
    """Overwrite the file with `text`, creating parent directories if needed.

    Raises:
        WriteError: the directory or file cannot be written.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" as-is on every platform
        with open(target, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as ex:
        raise WriteError("Failed to write file") from ex
