"""
Semicolon-delimited record files.

Two columns per row, `id;name`, no header. Semicolons keep names that
contain commas unquoted in the common case.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from watchsync.errors import MalformedRecordError, RecordFileError
from watchsync.storage.base import RecordStorage
from watchsync.types import Record

FIELD_DELIMITER = ";"
ENCODING = "utf-8"


def write_rows(stream: TextIO, records: Iterable[Record]) -> int:
    writer = csv.writer(stream, delimiter=FIELD_DELIMITER, lineterminator="\n")
    written = 0
    for record in records:
        writer.writerow([record.id, record.name])
        written += 1
    return written


def read_rows(stream: TextIO) -> list[tuple[str, str]]:
    """
    Read `(id, name)` rows; blank lines are skipped, short rows are malformed.
    """

    rows: list[tuple[str, str]] = []
    reader = csv.reader(stream, delimiter=FIELD_DELIMITER)
    for row in reader:
        if not row:
            continue
        if len(row) < 2:
            raise MalformedRecordError(
                f"Line {reader.line_num}: expected 'id{FIELD_DELIMITER}name', got {row!r}"
            )
        rows.append((row[0], row[1]))
    return rows


def serialize(records: Iterable[Record]) -> bytes:
    buffer = io.StringIO()
    write_rows(buffer, records)
    return buffer.getvalue().encode(ENCODING)


def deserialize(data: bytes) -> list[tuple[str, str]]:
    return read_rows(io.StringIO(data.decode("utf-8-sig"), newline=""))


class CSVRecordStorage(RecordStorage):
    """
    Persist record sets to a semicolon-delimited file.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def location(self) -> str:
        return str(self._path)

    def store(self, records: Iterable[Record]) -> int:
        try:
            with self._path.open("w", encoding=ENCODING, newline="") as handle:
                return write_rows(handle, records)
        except OSError as exc:
            raise RecordFileError(f"Cannot write record file {self._path}: {exc}") from exc

    def load(self) -> list[tuple[str, str]]:
        try:
            with self._path.open("r", encoding="utf-8-sig", newline="") as handle:
                return read_rows(handle)
        except OSError as exc:
            raise RecordFileError(f"Cannot read record file {self._path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise RecordFileError(f"Record file {self._path} must be UTF-8 encoded.") from exc
        except csv.Error as exc:
            raise RecordFileError(f"Invalid record file {self._path}: {exc}") from exc
