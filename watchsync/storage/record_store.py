"""
In-memory deduplicating record accumulator.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from watchsync.types import Record


class RecordStore:
    """
    Maps record id to display name; a repeated id overwrites the name.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._names: dict[str, str] = {}
        self.merge(records)

    def merge(self, records: Iterable[Record]) -> int:
        """
        Insert or overwrite each record and return how many were seen.
        """

        seen = 0
        for record in records:
            self._names[record.id] = record.name
            seen += 1
        return seen

    def size(self) -> int:
        return len(self._names)

    def get(self, record_id: str) -> str | None:
        return self._names.get(record_id)

    def items(self) -> list[tuple[str, str]]:
        return list(self._names.items())

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._names

    def __iter__(self) -> Iterator[Record]:
        for record_id, name in self._names.items():
            yield Record(id=record_id, name=name)
