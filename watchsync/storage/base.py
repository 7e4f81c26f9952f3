"""
Storage layer interface for persisted record sets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from watchsync.types import Record


class RecordStorage(ABC):
    """
    Storage abstraction for harvested record sets.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """
        Human-readable location of the stored record set.
        """

    @abstractmethod
    def store(self, records: Iterable[Record]) -> int:
        """
        Persist records, replacing any previous content, and return the row count.
        """

    @abstractmethod
    def load(self) -> list[tuple[str, str]]:
        """
        Read back every stored `(id, name)` row.
        """
