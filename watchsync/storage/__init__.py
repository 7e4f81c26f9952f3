"""
Storage layer exports.
"""

from watchsync.storage.base import RecordStorage
from watchsync.storage.csv_storage import CSVRecordStorage, deserialize, serialize
from watchsync.storage.record_store import RecordStore

__all__ = ["CSVRecordStorage", "RecordStorage", "RecordStore", "deserialize", "serialize"]
