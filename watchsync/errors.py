"""
Error types shared by harvest and replay.
"""

from __future__ import annotations


class TransientFetchError(RuntimeError):
    """
    Raised when a fetch attempt yields nothing usable and should be retried.
    """


class DocumentParseError(TransientFetchError):
    """
    Raised when a response body cannot be turned into a document tree.
    """


class PagingParseError(TransientFetchError):
    """
    Raised when the pagination marker text does not have the expected shape.
    """


class RetryExhaustedError(RuntimeError):
    """
    Raised when a bounded retry loop runs out of attempts.
    """

    def __init__(self, message: str, *, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class MalformedRecordError(ValueError):
    """
    Raised when a stored record cannot be replayed.
    """


class RecordFileError(RuntimeError):
    """
    Raised when the record file cannot be read or written.
    """
