"""
Shared runtime data models for harvest and replay.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Record:
    """
    One watched item: external identifier and display name.
    """

    id: str
    name: str


@dataclass(frozen=True)
class PagingState:
    """
    Listing geometry discovered from the first page.
    """

    total_items: int
    page_size: int
    page_count: int


@dataclass(frozen=True)
class FetchAttempt(Generic[T]):
    """
    Outcome of one fetch+parse+extract cycle.

    Exactly one of `result` / `error` is meaningful: `succeeded` tells which.
    """

    attempt_number: int
    succeeded: bool
    result: T | None = None
    error: str | None = None


@dataclass(frozen=True)
class HarvestSummary:
    """
    Summary for one harvest run.
    """

    total_items: int
    page_size: int
    page_count: int
    records_parsed: int
    records_stored: int
    output_path: str | None = None


@dataclass(frozen=True)
class ReplayOutcome:
    """
    Result of marking one stored record as watched.
    """

    record_id: int
    name: str
    watched: bool
