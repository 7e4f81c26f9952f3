"""
Replay a stored record set as MovieSetWatched mutations.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from watchsync.errors import MalformedRecordError
from watchsync.logging_utils import log_event
from watchsync.rate_limiter import RequestPacer
from watchsync.types import ReplayOutcome

logger = logging.getLogger(__name__)

_RECORD_ID = re.compile(r"[+-]?[0-9]+")


def parse_record_id(raw_id: str, *, position: int) -> int:
    if not _RECORD_ID.fullmatch(raw_id):
        raise MalformedRecordError(f"Record {position}: id {raw_id!r} is not an integer.")
    return int(raw_id)


class ReplayDriver:
    """
    Marks stored records as watched, one call at a time.

    A failed mutation is reported and skipped; a record with a non-numeric id
    stops the whole run.
    """

    def __init__(
        self,
        *,
        watch_fn: Callable[[int], bool],
        pacer: RequestPacer,
    ) -> None:
        self._watch_fn = watch_fn
        self._pacer = pacer

    def replay(self, records: Iterable[tuple[str, str]]) -> list[ReplayOutcome]:
        outcomes: list[ReplayOutcome] = []
        for position, (raw_id, name) in enumerate(records, start=1):
            try:
                record_id = parse_record_id(raw_id, position=position)
            except MalformedRecordError as exc:
                log_event(
                    logger,
                    logging.ERROR,
                    "replay_aborted",
                    position=position,
                    name=name,
                    error=str(exc),
                )
                raise

            self._pacer.wait()
            watched = bool(self._watch_fn(record_id))
            log_event(
                logger,
                logging.INFO if watched else logging.WARNING,
                "record_set_watched" if watched else "record_not_set_watched",
                record_id=record_id,
                name=name,
            )
            outcomes.append(ReplayOutcome(record_id=record_id, name=name, watched=watched))
        return outcomes
