"""
Harvest a paginated watched listing into a record store.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from watchsync.config.models import WatchSyncSettings
from watchsync.logging_utils import log_event
from watchsync.parsing import extract_listing, find_listing, read_paging_state
from watchsync.rate_limiter import RequestPacer
from watchsync.retry import fetch_with_retry
from watchsync.storage import RecordStorage, RecordStore
from watchsync.transport import KinopoiskTransport
from watchsync.types import HarvestSummary, PagingState, Record

logger = logging.getLogger(__name__)


class HarvestSession:
    """
    One harvest run for one user; owns the record store it fills.

    Pages are fetched strictly one after another. Every fetch, retries
    included, goes through the pacer, and each page is retried until it
    yields at least one record.
    """

    def __init__(
        self,
        *,
        settings: WatchSyncSettings,
        user_id: str,
        transport: KinopoiskTransport,
        pacer: RequestPacer | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings
        self.user_id = user_id
        self.transport = transport
        self.pacer = pacer or RequestPacer(
            min_interval_seconds=settings.page_delay_seconds,
            sleep=sleep,
        )
        self.sleep = sleep
        self.store = RecordStore()

    def run(self, *, storage: RecordStorage | None = None) -> HarvestSummary:
        """
        Probe the listing geometry, fetch every page, then persist the store once.
        """

        paging = self.probe_paging()
        records_parsed = 0
        for page in range(1, paging.page_count + 1):
            records = self.fetch_page(page)
            records_parsed += self.store.merge(records)
            log_event(
                logger,
                logging.INFO,
                "page_parsed",
                page=page,
                page_count=paging.page_count,
                records=len(records),
                records_stored=self.store.size(),
            )

        output_path = None
        if storage is not None:
            storage.store(self.store)
            output_path = storage.location

        summary = HarvestSummary(
            total_items=paging.total_items,
            page_size=paging.page_size,
            page_count=paging.page_count,
            records_parsed=records_parsed,
            records_stored=self.store.size(),
            output_path=output_path,
        )
        log_event(
            logger,
            logging.INFO,
            "harvest_completed",
            user_id=self.user_id,
            records_parsed=summary.records_parsed,
            records_stored=summary.records_stored,
            output_path=output_path,
        )
        return summary

    def probe_paging(self) -> PagingState:
        """
        Fetch the first page until it reports a non-zero item total.
        """

        url = self.settings.page_url(user_id=self.user_id, page=1)
        log_event(logger, logging.INFO, "probe_attempt", url=url)

        def fetch() -> PagingState:
            self.pacer.wait()
            soup = self.transport.get_document(url)
            return read_paging_state(soup, self.settings.markup)

        paging = fetch_with_retry(
            fetch,
            count=lambda state: state.total_items,
            retry_delay_seconds=self.settings.page_delay_seconds,
            max_attempts=self.settings.max_fetch_attempts,
            sleep=self.sleep,
            label=f"paging_probe {url}",
        )
        log_event(
            logger,
            logging.INFO,
            "paging_detected",
            total_items=paging.total_items,
            page_size=paging.page_size,
            page_count=paging.page_count,
        )
        return paging

    def fetch_page(self, page: int) -> list[Record]:
        """
        Fetch one listing page until it yields at least one record.
        """

        url = self.settings.page_url(user_id=self.user_id, page=page)
        markup = self.settings.markup

        def fetch() -> list[Record]:
            self.pacer.wait()
            soup = self.transport.get_document(url)
            container = find_listing(soup, markup)
            if container is None:
                return []
            return extract_listing(container, markup)

        return fetch_with_retry(
            fetch,
            retry_delay_seconds=self.settings.page_delay_seconds,
            max_attempts=self.settings.max_fetch_attempts,
            sleep=self.sleep,
            label=f"page {page} {url}",
        )
