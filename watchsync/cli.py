"""
Dump a kinopoisk.ru watched listing to a file, or replay a dump as watched marks.

Usage:
  watchsync -u 1234567 -c "$COOKIE" -o movies.csv
  watchsync -c "$COOKIE" -i movies.csv
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from collections.abc import Sequence

from watchsync.config import CLASS_MATCH_MODES, WatchSyncSettings, get_watch_sync_settings
from watchsync.errors import MalformedRecordError, RecordFileError, RetryExhaustedError
from watchsync.harvest import HarvestSession
from watchsync.logging_utils import configure_logging, log_event
from watchsync.mutation import MutationClient
from watchsync.rate_limiter import RequestPacer
from watchsync.replay import ReplayDriver
from watchsync.storage import CSVRecordStorage
from watchsync.transport import KinopoiskTransport

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="watchsync",
        description="Dump or replay a kinopoisk.ru watched listing.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-o",
        "--output",
        dest="output",
        default=None,
        help="Path to output file with dumped movies.",
    )
    mode.add_argument(
        "-i",
        "--input",
        dest="input",
        default=None,
        help="Path to file with movies to mark as watched.",
    )
    parser.add_argument(
        "-u",
        "--user-id",
        dest="user_id",
        default=None,
        help="kinopoisk user id (required with --output).",
    )
    parser.add_argument(
        "-c",
        "--cookie",
        dest="cookie",
        default=None,
        help="Cookie header copied from the browser; falls back to WATCHSYNC_COOKIE.",
    )
    parser.add_argument(
        "--max-attempts",
        dest="max_attempts",
        type=int,
        default=None,
        help="Give up on a page after this many attempts (default: retry forever).",
    )
    parser.add_argument(
        "--class-match",
        dest="class_match",
        choices=CLASS_MATCH_MODES,
        default=None,
        help="How class names are matched in page markup.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.output and not args.input:
        parser.print_help()
        return 0
    if args.output and not args.user_id:
        parser.error("--user-id is required with --output")
    if args.max_attempts is not None and args.max_attempts < 1:
        parser.error("--max-attempts must be a positive integer")

    configure_logging()
    settings = _apply_overrides(get_watch_sync_settings(), args)
    transport = KinopoiskTransport(settings=settings, cookie=args.cookie)

    try:
        if args.output:
            payload = _run_harvest(settings, transport, user_id=args.user_id, output=args.output)
        else:
            payload = _run_replay(settings, transport, input_path=args.input)
    except (MalformedRecordError, RecordFileError, RetryExhaustedError) as exc:
        log_event(logger, logging.ERROR, "run_failed", error=str(exc))
        return 1

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def _apply_overrides(settings: WatchSyncSettings, args: argparse.Namespace) -> WatchSyncSettings:
    if args.max_attempts is not None:
        settings = dataclasses.replace(settings, max_fetch_attempts=args.max_attempts)
    if args.class_match is not None:
        markup = dataclasses.replace(settings.markup, class_match=args.class_match)
        settings = dataclasses.replace(settings, markup=markup)
    return settings


def _run_harvest(
    settings: WatchSyncSettings,
    transport: KinopoiskTransport,
    *,
    user_id: str,
    output: str,
) -> dict[str, object]:
    session = HarvestSession(settings=settings, user_id=user_id, transport=transport)
    summary = session.run(storage=CSVRecordStorage(output))
    return dataclasses.asdict(summary)


def _run_replay(
    settings: WatchSyncSettings,
    transport: KinopoiskTransport,
    *,
    input_path: str,
) -> list[dict[str, object]]:
    records = CSVRecordStorage(input_path).load()
    client = MutationClient(transport=transport, url=settings.mutation_url)
    driver = ReplayDriver(
        watch_fn=client.set_watched,
        pacer=RequestPacer(min_interval_seconds=settings.replay_delay_seconds),
    )
    outcomes = driver.replay(records)
    return [dataclasses.asdict(outcome) for outcome in outcomes]


if __name__ == "__main__":
    raise SystemExit(main())
