from __future__ import annotations

import pytest

from watchsync.errors import MalformedRecordError
from watchsync.replay import ReplayDriver, parse_record_id
from watchsync.types import ReplayOutcome


class _CountingPacer:
    def __init__(self) -> None:
        self.waits = 0

    def wait(self) -> float:
        self.waits += 1
        return 0.0


def test_replays_every_record_in_order_and_continues_after_failures() -> None:
    called: list[int] = []

    def watch(record_id: int) -> bool:
        called.append(record_id)
        return record_id != 326

    pacer = _CountingPacer()
    driver = ReplayDriver(watch_fn=watch, pacer=pacer)

    outcomes = driver.replay([("535341", "Inception"), ("326", "Shawshank"), ("448", "Forrest Gump")])

    assert called == [535341, 326, 448]
    assert outcomes == [
        ReplayOutcome(record_id=535341, name="Inception", watched=True),
        ReplayOutcome(record_id=326, name="Shawshank", watched=False),
        ReplayOutcome(record_id=448, name="Forrest Gump", watched=True),
    ]
    assert pacer.waits == 3


def test_non_numeric_id_aborts_the_run() -> None:
    called: list[int] = []

    def watch(record_id: int) -> bool:
        called.append(record_id)
        return True

    driver = ReplayDriver(watch_fn=watch, pacer=_CountingPacer())

    with pytest.raises(MalformedRecordError):
        driver.replay([("1", "A"), ("tt0111161", "B"), ("3", "C")])

    assert called == [1]


def test_empty_record_set() -> None:
    driver = ReplayDriver(watch_fn=lambda _: True, pacer=_CountingPacer())

    assert driver.replay([]) == []


def test_parse_record_id() -> None:
    assert parse_record_id("535341", position=1) == 535341
    with pytest.raises(MalformedRecordError, match="Record 2"):
        parse_record_id("abc", position=2)


@pytest.mark.parametrize("raw_id", ["1_000", " 12 ", "١٢", "", "12.0"])
def test_parse_record_id_accepts_only_ascii_digits(raw_id: str) -> None:
    with pytest.raises(MalformedRecordError):
        parse_record_id(raw_id, position=1)


def test_underscored_id_aborts_before_any_call() -> None:
    called: list[int] = []

    def watch(record_id: int) -> bool:
        called.append(record_id)
        return True

    driver = ReplayDriver(watch_fn=watch, pacer=_CountingPacer())

    with pytest.raises(MalformedRecordError):
        driver.replay([("1_000", "A"), (" 12 ", "B")])

    assert called == []
