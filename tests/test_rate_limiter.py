from __future__ import annotations

from watchsync.rate_limiter import RequestPacer


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_first_request_is_not_delayed() -> None:
    clock = _Clock()
    pacer = RequestPacer(min_interval_seconds=5.0, clock=clock, sleep=clock.sleep)

    assert pacer.wait() == 0.0
    assert clock.sleeps == []


def test_waits_out_the_remaining_interval() -> None:
    clock = _Clock()
    pacer = RequestPacer(min_interval_seconds=5.0, clock=clock, sleep=clock.sleep)

    pacer.wait()
    clock.now += 2.0
    waited = pacer.wait()

    assert waited == 3.0
    assert clock.sleeps == [3.0]


def test_no_wait_once_interval_elapsed() -> None:
    clock = _Clock()
    pacer = RequestPacer(min_interval_seconds=1.0, clock=clock, sleep=clock.sleep)

    pacer.wait()
    clock.now += 1.5
    pacer.wait()

    assert clock.sleeps == []


def test_zero_interval_never_sleeps() -> None:
    clock = _Clock()
    pacer = RequestPacer(min_interval_seconds=-3.0, clock=clock, sleep=clock.sleep)

    for _ in range(3):
        pacer.wait()

    assert pacer.min_interval_seconds == 0.0
    assert clock.sleeps == []
