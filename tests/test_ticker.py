import pytest

from ticker import IntervalTicker


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_not_running_until_started():
    counter = Counter()
    ticker = IntervalTicker(counter)
    assert ticker.advance(1000) == 0
    assert counter.calls == 0


def test_fires_once_per_interval():
    counter = Counter()
    ticker = IntervalTicker(counter)
    ticker.start(100)

    assert ticker.advance(99) == 0
    assert ticker.advance(1) == 1
    assert ticker.advance(100) == 1
    assert counter.calls == 2
    assert ticker.elapsed == 0


def test_stalled_frame_fires_only_once():
    counter = Counter()
    ticker = IntervalTicker(counter)
    ticker.start(100)

    # Кадр подвис на секунду - всё равно один шаг
    assert ticker.advance(1000) == 1
    assert counter.calls == 1
    assert ticker.elapsed == 0

    assert ticker.advance(99) == 0
    assert ticker.advance(1) == 1


def test_restart_drops_partial_interval():
    counter = Counter()
    ticker = IntervalTicker(counter)
    ticker.start(100)
    ticker.advance(90)

    ticker.start(50)
    assert ticker.advance(40) == 0
    assert ticker.advance(10) == 1


def test_stop_is_idempotent():
    ticker = IntervalTicker(Counter())
    ticker.start(10)
    ticker.stop()
    ticker.stop()
    assert not ticker.running
    assert ticker.advance(100) == 0


def test_callback_stopping_ticker_ends_advance():
    ticker = None

    def once():
        ticker.stop()

    ticker = IntervalTicker(once)
    ticker.start(10)
    assert ticker.advance(100) == 1
    assert not ticker.running


def test_interval_must_be_positive():
    ticker = IntervalTicker(Counter())
    with pytest.raises(ValueError):
        ticker.start(0)
