from core.chrono import CountdownTimer


def _record(timer):
    ticks, expiries = [], []
    timer.tick.connect(ticks.append)
    timer.expired.connect(lambda: expiries.append(True))
    return ticks, expiries


def test_counts_down_and_expires_once():
    timer = CountdownTimer()
    ticks, expiries = _record(timer)

    timer.start(3)
    for _ in range(5):
        timer._on_timeout()

    assert ticks == [2, 1, 0]
    assert expiries == [True]
    assert not timer.is_active


def test_start_replaces_running_countdown():
    timer = CountdownTimer()
    ticks, expiries = _record(timer)

    timer.start(10)
    timer._on_timeout()
    timer.start(2)
    timer._on_timeout()
    timer._on_timeout()
    timer._on_timeout()

    assert ticks == [9, 1, 0]
    assert expiries == [True]


def test_cancel_is_idempotent():
    timer = CountdownTimer()
    timer.cancel()
    timer.start(5)
    timer.cancel()
    timer.cancel()

    assert not timer.is_active
    assert timer.remaining == 5


def test_timeout_after_cancel_is_ignored():
    timer = CountdownTimer()
    ticks, expiries = _record(timer)

    timer.start(1)
    timer.cancel()
    timer._on_timeout()

    assert ticks == []
    assert expiries == []
