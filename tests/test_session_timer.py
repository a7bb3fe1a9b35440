import pytest

from core.errors import InvalidTransition
from core.session_timer import SessionTimer, TimerStatus


def test_countdown_expires_exactly_once():
    fired = []
    timer = SessionTimer(30)
    timer.subscribe(lambda: fired.append(timer.remaining))
    timer.start()

    results = [timer.tick() for _ in range(29)]
    assert not any(results)
    assert timer.remaining == 1

    assert timer.tick() is True
    assert timer.expired
    assert fired == [0]

    # Further ticks are ignored and never go below zero
    assert timer.tick() is False
    assert timer.remaining == 0
    assert fired == [0]
    assert timer.elapsed == 30


def test_ticks_ignored_unless_running():
    timer = SessionTimer(10)
    timer.tick()
    assert timer.remaining == 10

    timer.start()
    timer.tick()
    timer.pause()
    timer.tick()
    timer.tick()
    assert timer.remaining == 9
    assert timer.status == TimerStatus.PAUSED

    timer.resume()
    timer.tick()
    assert timer.remaining == 8
    assert timer.elapsed == 2


def test_reset_rewinds_and_accepts_new_duration():
    timer = SessionTimer(20)
    timer.start()
    timer.tick()

    timer.reset()
    assert timer.remaining == 20
    assert timer.status == TimerStatus.STOPPED

    timer.reset(60)
    assert timer.duration == 60
    assert timer.remaining == 60


@pytest.mark.parametrize("duration", [0, -5])
def test_non_positive_duration_rejected(duration):
    with pytest.raises(ValueError):
        SessionTimer(duration)


def test_reset_rejects_non_positive_duration():
    timer = SessionTimer(10)
    with pytest.raises(ValueError):
        timer.reset(0)
    assert timer.duration == 10


def test_illegal_timer_transitions():
    timer = SessionTimer(10)
    with pytest.raises(InvalidTransition):
        timer.pause()
    with pytest.raises(InvalidTransition):
        timer.resume()

    timer.start()
    with pytest.raises(InvalidTransition):
        timer.start()
    with pytest.raises(InvalidTransition):
        timer.resume()


def test_expired_timer_cannot_resume():
    timer = SessionTimer(1)
    timer.start()
    timer.tick()
    with pytest.raises(InvalidTransition):
        timer.resume()
    with pytest.raises(InvalidTransition):
        timer.pause()
