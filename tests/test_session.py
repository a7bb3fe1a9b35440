"""
Tests for the drill session controller.
"""

import pytest

from core.errors import EmptyPool, InvalidCategory, InvalidTransition, NotLoaded
from core.session import DrillSession, SessionEvent, SessionPhase, transition


@pytest.fixture
def session(rng, clock):
    return DrillSession(rng=rng, clock=clock)


def _started(session, categories, selection=None, timer_seconds=30, repeat_words=True):
    session.configure(
        selection=selection or {"nouns": 2, "verbs": 1},
        timer_seconds=timer_seconds,
        repeat_words=repeat_words,
    )
    session.start(categories)
    return session


# ---- Transition table ----

@pytest.mark.parametrize("phase,event,expected", [
    (SessionPhase.SETUP, SessionEvent.START, SessionPhase.PLAYING),
    (SessionPhase.PLAYING, SessionEvent.PAUSE, SessionPhase.PAUSED),
    (SessionPhase.PLAYING, SessionEvent.EXPIRE, SessionPhase.FINISHED),
    (SessionPhase.PLAYING, SessionEvent.EXHAUST, SessionPhase.FINISHED),
    (SessionPhase.PLAYING, SessionEvent.FINISH, SessionPhase.FINISHED),
    (SessionPhase.PAUSED, SessionEvent.RESUME, SessionPhase.PLAYING),
    (SessionPhase.PAUSED, SessionEvent.FINISH, SessionPhase.FINISHED),
    (SessionPhase.FINISHED, SessionEvent.START, SessionPhase.PLAYING),
    (SessionPhase.FINISHED, SessionEvent.RESET, SessionPhase.SETUP),
    (SessionPhase.PAUSED, SessionEvent.RESET, SessionPhase.SETUP),
])
def test_legal_transitions(phase, event, expected):
    assert transition(phase, event) == expected


@pytest.mark.parametrize("phase,event", [
    (SessionPhase.SETUP, SessionEvent.PAUSE),
    (SessionPhase.SETUP, SessionEvent.FINISH),
    (SessionPhase.PAUSED, SessionEvent.EXPIRE),
    (SessionPhase.PAUSED, SessionEvent.PAUSE),
    (SessionPhase.FINISHED, SessionEvent.RESUME),
    (SessionPhase.PLAYING, SessionEvent.START),
])
def test_illegal_transitions(phase, event):
    with pytest.raises(InvalidTransition):
        transition(phase, event)


# ---- Setup ----

def test_new_session_uses_defaults(session):
    snapshot = session.snapshot()
    assert snapshot.phase == SessionPhase.SETUP
    assert snapshot.timer_seconds == 30
    assert snapshot.remaining_seconds == 30
    assert snapshot.repeat_words is True
    assert snapshot.current_word is None
    assert snapshot.total_words == 0


def test_configure_updates_timer(session):
    snapshot = session.configure(timer_seconds=120)
    assert snapshot.timer_seconds == 120
    assert snapshot.remaining_seconds == 120


def test_configure_rejects_non_positive_timer(session):
    with pytest.raises(ValueError):
        session.configure(timer_seconds=0)
    assert session.timer_seconds == 30


def test_configure_only_in_setup(session, categories):
    _started(session, categories)
    with pytest.raises(InvalidTransition):
        session.configure(timer_seconds=60)


def test_start_with_empty_selection_leaves_setup_untouched(session, categories):
    with pytest.raises(EmptyPool):
        session.start(categories)
    assert session.phase == SessionPhase.SETUP
    assert session.engine.state is None
    assert len(session.recorder) == 0


def test_start_with_unknown_category(session, categories):
    session.configure(selection={"nouns": 1, "ghost": 2})
    with pytest.raises(InvalidCategory):
        session.start(categories)
    assert session.phase == SessionPhase.SETUP
    assert session.timer.status.value == "stopped"


# ---- Playing ----

def test_start_draws_first_word(session, categories):
    snapshot = _started(session, categories).snapshot()
    assert snapshot.phase == SessionPhase.PLAYING
    assert snapshot.current_word in {"apple", "book", "run"}
    assert snapshot.total_words == 3
    assert snapshot.used_count == 1
    assert snapshot.action_count == 1
    assert session.timer.running


def test_timer_expiry_finishes_session(session, categories):
    _started(session, categories, timer_seconds=10)
    for _ in range(9):
        session.tick()
    assert session.phase == SessionPhase.PLAYING

    snapshot = session.tick()
    assert snapshot.phase == SessionPhase.FINISHED
    assert snapshot.remaining_seconds == 0

    with pytest.raises(InvalidTransition):
        session.draw()
    with pytest.raises(InvalidTransition):
        session.discard()


def test_pause_stops_the_clock(session, categories):
    _started(session, categories, timer_seconds=10)
    session.tick()
    session.pause()
    for _ in range(20):
        session.tick()

    snapshot = session.snapshot()
    assert snapshot.phase == SessionPhase.PAUSED
    assert snapshot.remaining_seconds == 9

    with pytest.raises(InvalidTransition):
        session.draw()

    session.resume()
    session.tick()
    assert session.snapshot().remaining_seconds == 8


def test_toggle_pause_flips_between_playing_and_paused(session, categories):
    _started(session, categories)
    assert session.toggle_pause().phase == SessionPhase.PAUSED
    assert session.toggle_pause().phase == SessionPhase.PLAYING


def test_exhaustion_finishes_session(session, categories):
    _started(session, categories, selection={"verbs": 2}, repeat_words=False)

    session.discard()
    snapshot = session.discard()

    assert snapshot.phase == SessionPhase.FINISHED
    assert snapshot.current_word is None
    assert snapshot.available_count == 0
    assert snapshot.discarded_count == 2
    assert not session.timer.running


def test_repeat_keeps_session_playing(session, categories):
    _started(session, categories, selection={"verbs": 2}, repeat_words=True)
    for _ in range(10):
        snapshot = session.discard()
        assert snapshot.phase == SessionPhase.PLAYING
        assert snapshot.current_word in {"run", "jump"}


def test_finish_early_and_record(session, categories):
    _started(session, categories, timer_seconds=60)
    for _ in range(12):
        session.tick()
    session.discard()
    session.finish()

    record = session.to_record()
    assert record.duration_seconds == 12
    assert record.summary.total_words == 3
    assert record.summary.discarded_count == 1
    assert record.summary.total_actions == 3
    assert record.created_at.tzinfo is not None


def test_record_requires_finished(session, categories):
    _started(session, categories)
    with pytest.raises(InvalidTransition):
        session.to_record()


def test_summary_before_start(session):
    with pytest.raises(NotLoaded):
        session.summary()


def test_play_again_starts_fresh(session, categories):
    _started(session, categories)
    session.discard()
    session.finish()

    snapshot = session.start(categories)
    assert snapshot.phase == SessionPhase.PLAYING
    assert snapshot.action_count == 1
    assert snapshot.discarded_count == 0
    assert snapshot.remaining_seconds == 30


def test_reset_returns_to_setup_keeping_parameters(session, categories):
    _started(session, categories, timer_seconds=40, repeat_words=False)
    session.tick()

    snapshot = session.reset()
    assert snapshot.phase == SessionPhase.SETUP
    assert snapshot.current_word is None
    assert snapshot.total_words == 0
    assert snapshot.action_count == 0
    assert snapshot.remaining_seconds == 40
    assert session.selection == {"nouns": 2, "verbs": 1}
    assert session.repeat_words is False


def test_preset_round_trip_through_session(session, categories):
    session.configure(selection={"nouns": 4, "mixed": 2}, timer_seconds=90, repeat_words=False)
    config = session.to_preset()

    other = DrillSession()
    snapshot = other.apply_preset(config, categories)
    assert other.selection == {"nouns": 4, "mixed": 2}
    assert snapshot.timer_seconds == 90
    assert snapshot.repeat_words is False
