from datetime import datetime, timedelta, timezone

from core.analytics import WEEKDAY_LABELS, build_owner_statistics, build_statistics
from core.schemas import SessionRecord, SessionSummary

# Wednesday
NOW = datetime(2026, 3, 4, 15, 0, tzinfo=timezone.utc)


def _record(used, duration, created_at):
    return SessionRecord(
        summary=SessionSummary(total_words=20, used_count=used, discarded_count=0, total_actions=used),
        duration_seconds=duration,
        created_at=created_at,
    )


def test_empty_history():
    stats = build_statistics([], now=NOW)
    assert stats.total_games == 0
    assert stats.total_words == 0
    assert stats.average_words_per_game == 0
    assert stats.total_play_minutes == 0
    assert stats.games_this_week == 0
    assert stats.streak == 0
    assert list(stats.games_per_weekday.index) == WEEKDAY_LABELS
    assert stats.games_per_weekday.sum() == 0


def test_totals_and_averages():
    records = [
        _record(4, 60, NOW - timedelta(hours=1)),
        _record(7, 90, NOW - timedelta(days=1)),
        _record(6, 30, NOW - timedelta(days=20)),
    ]
    stats = build_statistics(records, now=NOW)
    assert stats.total_games == 3
    assert stats.total_words == 17
    assert stats.average_words_per_game == 6
    assert stats.total_play_minutes == 3
    assert stats.games_this_week == 2


def test_games_per_weekday_covers_last_seven_days():
    records = [
        _record(1, 30, NOW - timedelta(hours=2)),   # Wed
        _record(1, 30, NOW - timedelta(hours=3)),   # Wed
        _record(1, 30, NOW - timedelta(days=2)),    # Mon
        _record(1, 30, NOW - timedelta(days=10)),   # outside the window
    ]
    per_day = build_statistics(records, now=NOW).games_per_weekday
    assert per_day["Wed"] == 2
    assert per_day["Mon"] == 1
    assert per_day.sum() == 3


def test_streak_counts_consecutive_days():
    records = [
        _record(1, 30, NOW),
        _record(1, 30, NOW - timedelta(days=1)),
        _record(1, 30, NOW - timedelta(days=2)),
        _record(1, 30, NOW - timedelta(days=4)),
    ]
    assert build_statistics(records, now=NOW).streak == 3


def test_streak_may_end_yesterday():
    records = [
        _record(1, 30, NOW - timedelta(days=1)),
        _record(1, 30, NOW - timedelta(days=2)),
    ]
    assert build_statistics(records, now=NOW).streak == 2


def test_streak_broken_before_yesterday():
    records = [_record(1, 30, NOW - timedelta(days=3))]
    assert build_statistics(records, now=NOW).streak == 0


def test_owner_statistics_read_from_store(stores):
    stores.history.save("alice", _record(5, 120, NOW - timedelta(hours=1)))
    stores.history.save("bob", _record(9, 60, NOW - timedelta(hours=1)))

    stats = build_owner_statistics(stores.history, "alice", now=NOW)
    assert stats.total_games == 1
    assert stats.total_words == 5
    assert stats.total_play_minutes == 2


def test_halves_round_up():
    records = [
        _record(2, 75, NOW - timedelta(hours=1)),
        _record(3, 75, NOW - timedelta(hours=2)),
    ]
    stats = build_statistics(records, now=NOW)
    assert stats.average_words_per_game == 3
    assert stats.total_play_minutes == 3


def test_recent_activity_lists_newest_five():
    records = [_record(i, 90 + i * 60, NOW - timedelta(days=i)) for i in range(7)]
    recent = build_statistics(records, now=NOW).recent_activity

    assert [game.words_used for game in recent] == [0, 1, 2, 3, 4]
    # 90s rounds up to 2 minutes, 150s to 3
    assert [game.minutes for game in recent] == [2, 3, 4, 5, 6]
    assert recent[0].created_at == NOW
    assert recent[1].created_at.date() == (NOW - timedelta(days=1)).date()


def test_achievements_from_totals_and_streak():
    records = [_record(15, 60, NOW - timedelta(days=i)) for i in range(7)]
    achievements = {a.name: a.earned for a in build_statistics(records, now=NOW).achievements}
    assert achievements == {
        "First Game": True,
        "Word Master": True,
        "Consistent Player": True,
    }


def test_achievements_not_yet_earned():
    records = [_record(99, 60, NOW - timedelta(days=i)) for i in (0, 1, 3)]
    achievements = {a.name: a.earned for a in build_statistics(records, now=NOW).achievements}
    assert achievements["First Game"] is True
    assert achievements["Word Master"] is True
    assert achievements["Consistent Player"] is False

    single = build_statistics([_record(99, 60, NOW)], now=NOW)
    assert {a.name: a.earned for a in single.achievements}["Word Master"] is False


def test_empty_history_has_no_activity_or_achievements():
    stats = build_statistics([], now=NOW)
    assert stats.recent_activity == []
    assert not any(a.earned for a in stats.achievements)
    assert len(stats.achievements) == 3
