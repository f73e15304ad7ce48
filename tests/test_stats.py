from datetime import datetime, timedelta, timezone

import pytest

from studyhive.server.core.stats import format_hours, session_xp, study_data, study_streak
from studyhive.server.core.timeutil import to_iso


NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


def days_ago(days):
    return to_iso(NOW - timedelta(days=days))


@pytest.mark.parametrize("minutes, xp", [(0, 0), (9, 0), (10, 10), (25, 20), (120, 120)])
def test_session_xp_counts_full_ten_minute_blocks(minutes, xp):
    assert session_xp(minutes) == xp


@pytest.mark.parametrize("minutes, text", [(0, "0.0"), (15, "0.3"), (21, "0.3"), (27, "0.5"), (90, "1.5"), (125, "2.1")])
def test_format_hours(minutes, text):
    assert format_hours(minutes) == text


def test_streak_counts_last_seven_days_only():
    sessions = [{"date": days_ago(1)}, {"date": days_ago(6)}, {"date": days_ago(8)}]
    assert study_streak(sessions, NOW) == 2


def test_streak_is_capped():
    sessions = [{"date": days_ago(0)} for _ in range(12)]
    assert study_streak(sessions, NOW) == 7


def test_study_data():
    sessions = [
        {"duration": 60, "xpEarned": 60, "date": days_ago(2)},
        {"duration": 45, "xpEarned": 40, "date": days_ago(30)},
    ]
    deadlines = [{"completed": True}, {"completed": False}, {"completed": True}]

    assert study_data(sessions, deadlines, NOW) == {
        "totalXP": 100,
        "studyStreak": 1,
        "hoursStudied": "1.8",
        "goalsCompleted": 2,
    }


def test_study_data_empty():
    assert study_data([], [], NOW) == {
        "totalXP": 0,
        "studyStreak": 0,
        "hoursStudied": "0.0",
        "goalsCompleted": 0,
    }
