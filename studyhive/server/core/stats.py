# studyhive/server/core/stats.py

from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

from studyhive.server.core.timeutil import parse_iso


STREAK_WINDOW = timedelta(days=7)
MAX_STREAK = 7


def session_xp(duration: int) -> int:
    """
    XP for a logged study session: 10 XP per completed 10-minute block.
    """
    return (max(duration, 0) // 10) * 10


def format_hours(total_minutes: int | float) -> str:
    """
    Hours to one decimal, rounding the exact binary value half up:
    15 minutes (0.25 h) gives "0.3", 21 minutes (0.35 h, stored as
    0.34999...) gives "0.3".
    """
    hours = Decimal(total_minutes / 60)
    return str(hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def study_streak(sessions: list[dict], now: datetime | None = None) -> int:
    now = now or datetime.now(timezone.utc)
    cutoff = now - STREAK_WINDOW
    recent = sum(1 for s in sessions if s.get("date") and parse_iso(s["date"]) > cutoff)
    return min(recent, MAX_STREAK)


def study_data(sessions: list[dict], deadlines: list[dict], now: datetime | None = None) -> dict:
    """
    Dashboard aggregates for one user.

    Works on wire-format records (camelCase keys) so that the API and the
    client-side mirror compute the same numbers from the same shapes.
    """
    total_minutes = sum(s.get("duration") or 0 for s in sessions)
    return {
        "totalXP": sum(s.get("xpEarned") or 0 for s in sessions),
        "studyStreak": study_streak(sessions, now),
        "hoursStudied": format_hours(total_minutes),
        "goalsCompleted": sum(1 for d in deadlines if d.get("completed")),
    }
