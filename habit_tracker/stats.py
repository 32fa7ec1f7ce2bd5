# backend/habit_tracker/stats.py
"""
Habit statistics: goals, streaks and completion percentages.

Everything here is a pure function of calendar days and sets of completed
days, so callers decide what "today" is and where the entries come from.
"""
import calendar
from datetime import date, timedelta
from typing import Iterable, List, Optional, Set

STREAK_LIMIT = 365

PERIODS = ("monthly", "weekly")

MILESTONES = (
    (100, "100+ Days"),
    (30, "30+ Days"),
    (7, "7+ Days"),
)


# -------------------------
# Day ranges
# -------------------------
def days_between(start: date, end: date) -> List[date]:
    """Inclusive list of days from start to end (empty if end < start)."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def month_days(ref: date) -> List[date]:
    last = calendar.monthrange(ref.year, ref.month)[1]
    return days_between(ref.replace(day=1), ref.replace(day=last))


def week_days(ref: date) -> List[date]:
    monday = ref - timedelta(days=ref.weekday())
    return days_between(monday, monday + timedelta(days=6))


def trailing_days(ref: date, count: int) -> List[date]:
    return days_between(ref - timedelta(days=count - 1), ref)


def period_days(period: str, ref: date) -> List[date]:
    if period == "monthly":
        return month_days(ref)
    if period == "weekly":
        return week_days(ref)
    raise ValueError(f"unknown period: {period!r}")


# -------------------------
# Arithmetic
# -------------------------
def percent(part: int, whole: int) -> int:
    """round(100 * part / whole) with halves rounded up; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def habit_goal(frequency: str, days: List[date]) -> int:
    n = len(days)
    if frequency == "daily":
        return n
    if frequency == "weekly":
        return -(-n // 7)
    if frequency == "weekdays":
        return sum(1 for d in days if d.weekday() < 5)
    if frequency == "weekends":
        return sum(1 for d in days if d.weekday() >= 5)
    raise ValueError(f"unknown frequency: {frequency!r}")


# -------------------------
# Streaks
# -------------------------
def habit_streak(completed: Set[date], ref: date, limit: int = STREAK_LIMIT) -> int:
    """
    Consecutive completed days ending at ref, or at the day before ref when
    ref itself is not completed yet. Never counts more than `limit` days.
    """
    cursor = ref if ref in completed else ref - timedelta(days=1)
    streak = 0
    while streak < limit and cursor in completed:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def best_streak(completed_sets: Iterable[Set[date]], ref: date, limit: int = STREAK_LIMIT) -> int:
    return max((habit_streak(c, ref, limit) for c in completed_sets), default=0)


def streak_milestone(streak: int) -> Optional[str]:
    for threshold, label in MILESTONES:
        if streak >= threshold:
            return label
    return None


# -------------------------
# Completion rates
# -------------------------
def completion_percentage(completed: Set[date], days: List[date]) -> int:
    hits = sum(1 for d in days if d in completed)
    return percent(hits, len(days))


def daily_percentage(completed_sets: List[Set[date]], day: date) -> int:
    done = sum(1 for c in completed_sets if day in c)
    return percent(done, len(completed_sets))
