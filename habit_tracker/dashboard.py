# backend/habit_tracker/dashboard.py
import csv
import io

from . import stats

CHECK_MARK = "✓"
ROLLING_WINDOW_DAYS = 30
CHART_WINDOW_DAYS = {"weekly": 7, "monthly": 30}


def _chart_label(period, day):
    return day.strftime("%a") if period == "weekly" else str(day.day)


def build_dashboard(habits, ref, period="monthly", streak_limit=stats.STREAK_LIMIT):
    """
    View model for the habit grid and the stats widgets.

    `habits` are Habit rows (anything with id/title/color/frequency/notes and
    completed_dates()); `ref` is the day the user is looking at.
    """
    days = stats.period_days(period, ref)
    completed = [h.completed_dates() for h in habits]
    rolling = stats.trailing_days(ref, ROLLING_WINDOW_DAYS)

    rows = []
    for habit, done in zip(habits, completed):
        streak = stats.habit_streak(done, ref, streak_limit)
        rows.append(
            {
                "id": habit.id,
                "title": habit.title,
                "color": habit.color,
                "frequency": habit.frequency,
                "notes": habit.notes,
                "completions": [d in done for d in days],
                "goal": stats.habit_goal(habit.frequency, days),
                "streak": streak,
                "milestone": stats.streak_milestone(streak),
                "completion_percentage": stats.completion_percentage(done, days),
                "rolling_completion_percentage": stats.completion_percentage(done, rolling),
            }
        )

    chart = [
        {
            "date": d.isoformat(),
            "label": _chart_label(period, d),
            "value": stats.daily_percentage(completed, d),
        }
        for d in stats.trailing_days(ref, CHART_WINDOW_DAYS[period])
    ]

    return {
        "period": period,
        "reference_date": ref.isoformat(),
        "days": [d.isoformat() for d in days],
        "habits": rows,
        "daily_totals": [
            {"date": d.isoformat(), "percentage": stats.daily_percentage(completed, d)}
            for d in days
        ],
        "summary": {
            "completion_rate": stats.daily_percentage(completed, ref),
            "best_streak": stats.best_streak(completed, ref, streak_limit),
        },
        "chart": chart,
    }


# -------------------------
# CSV export (always one calendar month)
# -------------------------
def export_csv(habits, ref):
    days = stats.month_days(ref)

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["Habit Title", "Notes"] + [d.isoformat() for d in days])
    for habit in habits:
        done = habit.completed_dates()
        writer.writerow(
            [habit.title, habit.notes or ""]
            + [CHECK_MARK if d in done else "" for d in days]
        )
    return buf.getvalue()


def export_filename(ref):
    return f"habits_export_{ref.strftime('%Y_%m')}.csv"
