import csv
import io
from datetime import date

import pytest

from habit_tracker.dashboard import build_dashboard, export_csv, export_filename


class FakeHabit:
    def __init__(self, id, title, frequency="daily", notes=None, done=()):
        self.id = id
        self.title = title
        self.color = "#10B981"
        self.frequency = frequency
        self.notes = notes
        self._done = {date.fromisoformat(s) for s in done}

    def completed_dates(self):
        return set(self._done)


@pytest.fixture
def habits():
    return [
        FakeHabit(1, "Read", done=["2024-01-01", "2024-01-02", "2024-01-03"]),
        FakeHabit(2, "Gym", frequency="weekdays", notes="legs, arms"),
    ]


# -------------------------
# View model
# -------------------------
def test_weekly_view_model(habits):
    view = build_dashboard(habits, date(2024, 1, 3), "weekly")

    assert view["days"][0] == "2024-01-01"
    assert view["days"][-1] == "2024-01-07"

    read, gym = view["habits"]
    assert read["completions"] == [True, True, True, False, False, False, False]
    assert read["goal"] == 7
    assert read["streak"] == 3
    assert read["completion_percentage"] == 43
    assert read["rolling_completion_percentage"] == 10
    assert read["milestone"] is None

    assert gym["goal"] == 5
    assert gym["streak"] == 0
    assert gym["completion_percentage"] == 0

    assert view["daily_totals"][0] == {"date": "2024-01-01", "percentage": 50}
    assert view["summary"] == {"completion_rate": 50, "best_streak": 3}


def test_monthly_view_uses_whole_month(habits):
    view = build_dashboard(habits, date(2024, 2, 10), "monthly")
    assert len(view["days"]) == 29
    assert view["habits"][0]["goal"] == 29
    assert view["habits"][1]["goal"] == 21


def test_chart_covers_trailing_window(habits):
    weekly = build_dashboard(habits, date(2024, 1, 3), "weekly")["chart"]
    assert len(weekly) == 7
    assert weekly[-1] == {"date": "2024-01-03", "label": "Wed", "value": 50}

    monthly = build_dashboard(habits, date(2024, 1, 3), "monthly")["chart"]
    assert len(monthly) == 30
    assert monthly[-1]["label"] == "3"


def test_view_without_habits_is_all_zero():
    view = build_dashboard([], date(2024, 1, 3), "weekly")
    assert view["habits"] == []
    assert view["summary"] == {"completion_rate": 0, "best_streak": 0}
    assert all(t["percentage"] == 0 for t in view["daily_totals"])


def test_unknown_period_is_rejected(habits):
    with pytest.raises(ValueError):
        build_dashboard(habits, date(2024, 1, 3), "daily")


# -------------------------
# CSV export
# -------------------------
def test_export_is_month_granular(habits):
    rows = list(csv.reader(io.StringIO(export_csv(habits, date(2024, 1, 3)))))

    header = rows[0]
    assert header[:2] == ["Habit Title", "Notes"]
    assert header[2] == "2024-01-01"
    assert header[-1] == "2024-01-31"
    assert len(header) == 2 + 31

    read = rows[1]
    assert read[:5] == ["Read", "", "✓", "✓", "✓"]
    assert read[5:] == [""] * 28

    gym = rows[2]
    assert gym[1] == "legs, arms"


def test_export_filename():
    assert export_filename(date(2024, 3, 9)) == "habits_export_2024_03.csv"


# -------------------------
# Endpoints
# -------------------------
def test_dashboard_endpoint(client, register, create_habit):
    headers, _ = register()
    habit = create_habit(headers, title="Read")
    for day in ("2024-01-01", "2024-01-02", "2024-01-03"):
        client.post(f"/api/habits/{habit['id']}/toggle", json={"date": day}, headers=headers)

    resp = client.get("/api/dashboard?period=weekly&date=2024-01-04", headers=headers)
    assert resp.status_code == 200
    view = resp.get_json()
    assert view["reference_date"] == "2024-01-04"
    assert view["habits"][0]["streak"] == 3
    assert view["summary"]["best_streak"] == 3
    assert view["summary"]["completion_rate"] == 0


def test_dashboard_rejects_bad_query(client, register):
    headers, _ = register()
    assert client.get("/api/dashboard?period=yearly", headers=headers).status_code == 400
    assert client.get("/api/dashboard?date=2024-13-01", headers=headers).status_code == 400
    assert client.get("/api/dashboard?date=20240103", headers=headers).status_code == 400
    resp = client.get("/api/dashboard/export?date=2024-W01-3", headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "date must be in YYYY-MM-DD format"


def test_export_endpoint(client, register, create_habit):
    headers, _ = register()
    habit = create_habit(headers, title="Read", notes="nightly")
    client.post(f"/api/habits/{habit['id']}/toggle", json={"date": "2024-01-02"}, headers=headers)

    resp = client.get("/api/dashboard/export?date=2024-01-15", headers=headers)
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "habits_export_2024_01.csv" in resp.headers["Content-Disposition"]

    lines = resp.get_data(as_text=True).splitlines()
    assert lines[0].startswith("Habit Title,Notes,2024-01-01,2024-01-02")
    assert lines[1].startswith("Read,nightly,,✓,")
