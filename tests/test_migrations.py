from sqlalchemy import inspect

from habit_tracker import db
from habit_tracker.migrate import current_revision, head_revision, upgrade_database


def test_schema_is_at_head_after_startup(app):
    with app.app_context():
        with db.engine.connect() as conn:
            assert current_revision(conn) == head_revision() == "0002_habit_notes"


def test_upgrade_is_idempotent(app):
    assert upgrade_database(app) == "0002_habit_notes"
    assert upgrade_database(app) == "0002_habit_notes"


def test_tables_and_constraints(app):
    with app.app_context():
        insp = inspect(db.engine)
        assert {"users", "habits", "habit_entries"} <= set(insp.get_table_names())
        assert "notes" in {c["name"] for c in insp.get_columns("habits")}

        uniques = insp.get_unique_constraints("habit_entries")
        assert any(u["column_names"] == ["habit_id", "date"] for u in uniques)

        fks = insp.get_foreign_keys("habit_entries")
        assert fks[0]["referred_table"] == "habits"
        assert fks[0]["options"].get("ondelete") == "CASCADE"
