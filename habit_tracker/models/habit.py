# backend/habit_tracker/models/habit.py
from datetime import datetime
from .. import db

FREQUENCIES = ("daily", "weekly", "weekdays", "weekends")
DEFAULT_COLOR = "#10B981"
DEFAULT_FREQUENCY = "daily"


class Habit(db.Model):
    __tablename__ = "habits"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    color = db.Column(db.String(20), nullable=False, default=DEFAULT_COLOR)
    frequency = db.Column(
        db.Enum(*FREQUENCIES, name="habit_frequency"),
        nullable=False,
        default=DEFAULT_FREQUENCY,
    )
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    user = db.relationship("User", back_populates="habits")
    entries = db.relationship(
        "HabitEntry",
        back_populates="habit",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="HabitEntry.date",
    )

    def completed_dates(self):
        return {e.date for e in self.entries if e.completed}

    def to_dict(self, include_entries=True):
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "frequency": self.frequency,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if include_entries:
            data["entries"] = [e.to_dict() for e in self.entries]
        return data


class HabitEntry(db.Model):
    """One completed (habit, day) cell. A missing row means not completed."""

    __tablename__ = "habit_entries"
    __table_args__ = (
        db.UniqueConstraint("habit_id", "date", name="uq_habit_entries_habit_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    habit_id = db.Column(
        db.Integer, db.ForeignKey("habits.id", ondelete="CASCADE"), nullable=False
    )
    date = db.Column(db.Date, nullable=False)
    completed = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    habit = db.relationship("Habit", back_populates="entries")

    def to_dict(self):
        return {
            "id": self.id,
            "habit_id": self.habit_id,
            "date": self.date.isoformat() if self.date else None,
            "completed": bool(self.completed),
        }
