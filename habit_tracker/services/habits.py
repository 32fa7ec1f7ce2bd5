# backend/habit_tracker/services/habits.py
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .. import db
from ..errors import ForbiddenError, NotFoundError, StorageError
from ..models.habit import Habit, HabitEntry


def _commit(action):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"[habits] {action} failed: {e}")
        raise StorageError(f"Failed to {action}")


# -----------------------------
# Ownership guard
# -----------------------------
def get_owned_habit(user_id, habit_id):
    """
    Return the habit if `user_id` owns it.

    Raises NotFoundError when no such habit exists and ForbiddenError when it
    belongs to someone else, so callers can tell the two apart.
    """
    habit = db.session.get(Habit, habit_id)
    if habit is None:
        raise NotFoundError("Habit not found")
    if habit.user_id != user_id:
        current_app.logger.warning(
            f"[habits] user_id={user_id} denied access to habit_id={habit_id}"
        )
        raise ForbiddenError("Forbidden")
    return habit


# -----------------------------
# CRUD
# -----------------------------
def list_habits(user_id):
    return (
        Habit.query.filter_by(user_id=user_id)
        .order_by(Habit.created_at.desc(), Habit.id.desc())
        .all()
    )


def create_habit(user_id, req):
    habit = Habit(user_id=user_id, **req.habit_fields())
    db.session.add(habit)
    _commit("create habit")
    current_app.logger.info(f"[habits] created habit_id={habit.id} for user_id={user_id}")
    return habit


def update_habit(user_id, habit_id, req):
    habit = get_owned_habit(user_id, habit_id)
    for field, value in req.habit_fields().items():
        setattr(habit, field, value)
    _commit("update habit")
    return habit


def delete_habit(user_id, habit_id):
    habit = get_owned_habit(user_id, habit_id)
    db.session.delete(habit)
    _commit("delete habit")
    current_app.logger.info(f"[habits] deleted habit_id={habit_id} for user_id={user_id}")


# -----------------------------
# Toggle
# -----------------------------
def _find_entry(habit_id, day):
    return HabitEntry.query.filter_by(habit_id=habit_id, date=day).first()


def toggle_entry(user_id, habit_id, day):
    """
    Flip the (habit, day) cell: absent -> present inserts an entry, present ->
    absent deletes it. Returns the new completed state.
    """
    habit = get_owned_habit(user_id, habit_id)

    entry = _find_entry(habit.id, day)
    if entry is not None:
        db.session.delete(entry)
        _commit("toggle habit")
        current_app.logger.info(f"[habits] habit_id={habit.id} {day} -> not completed")
        return False

    db.session.add(HabitEntry(habit_id=habit.id, date=day, completed=True))
    try:
        db.session.commit()
    except IntegrityError:
        # a concurrent toggle created the same cell first
        db.session.rollback()
        current_app.logger.warning(
            f"[habits] habit_id={habit.id} {day} already toggled by a concurrent request"
        )
        return True
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"[habits] toggle habit failed: {e}")
        raise StorageError("Failed to toggle habit")

    current_app.logger.info(f"[habits] habit_id={habit.id} {day} -> completed")
    return True
