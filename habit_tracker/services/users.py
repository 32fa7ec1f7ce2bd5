# backend/habit_tracker/services/users.py
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .. import db
from ..errors import AuthError, ConflictError, StorageError
from ..models.user import User


def register_user(req):
    if User.query.filter_by(email=req.email).first():
        raise ConflictError("Email already exists", status_code=400)

    user = User(name=req.name, email=req.email)
    user.set_password(req.password)

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # lost a race against another registration with the same email
        db.session.rollback()
        raise ConflictError("Email already exists", status_code=400)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Registration Error: {e}")
        raise StorageError("Internal server error")

    current_app.logger.info(f"[auth/register] created user_id={user.id}")
    return user


def authenticate(req):
    user = User.query.filter_by(email=req.email).first()

    if not user:
        current_app.logger.info(f"[auth/login] user NOT found for '{req.email}'")
        raise AuthError("Invalid credentials", status_code=400)

    if not user.check_password(req.password):
        current_app.logger.info(f"[auth/login] bad password for user_id={user.id}")
        raise AuthError("Invalid credentials", status_code=400)

    return user
