# backend/habit_tracker/migrate.py
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from . import db

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def alembic_config():
    cfg = AlembicConfig()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    return cfg


def head_revision(cfg=None):
    cfg = cfg or alembic_config()
    return ScriptDirectory.from_config(cfg).get_current_head()


def current_revision(connection):
    return MigrationContext.configure(connection).get_current_revision()


def upgrade_database(app):
    """
    Bring the schema up to the newest revision. Safe to call on every start:
    a database already at head is left untouched.
    """
    # models must be imported so db.metadata is complete for env.py
    from .models import habit, user  # noqa: F401

    cfg = alembic_config()
    head = head_revision(cfg)

    with app.app_context():
        with db.engine.begin() as connection:
            before = current_revision(connection)
            if before == head:
                app.logger.debug(f"[migrate] schema already at {head}")
                return head

            cfg.attributes["connection"] = connection
            cfg.attributes["target_metadata"] = db.metadata
            app.logger.info(f"[migrate] upgrading schema {before or '<empty>'} -> {head}")
            command.upgrade(cfg, "head")

    return head
