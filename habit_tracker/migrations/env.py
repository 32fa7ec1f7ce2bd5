# backend/habit_tracker/migrations/env.py
from alembic import context

config = context.config

# upgrade_database() hands over an open connection from the Flask engine
connection = config.attributes["connection"]
target_metadata = config.attributes.get("target_metadata")


def run_migrations_online():
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    raise RuntimeError("offline migrations are not supported; run against a live database")

run_migrations_online()
