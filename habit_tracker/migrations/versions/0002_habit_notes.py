"""add free-text notes to habits

Revision ID: 0002_habit_notes
Revises: 0001_initial
Create Date: 2024-02-01
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0002_habit_notes"
down_revision = "0001_initial"
branch_labels = None
depends_on = None


def upgrade():
    op.add_column("habits", sa.Column("notes", sa.Text(), nullable=True))


def downgrade():
    with op.batch_alter_table("habits") as batch_op:
        batch_op.drop_column("notes")
