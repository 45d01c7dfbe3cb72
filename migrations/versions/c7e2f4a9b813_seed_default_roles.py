"""seed default roles

Revision ID: c7e2f4a9b813
Revises: a3c91e5d7f20
Create Date: 2026-10-19 10:30:00.000000

"""
import uuid

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "c7e2f4a9b813"
down_revision = "a3c91e5d7f20"
branch_labels = None
depends_on = None


def upgrade():
    roles = sa.table(
        "roles",
        sa.column("id", sa.String),
        sa.column("role_type", sa.String),
    )
    op.bulk_insert(
        roles,
        [
            {"id": str(uuid.uuid4()), "role_type": "MEMBER"},
            {"id": str(uuid.uuid4()), "role_type": "EBOARD"},
        ],
    )


def downgrade():
    op.execute(sa.text("DELETE FROM roles WHERE role_type IN ('MEMBER', 'EBOARD')"))
