"""initial_durable_region

Create the cells (fixed-width counters) and posts (id -> encoded post) tables.

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Stores opened with auto_migrate may already hold these tables
    existing = set(sa.inspect(op.get_bind()).get_table_names())

    # CELLS
    if "cells" not in existing:
        op.create_table(
            "cells",
            sa.Column("slot", sa.String(64), nullable=False),
            sa.Column("value", sa.LargeBinary(8), nullable=False),
            sa.PrimaryKeyConstraint("slot"),
        )

    # POSTS
    if "posts" not in existing:
        op.create_table(
            "posts",
            sa.Column("key", sa.LargeBinary(8), nullable=False),
            sa.Column("value", sa.LargeBinary(), nullable=False),
            sa.PrimaryKeyConstraint("key"),
        )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("posts")
    op.drop_table("cells")
