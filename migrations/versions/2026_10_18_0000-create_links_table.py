"""Create links table

Revision ID: 001_links
Revises: 
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '001_links'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the links table.

    The unique index on name is what rejects duplicate short names, including
    two creates racing on the same name.
    """
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'links' in existing_tables:
        return

    op.create_table(
        'links',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index(
        'ix_links_name',
        'links',
        ['name'],
        unique=True
    )


def downgrade() -> None:
    """Drop the links table and its index."""
    op.drop_index('ix_links_name', table_name='links')
    op.drop_table('links')
