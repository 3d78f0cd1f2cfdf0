"""Create collections and fields metadata tables.

Revision ID: 001_field_metadata
Revises:
Create Date: 2026-10-19

collections holds the named groupings; fields holds one row per field
definition, unique per (collection, field).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_field_metadata'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'collections',
        sa.Column('name', sa.String(64), primary_key=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'fields',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'collection', sa.String(64),
            sa.ForeignKey('collections.name', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('field', sa.String(64), nullable=False),
        sa.Column('type', sa.String(32), nullable=False),
        sa.Column('interface', sa.String(64), nullable=True),
        sa.Column('options', sa.JSON(), nullable=True),
        sa.Column('required', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('readonly', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('hidden', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('sort', sa.Integer(), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('collection', 'field', name='uq_fields_collection_field'),
    )
    op.create_index('ix_fields_collection', 'fields', ['collection'])


def downgrade() -> None:
    op.drop_index('ix_fields_collection', table_name='fields')
    op.drop_table('fields')
    op.drop_table('collections')
