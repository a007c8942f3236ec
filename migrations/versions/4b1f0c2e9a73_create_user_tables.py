"""create_user_tables

Revision ID: 4b1f0c2e9a73
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1f0c2e9a73'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create user and user_profile tables."""
    op.create_table('user',
        sa.Column('id', sa.LargeBinary(length=16), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_user_email'),
    )

    op.create_table('user_profile',
        sa.Column('id', sa.LargeBinary(length=16), nullable=False),
        sa.Column('user_id', sa.LargeBinary(length=16), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=True),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('county', sa.String(length=100), nullable=True),
        sa.Column('slogan', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.String(length=19), nullable=True),
        sa.Column('updated_at', sa.String(length=19), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', name='uq_user_profile_user_id'),
    )


def downgrade() -> None:
    """Drop user and user_profile tables."""
    op.drop_table('user_profile')
    op.drop_table('user')
