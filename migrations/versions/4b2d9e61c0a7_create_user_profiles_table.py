"""create_user_profiles_table

Revision ID: 4b2d9e61c0a7
Revises:
Create Date: 2026-10-18 09:12:44.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b2d9e61c0a7'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create user_profiles with its indexes and updated_at trigger."""
    op.create_table('user_profiles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_user_profiles_name', 'user_profiles', ['first_name', 'last_name'], unique=False)
    op.create_index('idx_user_profiles_created_at', 'user_profiles', ['created_at'], unique=False)

    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = CURRENT_TIMESTAMP;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    op.execute("""
        CREATE TRIGGER update_user_profiles_updated_at
            BEFORE UPDATE ON user_profiles
            FOR EACH ROW
            EXECUTE FUNCTION update_updated_at_column();
    """)


def downgrade() -> None:
    """Drop user_profiles and its trigger function."""
    op.execute("DROP TRIGGER IF EXISTS update_user_profiles_updated_at ON user_profiles;")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column();")
    op.drop_index('idx_user_profiles_created_at', table_name='user_profiles')
    op.drop_index('idx_user_profiles_name', table_name='user_profiles')
    op.drop_table('user_profiles')
