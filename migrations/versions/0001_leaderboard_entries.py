"""leaderboard entries

Revision ID: 0001_leaderboard_entries
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_leaderboard_entries'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'leaderboard_entries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('player_name', sa.String(length=100), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('level', sa.String(length=50), nullable=False),
        sa.Column('date_completed', sa.DateTime(), nullable=False),
    )
    op.create_index(
        'ix_leaderboard_entries_score',
        'leaderboard_entries',
        [sa.text('score DESC')]
    )
    op.create_index(
        'ix_leaderboard_entries_date_completed',
        'leaderboard_entries',
        ['date_completed']
    )


def downgrade():
    op.drop_index('ix_leaderboard_entries_date_completed', table_name='leaderboard_entries')
    op.drop_index('ix_leaderboard_entries_score', table_name='leaderboard_entries')
    op.drop_table('leaderboard_entries')
