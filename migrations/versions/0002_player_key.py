"""casefolded player name key

Revision ID: 0002_player_key
Revises: 0001_leaderboard_entries
Create Date: 2026-10-20 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0002_player_key'
down_revision = '0001_leaderboard_entries'
branch_labels = None
depends_on = None


entries = sa.table(
    'leaderboard_entries',
    sa.column('id', sa.Integer()),
    sa.column('player_name', sa.String(length=100)),
    sa.column('player_key', sa.String(length=100)),
)


def upgrade():
    op.add_column(
        'leaderboard_entries',
        sa.Column('player_key', sa.String(length=100), nullable=True)
    )

    # SQL lower() cannot fold non-ASCII names on every backend
    conn = op.get_bind()
    rows = conn.execute(sa.select(entries.c.id, entries.c.player_name)).fetchall()
    for entry_id, player_name in rows:
        conn.execute(
            entries.update()
            .where(entries.c.id == entry_id)
            .values(player_key=player_name.casefold())
        )

    with op.batch_alter_table('leaderboard_entries') as batch_op:
        batch_op.alter_column('player_key', existing_type=sa.String(length=100), nullable=False)

    op.create_index(
        'ix_leaderboard_entries_player_key',
        'leaderboard_entries',
        ['player_key']
    )


def downgrade():
    op.drop_index('ix_leaderboard_entries_player_key', table_name='leaderboard_entries')
    with op.batch_alter_table('leaderboard_entries') as batch_op:
        batch_op.drop_column('player_key')
