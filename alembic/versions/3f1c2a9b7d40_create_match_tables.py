"""create_match_tables

Revision ID: 3f1c2a9b7d40
Revises: 
Create Date: 2025-05-01 10:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

EVENT_TABLES = ('goals', 'yellow_cards', 'red_cards')


def upgrade() -> None:
    op.create_table(
        'matches',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('home_team', sa.String(), nullable=False),
        sa.Column('away_team', sa.String(), nullable=False),
        sa.Column('match_date', sa.String(), nullable=False),
        sa.Column('extra_time', sa.String(), nullable=False, server_default='00:00'),
        sqlite_autoincrement=True,
    )

    # same shape for every event kind; no cascade on match delete
    for table in EVENT_TABLES:
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('match_id', sa.Integer(), sa.ForeignKey('matches.id'), nullable=False),
            sa.Column('team', sa.String(), nullable=False),
            sa.Column('player', sa.String(), nullable=False),
            sa.Column('minute', sa.String(), nullable=False),
            sqlite_autoincrement=True,
        )
        op.create_index(f'ix_{table}_match_id', table, ['match_id'])


def downgrade() -> None:
    for table in reversed(EVENT_TABLES):
        op.drop_index(f'ix_{table}_match_id', table_name=table)
        op.drop_table(table)
    op.drop_table('matches')
