"""exercises, groups, performances and their sets

Revision ID: 4b1f0c2d9a7e
Revises:
Create Date: 2026-10-19 10:12:03.418220

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1f0c2d9a7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) exercises and groups
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_exercises_id', 'exercises', ['id'])
    op.create_index('ix_exercises_name', 'exercises', ['name'])

    op.create_table(
        'exercise_groups',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_exercise_groups_id', 'exercise_groups', ['id'])
    op.create_index('ix_exercise_groups_name', 'exercise_groups', ['name'])

    # 2) many-to-many links
    op.create_table(
        'exercise_group_links',
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), primary_key=True, index=True),
        sa.Column('group_id', sa.Integer(), sa.ForeignKey('exercise_groups.id', ondelete='CASCADE'), primary_key=True, index=True),
    )

    # 3) performances
    op.create_table(
        'performances',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('date', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False, index=True),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
    )

    # 4) one row per set; set_order is the chronological position
    op.create_table(
        'performance_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('performance_id', sa.Integer(), sa.ForeignKey('performances.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('set_order', sa.Integer(), nullable=False),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('performance_sets')
    op.drop_table('performances')
    op.drop_table('exercise_group_links')
    op.drop_index('ix_exercise_groups_name', table_name='exercise_groups')
    op.drop_index('ix_exercise_groups_id', table_name='exercise_groups')
    op.drop_table('exercise_groups')
    op.drop_index('ix_exercises_name', table_name='exercises')
    op.drop_index('ix_exercises_id', table_name='exercises')
    op.drop_table('exercises')
