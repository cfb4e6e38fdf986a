"""create workouts, workout_sessions, exercise_sets

Revision ID: 4b1e9c0d7a2f
Revises:
Create Date: 2024-05-01 09:12:44.318201

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e9c0d7a2f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) workout templates; default_exercises is an ordered JSON document
    op.create_table(
        'workouts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('default_exercises', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('name', name='uq_workouts_name'),
    )
    op.create_index('ix_workouts_created_at', 'workouts', ['created_at'])

    # 2) logged sessions
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_id', sa.Uuid(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_workout_sessions_workout_id', 'workout_sessions', ['workout_id'])
    op.create_index('ix_workout_sessions_date', 'workout_sessions', ['date'])

    # 3) sets owned by a session
    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('session_id', sa.Uuid(), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('exercise_name', sa.String(length=255), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('rpe', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_exercise_sets_session_id', 'exercise_sets', ['session_id'])


def downgrade() -> None:
    # drop child tables first
    op.drop_index('ix_exercise_sets_session_id', table_name='exercise_sets')
    op.drop_table('exercise_sets')
    op.drop_index('ix_workout_sessions_date', table_name='workout_sessions')
    op.drop_index('ix_workout_sessions_workout_id', table_name='workout_sessions')
    op.drop_table('workout_sessions')
    op.drop_index('ix_workouts_created_at', table_name='workouts')
    op.drop_table('workouts')
