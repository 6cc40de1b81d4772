"""Initial schema: user, lesson, exercise, user_progress, ai_lesson

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """
    Create the learner, catalog, progress and AI lesson tables.
    List-valued fields are JSON columns.
    """
    op.create_table(
        'user',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hearts', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('xp', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('gems', sa.Integer(), nullable=False, server_default='500'),
        sa.Column('last_activity_date', sa.String(), nullable=True),
        sa.Column('current_lesson_id', sa.Integer(), nullable=True, server_default='1'),
        sa.Column('completed_lessons', sa.JSON(), nullable=False),
        sa.Column('achievements', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='user_pkey'),
        sa.CheckConstraint('hearts >= 0 AND hearts <= 5', name='user_hearts_range_check'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'lesson',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('unit', sa.Integer(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('is_locked', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('xp_reward', sa.Integer(), nullable=False, server_default='10'),
        sa.Column('type', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='lesson_pkey'),
        sa.CheckConstraint('xp_reward > 0', name='lesson_xp_reward_check'),
    )
    op.create_index(op.f('ix_lesson_unit'), 'lesson', ['unit'], unique=False)

    op.create_table(
        'exercise',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('lesson_id', sa.Integer(), nullable=True),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('question', sa.String(), nullable=False),
        sa.Column('croatian_text', sa.String(), nullable=True),
        sa.Column('english_text', sa.String(), nullable=True),
        sa.Column('audio_url', sa.String(), nullable=True),
        sa.Column('options', sa.JSON(), nullable=True),
        sa.Column('correct_answer', sa.String(), nullable=False),
        sa.Column('hints', sa.JSON(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['lesson_id'], ['lesson.id'], name='exercise_lesson_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='exercise_pkey'),
        sa.CheckConstraint(
            "type IN ('translation', 'multiple-choice', 'listening', 'speaking', 'word-bank')",
            name='exercise_type_check'
        ),
    )
    op.create_index(op.f('ix_exercise_lesson_id'), 'exercise', ['lesson_id'], unique=False)

    op.create_table(
        'user_progress',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('lesson_id', sa.Integer(), nullable=True),
        sa.Column('exercise_id', sa.String(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('attempts', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('correct_attempts', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], name='user_progress_user_id_fkey'),
        sa.ForeignKeyConstraint(['lesson_id'], ['lesson.id'], name='user_progress_lesson_id_fkey'),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercise.id'], name='user_progress_exercise_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='user_progress_pkey'),
    )
    op.create_index(op.f('ix_user_progress_user_id'), 'user_progress', ['user_id'], unique=False)
    op.create_index(op.f('ix_user_progress_lesson_id'), 'user_progress', ['lesson_id'], unique=False)

    op.create_table(
        'ai_lesson',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('content', sa.JSON(), nullable=True),
        sa.Column('difficulty', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], name='ai_lesson_user_id_fkey'),
        sa.PrimaryKeyConstraint('id', name='ai_lesson_pkey'),
    )
    op.create_index(op.f('ix_ai_lesson_user_id'), 'ai_lesson', ['user_id'], unique=False)


def downgrade() -> None:
    """
    Drop all tables.
    """
    op.drop_index(op.f('ix_ai_lesson_user_id'), table_name='ai_lesson')
    op.drop_table('ai_lesson')
    op.drop_index(op.f('ix_user_progress_lesson_id'), table_name='user_progress')
    op.drop_index(op.f('ix_user_progress_user_id'), table_name='user_progress')
    op.drop_table('user_progress')
    op.drop_index(op.f('ix_exercise_lesson_id'), table_name='exercise')
    op.drop_table('exercise')
    op.drop_index(op.f('ix_lesson_unit'), table_name='lesson')
    op.drop_table('lesson')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_table('user')
