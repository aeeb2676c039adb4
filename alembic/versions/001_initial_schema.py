"""Initial schema: users, translation_overrides, user_histories

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('username', sa.String(60), nullable=False, unique=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('moderator', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('locale', sa.String(10), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    
    op.create_table(
        'translation_overrides',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('translation_key', sa.String(200), nullable=False),
        sa.Column('locale', sa.String(10), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('translation_key', 'locale', name='uq_translation_override_key_locale'),
    )
    
    op.create_table(
        'user_histories',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('action', sa.String(50), nullable=False),
        sa.Column('subject', sa.String(200), nullable=True),
        sa.Column('previous_value', sa.Text(), nullable=True),
        sa.Column('new_value', sa.Text(), nullable=True),
        sa.Column('acting_user_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['acting_user_id'], ['users.id'], ),
    )
    op.create_index('idx_user_histories_action_subject', 'user_histories', ['action', 'subject'])


def downgrade():
    op.drop_index('idx_user_histories_action_subject', table_name='user_histories')
    op.drop_table('user_histories')
    op.drop_table('translation_overrides')
    op.drop_table('users')
