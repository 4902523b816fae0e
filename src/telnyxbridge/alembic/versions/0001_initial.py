"""initial platform schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('img_url', sa.Text(), nullable=True),
        sa.Column('is_self', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
    )
    op.create_table(
        'threads',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False, server_default='single'),
        sa.Column('timestamp', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('img_url', sa.Text(), nullable=True),
        sa.Column('is_unread', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_read_only', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id', name='pk_threads'),
    )
    op.create_table(
        'participants',
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('thread_id', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_participants_user_id_users'),
        sa.ForeignKeyConstraint(['thread_id'], ['threads.id'], name='fk_participants_thread_id_threads'),
        sa.PrimaryKeyConstraint('user_id', 'thread_id', name='pk_participants'),
    )
    op.create_index('ix_participants_thread_id', 'participants', ['thread_id'])
    op.create_table(
        'messages',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('thread_id', sa.String(length=255), nullable=False),
        sa.Column('sender_id', sa.String(length=255), nullable=False),
        sa.Column('text', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('seen', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_delivered', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_sender', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_action', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(['thread_id'], ['threads.id'], name='fk_messages_thread_id_threads'),
        sa.PrimaryKeyConstraint('id', name='pk_messages'),
    )
    op.create_index('ix_messages_thread_id', 'messages', ['thread_id'])


def downgrade() -> None:
    op.drop_index('ix_messages_thread_id', table_name='messages')
    op.drop_table('messages')
    op.drop_index('ix_participants_thread_id', table_name='participants')
    op.drop_table('participants')
    op.drop_table('threads')
    op.drop_table('users')
