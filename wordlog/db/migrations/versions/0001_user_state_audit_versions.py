"""
Create user_state and audit_versions tables

Revision ID: 0001_user_state_audit_versions
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = '0001_user_state_audit_versions'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user_state',
        sa.Column('user_id', sa.String(255), primary_key=True),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'audit_versions',
        sa.Column('id', sa.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('timestamp', sa.String(16), nullable=False),
        sa.Column('added_words', sa.JSON(), nullable=False),
        sa.Column('removed_words', sa.JSON(), nullable=False),
        sa.Column('old_length', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('new_length', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_audit_versions_user_id', 'audit_versions', ['user_id'])


def downgrade():
    op.drop_index('ix_audit_versions_user_id', table_name='audit_versions')
    op.drop_table('audit_versions')
    op.drop_table('user_state')
