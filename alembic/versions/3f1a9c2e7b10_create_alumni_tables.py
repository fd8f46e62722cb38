"""Create alumni, pekerjaan, users and files tables

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '3f1a9c2e7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('role', sa.String(), nullable=False, server_default='user'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'alumni',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('student_number', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('department', sa.String(), nullable=False),
        sa.Column('cohort_year', sa.Integer(), nullable=False),
        sa.Column('graduation_year', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_alumni_id'), 'alumni', ['id'], unique=False)
    op.create_index(op.f('ix_alumni_student_number'), 'alumni', ['student_number'], unique=False)
    op.create_index(op.f('ix_alumni_name'), 'alumni', ['name'], unique=False)
    op.create_index(op.f('ix_alumni_email'), 'alumni', ['email'], unique=False)

    # alumni_id holds the legacy integer alumni id, so no foreign key
    op.create_table(
        'pekerjaan',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('legacy_id', sa.Integer(), nullable=True),
        sa.Column('alumni_id', sa.Integer(), nullable=False),
        sa.Column('company', sa.String(), nullable=False),
        sa.Column('position', sa.String(), nullable=False),
        sa.Column('industry', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('salary_range', sa.String(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('deleted', sa.String(length=3), nullable=False, server_default='no'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_pekerjaan_id'), 'pekerjaan', ['id'], unique=False)
    op.create_index(op.f('ix_pekerjaan_legacy_id'), 'pekerjaan', ['legacy_id'], unique=False)
    op.create_index(op.f('ix_pekerjaan_alumni_id'), 'pekerjaan', ['alumni_id'], unique=False)
    op.create_index(op.f('ix_pekerjaan_company'), 'pekerjaan', ['company'], unique=False)
    op.create_index(op.f('ix_pekerjaan_start_date'), 'pekerjaan', ['start_date'], unique=False)
    op.create_index(op.f('ix_pekerjaan_deleted'), 'pekerjaan', ['deleted'], unique=False)

    op.create_table(
        'files',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('file_name', sa.String(), nullable=False),
        sa.Column('original_name', sa.String(), nullable=False),
        sa.Column('file_path', sa.String(), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('file_type', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('file_name'),
    )
    op.create_index(op.f('ix_files_id'), 'files', ['id'], unique=False)
    op.create_index(op.f('ix_files_user_id'), 'files', ['user_id'], unique=False)
    op.create_index(op.f('ix_files_category'), 'files', ['category'], unique=False)


def downgrade():
    op.drop_table('files')
    op.drop_table('pekerjaan')
    op.drop_table('alumni')
    op.drop_table('users')
