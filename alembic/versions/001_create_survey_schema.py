"""Create sections, groups and questions

Revision ID: 001
Revises: 
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('updated_by', sa.Integer(), nullable=True),
        sa.Column('deleted_by', sa.Integer(), nullable=True),
    ]


def upgrade():
    # Sections table
    op.create_table('sections',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug')
    )
    
    op.create_index('idx_section_slug', 'sections', ['slug'])
    op.create_index('idx_section_team', 'sections', ['team_id'])
    op.create_index('idx_section_deleted', 'sections', ['deleted_at'])
    
    # Groups table
    op.create_table('groups',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('section_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=True),
        sa.Column('options', sa.JSON(), nullable=True, comment='Group options: order, display settings, etc'),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['section_id'], ['sections.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug')
    )
    
    op.create_index('idx_group_slug', 'groups', ['slug'])
    op.create_index('idx_group_section', 'groups', ['section_id'])
    op.create_index('idx_group_team', 'groups', ['team_id'])
    op.create_index('idx_group_deleted', 'groups', ['deleted_at'])
    
    # Questions table
    op.create_table('questions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('group_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=True),
        sa.Column('options', sa.JSON(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    
    op.create_index('idx_question_slug', 'questions', ['slug'])
    op.create_index('idx_question_group', 'questions', ['group_id'])
    op.create_index('idx_question_group_deleted', 'questions', ['group_id', 'deleted_at'])


def downgrade():
    # Drop tables in reverse order
    op.drop_table('questions')
    op.drop_table('groups')
    op.drop_table('sections')
