"""create blog_articles

Revision ID: 4c7d2e9a1b30
Revises: 
Create Date: 2024-08-13 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7d2e9a1b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('blog_articles'):
        op.create_table(
            'blog_articles',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('author_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=100), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('publication_date', sa.DateTime(), nullable=False),
            sa.Column('creation_date', sa.DateTime(), nullable=False),
            sa.Column('keywords', sa.JSON(), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False),
            sa.Column('slug', sa.String(length=255), nullable=False),
            sa.Column('cover_picture_ref', sa.String(length=255), nullable=True),
        )
        op.create_index('ix_blog_articles_status', 'blog_articles', ['status'])
        op.create_index('ix_blog_articles_slug', 'blog_articles', ['slug'])
        op.create_index(
            'uq_blog_articles_live_slug', 'blog_articles', ['slug'], unique=True,
            sqlite_where=sa.text("status != 'deleted'"),
            postgresql_where=sa.text("status != 'deleted'"),
        )


def downgrade():
    op.drop_index('uq_blog_articles_live_slug', table_name='blog_articles')
    op.drop_index('ix_blog_articles_slug', table_name='blog_articles')
    op.drop_index('ix_blog_articles_status', table_name='blog_articles')
    op.drop_table('blog_articles')
