"""Create resources table

Revision ID: 0001_create_resources
Revises:
Create Date: 2025-06-02
"""
from alembic import op


revision = "0001_create_resources"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS resources (
            id SERIAL PRIMARY KEY,
            type TEXT NOT NULL,
            title TEXT NOT NULL,
            author TEXT,
            url TEXT,
            price TEXT,
            published_year INTEGER,
            description TEXT,
            image TEXT,
            book TEXT NOT NULL,
            chapter INTEGER,
            chapter_end INTEGER,
            verse_start INTEGER,
            verse_end INTEGER,
            secondary_scripture TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
        );

        CREATE INDEX IF NOT EXISTS idx_resources_book_chapter
            ON resources (book, chapter);

        CREATE INDEX IF NOT EXISTS idx_resources_type
            ON resources (LOWER(type));
        """
    )


def downgrade():
    op.execute(
        """
        DROP INDEX IF EXISTS idx_resources_type;
        DROP INDEX IF EXISTS idx_resources_book_chapter;
        DROP TABLE IF EXISTS resources;
        """
    )
