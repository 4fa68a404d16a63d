"""Repository modules for database operations.

All repository classes are re-exported here for convenient imports.
"""
from reformed_chapter.repositories.resource import ResourceRepository

__all__ = [
    "ResourceRepository",
]
