"""Tests for ResourceRepository."""
import psycopg2
import pytest

from reformed_chapter.repositories import ResourceRepository


class TestListResources:

    def test_returns_rows_as_dicts(self, mock_db):
        conn, cur = mock_db
        cur.fetchall.return_value = [
            {"id": 1, "book": "John", "chapter": 3, "title": "Born Again"},
            {"id": 2, "book": "Matthew", "chapter": None, "title": "Matthew for Everyone"},
        ]

        rows = ResourceRepository.list_resources()

        assert rows == [
            {"id": 1, "book": "John", "chapter": 3, "title": "Born Again"},
            {"id": 2, "book": "Matthew", "chapter": None, "title": "Matthew for Everyone"},
        ]
        assert all(isinstance(row, dict) for row in rows)

    def test_selects_from_resources_in_id_order(self, mock_db):
        conn, cur = mock_db
        cur.fetchall.return_value = []

        assert ResourceRepository.list_resources() == []

        sql = cur.execute.call_args.args[0]
        assert "FROM resources" in sql
        assert "secondary_scripture" in sql
        assert "ORDER BY id" in sql

    def test_propagates_database_errors(self, mock_db):
        conn, cur = mock_db
        cur.execute.side_effect = psycopg2.Error("relation does not exist")

        with pytest.raises(psycopg2.Error):
            ResourceRepository.list_resources()
