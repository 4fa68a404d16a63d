"""Configuration for pytest."""
import sys
import os

# Make the project root importable when the package is not installed
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest


@pytest.fixture
def resource_rows():
    """Rows shaped like the resources table."""
    return [
        {
            "id": 1,
            "type": "Sermon",
            "title": "Blessed Are the Poor in Spirit",
            "author": " John Piper ",
            "price": "Free",
            "published_year": 2010,
            "book": "Matthew",
            "chapter": 5,
            "chapter_end": None,
            "secondary_scripture": None,
        },
        {
            "id": 2,
            "type": "Commentaries",
            "title": "the Sermon on the Mount",
            "author": "D. A. Carson",
            "price": "$14.99",
            "published_year": "1999",
            "book": "Matthew",
            "chapter": 5,
            "chapter_end": 7,
            "secondary_scripture": "",
        },
        {
            "id": 3,
            "type": "devotional",
            "title": "Plain Words",
            "author": "Jane Doe",
            "price": None,
            "published_year": 2021,
            "book": "Luke",
            "chapter": 6,
            "secondary_scripture": "Matthew 5:1-12",
        },
        {
            "id": 4,
            "type": "Book",
            "title": "Matthew for Everyone",
            "author": "N. T. Wright",
            "price": "Paid",
            "published_year": 2004,
            "book": "Matthew",
            "chapter": None,
            "secondary_scripture": None,
        },
        {
            "id": 5,
            "type": "Video",
            "title": "Salt and Light",
            "author": "Jane Doe",
            "price": "free",
            "published_year": None,
            "book": "John",
            "chapter": 3,
            "secondary_scripture": "Romans 12; Matthew 5",
        },
        {
            "id": 6,
            "type": "Podcast",
            "title": "Beatitudes Podcast",
            "author": "Someone Else",
            "price": None,
            "book": "Matthew",
            "chapter": 5,
        },
        {
            "id": 7,
            "type": "sermons",
            "title": "Meek and Lowly",
            "author": "John Piper",
            "price": None,
            "published_year": 2015,
            "book": "Matthew",
            "chapter": 5,
            "secondary_scripture": "Matthew 5:5",
        },
    ]
