"""Tests for request/response schemas."""
import pytest

from reformed_chapter.models.schemas import PaymentIntentRequest, Resource


@pytest.mark.parametrize(
    "value, expected",
    [
        (2020, 2020),
        ("1999", 1999),
        (" 2004 ", 2004),
        ("2020-05", 2020),
        ("2015 (reprint)", 2015),
        (2021.0, 2021),
        ("unknown", None),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_published_year_keeps_leading_digits(value, expected):
    assert Resource(title="x", published_year=value).published_year == expected


def test_chapter_fields_use_leading_digits():
    resource = Resource(title="x", chapter="5a", chapter_end="7", verse_start="12b")

    assert resource.chapter == 5
    assert resource.chapter_end == 7
    assert resource.verse_start == 12


def test_missing_title_defaults_to_empty():
    assert Resource(title=None).title == ""


def test_numeric_price_is_stringified():
    assert Resource(title="x", price=12.5).price == "12.5"


def test_payment_request_defaults():
    request = PaymentIntentRequest(amount=500)

    assert request.currency == "usd"
    assert request.metadata == {}
