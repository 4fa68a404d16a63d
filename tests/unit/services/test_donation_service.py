"""Tests for DonationService."""
import pytest
from unittest.mock import patch, Mock, AsyncMock

import httpx

from reformed_chapter.config import Settings
from reformed_chapter.services.donation_service import DonationService, get_donation_service
from reformed_chapter.utils.exceptions import PaymentError, ValidationError


@pytest.fixture
def settings():
    return Settings(stripe_secret_key="sk_test_123", stripe_api_base="https://payments.test/v1/")


def _mock_client(response=None, side_effect=None):
    mock_client = AsyncMock()
    mock_client.post = AsyncMock(return_value=response, side_effect=side_effect)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    return mock_client


def _response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    return response


class TestValidateAmount:
    """Tests for the minimum donation amount."""

    @pytest.mark.parametrize("amount", [None, 0, 49, -100])
    def test_rejects_small_amounts(self, settings, amount):
        with pytest.raises(ValidationError) as exc:
            DonationService(settings)._validate_amount(amount)

        assert exc.value.status_code == 400
        assert exc.value.detail == "Amount must be at least $0.50"

    def test_accepts_minimum(self, settings):
        assert DonationService(settings)._validate_amount(50) == 50


class TestBuildForm:

    def test_includes_source_metadata(self, settings):
        form = DonationService(settings)._build_form(2500, "USD", {"campaign": "spring"})

        assert form == {
            "amount": "2500",
            "currency": "usd",
            "automatic_payment_methods[enabled]": "true",
            "metadata[campaign]": "spring",
            "metadata[source]": "reformed-chapter-donation",
        }

    def test_source_cannot_be_overridden(self, settings):
        form = DonationService(settings)._build_form(100, "usd", {"source": "elsewhere"})

        assert form["metadata[source]"] == "reformed-chapter-donation"


class TestCreatePaymentIntent:
    """Tests for async create_payment_intent."""

    @pytest.mark.asyncio
    @patch("reformed_chapter.services.donation_service.httpx.AsyncClient")
    async def test_success(self, mock_client_class, settings):
        mock_client = _mock_client(_response(200, {"id": "pi_1", "client_secret": "pi_1_secret"}))
        mock_client_class.return_value = mock_client

        result = await DonationService(settings).create_payment_intent(1000, "usd", {})

        assert result == {"client_secret": "pi_1_secret", "payment_intent_id": "pi_1"}
        args, kwargs = mock_client.post.call_args
        assert args[0] == "https://payments.test/v1/payment_intents"
        assert kwargs["headers"] == {"Authorization": "Bearer sk_test_123"}
        assert kwargs["data"]["amount"] == "1000"

    @pytest.mark.asyncio
    @patch("reformed_chapter.services.donation_service.httpx.AsyncClient")
    async def test_small_amount_never_reaches_provider(self, mock_client_class, settings):
        with pytest.raises(ValidationError):
            await DonationService(settings).create_payment_intent(10)

        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_secret_key(self):
        service = DonationService(Settings(stripe_secret_key=""))

        with pytest.raises(PaymentError) as exc:
            await service.create_payment_intent(1000)

        assert exc.value.status_code == 502
        assert exc.value.detail == "Payments are not configured"

    @pytest.mark.asyncio
    @patch("reformed_chapter.services.donation_service.httpx.AsyncClient")
    async def test_provider_error_message_is_surfaced(self, mock_client_class, settings):
        mock_client_class.return_value = _mock_client(
            _response(402, {"error": {"message": "Your card was declined."}})
        )

        with pytest.raises(PaymentError) as exc:
            await DonationService(settings).create_payment_intent(1000)

        assert exc.value.detail == "Your card was declined."

    @pytest.mark.asyncio
    @patch("reformed_chapter.services.donation_service.httpx.AsyncClient")
    async def test_provider_error_without_body(self, mock_client_class, settings):
        response = _response(500)
        response.json.side_effect = ValueError("not json")
        mock_client_class.return_value = _mock_client(response)

        with pytest.raises(PaymentError) as exc:
            await DonationService(settings).create_payment_intent(1000)

        assert exc.value.detail == "Failed to create payment intent"

    @pytest.mark.asyncio
    @patch("reformed_chapter.services.donation_service.httpx.AsyncClient")
    async def test_timeout(self, mock_client_class, settings):
        mock_client_class.return_value = _mock_client(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(PaymentError) as exc:
            await DonationService(settings).create_payment_intent(1000)

        assert exc.value.detail == "Payment provider timed out"

    @pytest.mark.asyncio
    @patch("reformed_chapter.services.donation_service.httpx.AsyncClient")
    async def test_connection_error(self, mock_client_class, settings):
        mock_client_class.return_value = _mock_client(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(PaymentError) as exc:
            await DonationService(settings).create_payment_intent(1000)

        assert exc.value.detail == "Failed to create payment intent"

    @pytest.mark.asyncio
    @patch("reformed_chapter.services.donation_service.httpx.AsyncClient")
    async def test_response_missing_client_secret(self, mock_client_class, settings):
        mock_client_class.return_value = _mock_client(_response(200, {"id": "pi_1"}))

        with pytest.raises(PaymentError):
            await DonationService(settings).create_payment_intent(1000)


def test_get_donation_service_returns_instance():
    assert isinstance(get_donation_service(), DonationService)
