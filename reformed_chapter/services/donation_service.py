"""Service for creating donation payment intents."""
import logging
from typing import Dict, Optional

import httpx

from reformed_chapter.config import Settings, get_settings
from reformed_chapter.utils.exceptions import PaymentError, ValidationError

logger = logging.getLogger(__name__)


class DonationService:
    """Creates payment intents at the hosted payments API."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _validate_amount(self, amount: Optional[int]) -> int:
        minimum = self.settings.donation_minimum_amount
        if not amount or amount < minimum:
            raise ValidationError(f"Amount must be at least ${minimum / 100:.2f}")
        return amount

    def _build_form(self, amount: int, currency: str, metadata: Dict[str, str]) -> Dict[str, str]:
        form = {
            "amount": str(amount),
            "currency": currency.lower(),
            "automatic_payment_methods[enabled]": "true",
        }
        merged = {**metadata, "source": self.settings.donation_source}
        for key, value in merged.items():
            form[f"metadata[{key}]"] = str(value)
        return form

    async def create_payment_intent(
        self,
        amount: Optional[int],
        currency: str = "usd",
        metadata: Optional[Dict[str, str]] = None,
    ) -> Dict[str, str]:
        """
        Create a payment intent for a donation.

        Args:
            amount: Amount in cents
            currency: ISO currency code
            metadata: Extra metadata stored on the intent

        Returns:
            {'client_secret': ..., 'payment_intent_id': ...}
        """
        amount = self._validate_amount(amount)

        if not self.settings.stripe_secret_key:
            logger.error("Payment intent requested but STRIPE_SECRET_KEY is not configured")
            raise PaymentError("Payments are not configured")

        form = self._build_form(amount, currency, metadata or {})
        url = f"{self.settings.stripe_api_base.rstrip('/')}/payment_intents"
        logger.info(f"Creating payment intent for {amount} {currency}")

        try:
            async with httpx.AsyncClient(timeout=self.settings.payment_request_timeout) as client:
                response = await client.post(
                    url,
                    data=form,
                    headers={"Authorization": f"Bearer {self.settings.stripe_secret_key}"},
                )
        except httpx.TimeoutException as exc:
            logger.error("Payment provider timed out")
            raise PaymentError("Payment provider timed out") from exc
        except httpx.HTTPError as exc:
            logger.error(f"Error contacting payment provider: {exc}")
            raise PaymentError() from exc

        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.status_code >= 400:
            message = (data.get("error") or {}).get("message") or "Failed to create payment intent"
            logger.error(f"Payment provider returned status {response.status_code}: {message}")
            raise PaymentError(message)

        if not data.get("id") or not data.get("client_secret"):
            logger.error("Payment provider response missing id or client_secret")
            raise PaymentError()

        logger.info(f"Payment intent created: {data['id']}")
        return {
            "client_secret": data["client_secret"],
            "payment_intent_id": data["id"],
        }


def get_donation_service() -> DonationService:
    return DonationService()
