"""API routes for the donation flow."""
from fastapi import APIRouter, Depends

from reformed_chapter.models.schemas import PaymentIntentRequest, PaymentIntentResponse
from reformed_chapter.services.donation_service import DonationService, get_donation_service

router = APIRouter(prefix="/api", tags=["donations"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    service: DonationService = Depends(get_donation_service),
):
    """Create a payment intent for a one-off donation (amount in cents)."""
    return await service.create_payment_intent(
        amount=payload.amount,
        currency=payload.currency,
        metadata=payload.metadata,
    )
