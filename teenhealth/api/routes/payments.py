"""Payment route for health programs."""
from fastapi import APIRouter, Body, Depends

from teenhealth.api.deps import get_current_user, get_payment_gateway
from teenhealth.models.payment import PaymentRequest
from teenhealth.services.payment_service import PaymentGateway

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/")
def process_payment(
    payload: PaymentRequest = Body(...),
    user=Depends(get_current_user),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    payment = gateway.create_payment({**payload.model_dump(exclude_none=True), "userId": user["id"]})
    return {"payment": payment}
