"""Pydantic models for the payment pass-through."""
from pydantic import BaseModel, Field
from typing import Optional


class PaymentRequest(BaseModel):
    amount: float = Field(..., gt=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    description: Optional[str] = None
    programId: Optional[str] = None
