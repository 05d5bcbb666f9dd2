"""Pydantic models for appointments, bookings and therapist sessions."""
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


def _as_utc(v: datetime) -> datetime:
    # Firestore reads naive datetimes as UTC; compare like-for-like
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


class AppointmentIn(BaseModel):
    appointmentDate: datetime
    providerName: Optional[str] = None
    reason: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("appointmentDate")
    @classmethod
    def validate_date(cls, v):
        return _as_utc(v)


class TherapistSessionIn(BaseModel):
    sessionDate: datetime
    therapistName: Optional[str] = None
    mode: Optional[str] = Field(None, description="in_person or video")
    notes: Optional[str] = None

    @field_validator("sessionDate")
    @classmethod
    def validate_date(cls, v):
        return _as_utc(v)


class BookingForm(BaseModel):
    model_config = ConfigDict(extra="allow")

    serviceId: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    time: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


class CartItemIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    serviceId: str = Field(..., min_length=1)
    serviceName: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    quantity: int = Field(1, ge=1)
