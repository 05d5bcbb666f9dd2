"""Appointment booking and reminder routes."""
from fastapi import APIRouter, Body, Depends

from teenhealth.api.deps import ensure_owner, get_appointment_service, get_current_user
from teenhealth.models.appointment import AppointmentIn
from teenhealth.services.appointment_service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("/", status_code=201)
def book_appointment(
    payload: AppointmentIn = Body(...),
    user=Depends(get_current_user),
    appointments: AppointmentService = Depends(get_appointment_service),
):
    appointment = appointments.book(user["id"], payload.model_dump(exclude_none=True))
    return {"message": "Appointment booked successfully", "appointment": appointment}


@router.get("/reminders/{user_id}")
def get_appointment_reminders(
    user_id: str,
    user=Depends(get_current_user),
    appointments: AppointmentService = Depends(get_appointment_service),
):
    """Upcoming appointments (strictly after now) for the user."""
    ensure_owner(user, user_id)
    return {"reminders": appointments.reminders(user_id)}
