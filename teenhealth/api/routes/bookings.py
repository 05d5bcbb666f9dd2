"""Online booking, cart and members-area routes."""
from fastapi import APIRouter, Body, Depends, Query

from teenhealth.api.deps import ensure_owner, get_booking_service, get_current_user
from teenhealth.models.appointment import BookingForm, CartItemIn
from teenhealth.models.content import Feedback
from teenhealth.services.booking_service import BookingService

router = APIRouter(tags=["bookings"])


@router.get("/booking-slots")
def fetch_available_slots(
    date: str = Query(..., description="Calendar day, e.g. 2026-11-02"),
    bookings: BookingService = Depends(get_booking_service),
):
    return {"slots": bookings.available_slots(date)}


@router.post("/bookings", status_code=201)
def submit_booking_form(
    payload: BookingForm = Body(...),
    user=Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    booking = bookings.submit_booking(user["id"], payload.model_dump(exclude_none=True))
    return {"message": "Booking confirmed", "booking": booking}


@router.get("/users/{user_id}/bookings")
def get_user_bookings(
    user_id: str,
    user=Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    ensure_owner(user, user_id)
    return {"bookings": bookings.user_bookings(user_id)}


@router.get("/users/{user_id}/programs")
def get_user_programs(
    user_id: str,
    user=Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    ensure_owner(user, user_id)
    return {"programs": bookings.user_programs(user_id)}


@router.post("/cart/{user_id}", status_code=201)
def add_to_cart(
    user_id: str,
    payload: CartItemIn = Body(...),
    user=Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    ensure_owner(user, user_id)
    item = bookings.add_to_cart(user_id, payload.model_dump(exclude_none=True))
    return {"message": "Service added to cart", "cartItem": item}


@router.get("/cart/{user_id}")
def get_cart_items(
    user_id: str,
    user=Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    ensure_owner(user, user_id)
    return {"items": bookings.cart_items(user_id)}


@router.post("/feedback", status_code=201)
def save_thank_you_page_data(
    payload: Feedback = Body(...),
    bookings: BookingService = Depends(get_booking_service),
):
    feedback = bookings.save_feedback(payload.model_dump())
    return {"message": "Feedback saved successfully", "feedback": feedback}
