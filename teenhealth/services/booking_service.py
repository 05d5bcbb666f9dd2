"""Online booking, cart, post-purchase feedback and per-user listings."""
from datetime import datetime, timezone
from typing import Any, Dict, List

from teenhealth.services.record_store import Collections, RecordStore, eq


class BookingService:
    def __init__(self, store: RecordStore):
        self.store = store

    def available_slots(self, date: str) -> List[Dict[str, Any]]:
        return self.store.find(Collections.BOOKING_SLOTS, eq("date", date))

    def submit_booking(self, user_id: str, form: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(
            Collections.BOOKINGS,
            {**form, "userId": user_id, "createdAt": datetime.now(timezone.utc)},
        )

    def user_bookings(self, user_id: str) -> List[Dict[str, Any]]:
        return self.store.find(Collections.BOOKINGS, eq("userId", user_id))

    def user_programs(self, user_id: str) -> List[Dict[str, Any]]:
        return self.store.find(Collections.HEALTH_PROGRAMS, eq("userId", user_id))

    def add_to_cart(self, user_id: str, item: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(Collections.CART_ITEMS, {**item, "userId": user_id})

    def cart_items(self, user_id: str) -> List[Dict[str, Any]]:
        return self.store.find(Collections.CART_ITEMS, eq("userId", user_id))

    def save_feedback(self, feedback: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(
            Collections.FEEDBACK,
            {**feedback, "createdAt": datetime.now(timezone.utc)},
        )

