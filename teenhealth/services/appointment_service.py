"""Appointments with healthcare providers."""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from teenhealth.services.record_store import Collections, RecordStore, eq, gt


class AppointmentService:
    def __init__(self, store: RecordStore):
        self.store = store

    def book(self, user_id: str, details: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(
            Collections.APPOINTMENTS,
            {**details, "userId": user_id, "createdAt": datetime.now(timezone.utc)},
        )

    def reminders(self, user_id: str, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Appointments for ``user_id`` strictly after ``now``."""
        now = now or datetime.now(timezone.utc)
        return self.store.find(
            Collections.APPOINTMENTS,
            eq("userId", user_id),
            gt("appointmentDate", now),
        )

