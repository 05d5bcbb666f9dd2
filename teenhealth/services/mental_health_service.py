"""Mental health support: resources, self-assessments, therapist sessions."""
from datetime import datetime, timezone
from typing import Any, Dict, List

from teenhealth.services.record_store import Collections, RecordStore


class MentalHealthService:
    def __init__(self, store: RecordStore):
        self.store = store

    def resources(self) -> List[Dict[str, Any]]:
        return self.store.find(Collections.MENTAL_HEALTH_RESOURCES)

    def submit_self_assessment(self, user_id: str, assessment: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(
            Collections.MENTAL_HEALTH_ASSESSMENTS,
            {**assessment, "userId": user_id, "submittedAt": datetime.now(timezone.utc)},
        )

    def book_session(self, user_id: str, session: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(
            Collections.THERAPIST_SESSIONS,
            {**session, "userId": user_id, "createdAt": datetime.now(timezone.utc)},
        )
