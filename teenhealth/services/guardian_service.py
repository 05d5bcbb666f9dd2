"""Guardian access to an adolescent's health data.

Access is granted only when the adolescent's record already names the
requesting guardian. Establishing that link happens outside this service
(see scripts/link_guardian.py).
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from teenhealth.core.errors import ForbiddenError
from teenhealth.services.record_store import Collections, RecordStore, eq

logger = logging.getLogger(__name__)

NO_CONSENT = "Access denied: No consent from adolescent"


class GuardianService:
    def __init__(self, store: RecordStore):
        self.store = store

    def has_consent(self, adolescent_id: str, guardian_id: str) -> bool:
        links = self.store.find(Collections.ADOLESCENTS, eq("userId", adolescent_id), limit=1)
        return bool(links) and links[0].get("guardianId") == guardian_id

    def request_access(self, adolescent_id: str, guardian_id: str) -> Dict[str, Any]:
        if not self.has_consent(adolescent_id, guardian_id):
            logger.info("Guardian %s denied access to %s", guardian_id, adolescent_id)
            raise ForbiddenError(NO_CONSENT)

        return self.store.insert(
            Collections.GUARDIAN_ACCESS_REQUESTS,
            {
                "adolescentId": adolescent_id,
                "guardianId": guardian_id,
                "grantedAt": datetime.now(timezone.utc),
            },
        )
