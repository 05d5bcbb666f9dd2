"""Record store facade over Firestore.

Every handler in the site reads or writes through ``RecordStore``: filtered
reads, inserts, updates by document id and a find-then-branch upsert.
Records come back as plain dicts with the document id under ``id``.

Equality and greater-than filters are pushed down to Firestore. Firestore
has no substring operator, so ``contains`` filters and ``any_of`` groups
are applied to the streamed documents in Python.
"""
from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from google.api_core import exceptions as gexc
from google.cloud.firestore import FieldFilter

from teenhealth.core.errors import BadRequestError, InternalError, NotFoundError, UnavailableError

logger = logging.getLogger(__name__)


class Collections:
    USERS = "Users"
    REVOKED_TOKENS = "RevokedTokens"
    HEALTH_METRICS = "HealthMetrics"
    ADOLESCENTS = "Adolescents"
    GUARDIAN_ACCESS_REQUESTS = "GuardianAccessRequests"
    APPOINTMENTS = "Appointments"
    FITNESS_ACTIVITIES = "FitnessActivities"
    MENTAL_HEALTH_RESOURCES = "MentalHealthResources"
    MENTAL_HEALTH_ASSESSMENTS = "MentalHealthAssessments"
    THERAPIST_SESSIONS = "TherapistSessions"
    PAGES = "Pages"
    HOME_PAGE_CONTENT = "HomePageContent"
    HEALTH_DATA = "HealthData"
    SERVICES = "Services"
    BOOKING_SLOTS = "BookingSlots"
    BOOKINGS = "Bookings"
    CART_ITEMS = "CartItems"
    FEEDBACK = "ThankYouPageFeedback"
    HEALTH_PROGRAMS = "HealthPrograms"
    BLOG_POSTS = "BlogPosts"


# Store errors worth retrying from the caller's side
_TRANSIENT_ERRORS = (
    gexc.ServiceUnavailable,
    gexc.DeadlineExceeded,
    gexc.TooManyRequests,
)

_PUSHDOWN_OPS = ("==", ">")


@dataclass(frozen=True)
class Filter:
    field: str
    op: str
    value: Any

    def matches(self, record: Dict[str, Any]) -> bool:
        actual = record.get(self.field)
        if self.op == "==":
            return actual == self.value
        if self.op == ">":
            return actual is not None and actual > self.value
        if self.op == "contains":
            return isinstance(actual, str) and str(self.value).lower() in actual.lower()
        raise ValueError(f"Unsupported filter operator: {self.op}")


def eq(field: str, value: Any) -> Filter:
    return Filter(field, "==", value)


def gt(field: str, value: Any) -> Filter:
    return Filter(field, ">", value)


def contains(field: str, value: str) -> Filter:
    return Filter(field, "contains", value)


class UpsertOutcome(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass
class UpsertResult:
    outcome: UpsertOutcome
    record: Dict[str, Any]

    @property
    def created(self) -> bool:
        return self.outcome is UpsertOutcome.CREATED


def _to_record(doc) -> Dict[str, Any]:
    return {"id": doc.id, **(doc.to_dict() or {})}


def _strip_id(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in payload.items() if k != "id"}


def _check_field_names(data: Dict[str, Any]):
    # update() reads "a.b" as a nested field path, which would replace field "a"
    dotted = sorted(k for k in data if "." in k)
    if dotted:
        raise BadRequestError(f"Invalid field name: {', '.join(dotted)}")


@contextlib.contextmanager
def _store_call(action: str, collection: str):
    """Translate Firestore API errors into service error kinds."""
    try:
        yield
    except _TRANSIENT_ERRORS as exc:
        raise UnavailableError(
            "Record store temporarily unavailable",
            context={"action": action, "collection": collection},
        ) from exc
    except gexc.GoogleAPICallError as exc:
        raise InternalError(
            f"Error during {action} on {collection}",
            context={"action": action, "collection": collection},
        ) from exc


class RecordStore:
    def __init__(self, db):
        self._db = db

    def find(
        self,
        collection: str,
        *filters: Filter,
        any_of: Sequence[Filter] = (),
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Return every record matching all ``filters`` and at least one of ``any_of``."""
        query = self._db.collection(collection)
        local: List[Filter] = []
        for f in filters:
            if f.op in _PUSHDOWN_OPS:
                query = query.where(filter=FieldFilter(f.field, f.op, f.value))
            else:
                local.append(f)

        # Firestore can only cut the result set when every filter ran server-side
        if limit is not None and not local and not any_of:
            query = query.limit(limit)

        with _store_call("query", collection):
            records = [_to_record(d) for d in query.stream()]

        records = [r for r in records if all(f.matches(r) for f in local)]
        if any_of:
            records = [r for r in records if any(f.matches(r) for f in any_of)]
        if limit is not None:
            records = records[:limit]
        return records

    def find_first(self, collection: str, *filters: Filter, not_found: str = None) -> Dict[str, Any]:
        records = self.find(collection, *filters, limit=1)
        if not records:
            raise NotFoundError(not_found or f"No record found in {collection}")
        return records[0]

    def exists(self, collection: str, *filters: Filter) -> bool:
        return bool(self.find(collection, *filters, limit=1))

    def get(self, collection: str, record_id: str, not_found: str = None) -> Dict[str, Any]:
        with _store_call("get", collection):
            doc = self._db.collection(collection).document(record_id).get()
        if not doc.exists:
            raise NotFoundError(not_found or f"No record found in {collection}")
        return _to_record(doc)

    def insert(self, collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        data = _strip_id(payload)
        with _store_call("insert", collection):
            _, doc_ref = self._db.collection(collection).add(data)
        logger.debug("Inserted %s/%s", collection, doc_ref.id)
        return {"id": doc_ref.id, **data}

    def update(self, collection: str, record_id: str, changes: Dict[str, Any], not_found: str = None) -> Dict[str, Any]:
        """Merge ``changes`` into an existing record and return the merged record."""
        data = _strip_id(changes)
        _check_field_names(data)
        with _store_call("update", collection):
            ref = self._db.collection(collection).document(record_id)
            doc = ref.get()
            if not doc.exists:
                raise NotFoundError(not_found or f"No record found in {collection}")
            ref.update(data)
        return {**_to_record(doc), **data}

    def upsert(self, collection: str, key: Filter, payload: Dict[str, Any]) -> UpsertResult:
        """
        Merge ``payload`` into the first record matching ``key``, or insert
        ``payload`` plus the key field when nothing matches.

        Not transactional: two concurrent upserts for the same key can both
        take the insert branch.
        """
        data = {**payload, key.field: key.value}
        _check_field_names(data)
        existing = self.find(collection, key, limit=1)
        if existing:
            record = self.update(collection, existing[0]["id"], data)
            return UpsertResult(UpsertOutcome.UPDATED, record)

        record = self.insert(collection, data)
        return UpsertResult(UpsertOutcome.CREATED, record)

