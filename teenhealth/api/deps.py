"""
API dependencies: record store, services and bearer-token auth.

Routes receive ready-built services through ``Depends`` so tests can swap
the Firestore client with ``app.dependency_overrides[get_store]``.
"""

from functools import lru_cache
from typing import List, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from teenhealth.core.config import Settings, get_settings
from teenhealth.core.errors import ForbiddenError, UnauthorizedError
from teenhealth.core.firebase import get_db
from teenhealth.services.account_service import AccountService
from teenhealth.services.appointment_service import AppointmentService
from teenhealth.services.booking_service import BookingService
from teenhealth.services.content_service import ContentService
from teenhealth.services.guardian_service import GuardianService
from teenhealth.services.health_service import HealthService
from teenhealth.services.mental_health_service import MentalHealthService
from teenhealth.services.payment_service import PaymentGateway
from teenhealth.services.record_store import RecordStore

# Missing header is reported as 401 by get_bearer_token, not 403 by FastAPI
security = HTTPBearer(auto_error=False)


def get_store() -> RecordStore:
    return RecordStore(get_db())


def get_account_service(
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> AccountService:
    return AccountService(store, settings)


def get_health_service(store: RecordStore = Depends(get_store)) -> HealthService:
    return HealthService(store)


def get_guardian_service(store: RecordStore = Depends(get_store)) -> GuardianService:
    return GuardianService(store)


def get_appointment_service(store: RecordStore = Depends(get_store)) -> AppointmentService:
    return AppointmentService(store)


def get_mental_health_service(store: RecordStore = Depends(get_store)) -> MentalHealthService:
    return MentalHealthService(store)


def get_content_service(store: RecordStore = Depends(get_store)) -> ContentService:
    return ContentService(store)


def get_booking_service(store: RecordStore = Depends(get_store)) -> BookingService:
    return BookingService(store)


@lru_cache
def get_payment_gateway() -> PaymentGateway:
    """One gateway per process so its HTTP session pools connections."""
    return PaymentGateway(get_settings())


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Expects:
        Authorization: Bearer <token>
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("User not logged in")
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_bearer_token),
    accounts: AccountService = Depends(get_account_service),
):
    """Account behind the bearer token (password hash stripped)."""
    return accounts.authenticate(token)


def require_role(allowed: List[str]) -> Callable:
    """
    Return a FastAPI dependency that enforces the account's role.

    Example:
        user=Depends(require_role(["guardian"]))
    """

    def _checker(user=Depends(get_current_user)):
        if user.get("role") not in allowed:
            raise ForbiddenError("Insufficient permissions")
        return user

    return _checker


def ensure_owner(user: dict, user_id: str):
    """Only the account owner may read or write data keyed by ``user_id``."""
    if user["id"] != user_id:
        raise ForbiddenError("Not authorized")
