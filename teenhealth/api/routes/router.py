from fastapi import APIRouter

from teenhealth.api.routes.auth import router as auth_router
from teenhealth.api.routes.health_metrics import router as health_router
from teenhealth.api.routes.symptoms import router as symptoms_router
from teenhealth.api.routes.mental_health import router as mental_health_router
from teenhealth.api.routes.appointments import router as appointments_router
from teenhealth.api.routes.guardian import router as guardian_router
from teenhealth.api.routes.content import router as content_router
from teenhealth.api.routes.bookings import router as bookings_router
from teenhealth.api.routes.payments import router as payments_router

api_router = APIRouter()

# Accounts
api_router.include_router(auth_router)

# Adolescent health
api_router.include_router(health_router)
api_router.include_router(symptoms_router)
api_router.include_router(mental_health_router)
api_router.include_router(appointments_router)
api_router.include_router(guardian_router)

# Site pages, bookings and programs
api_router.include_router(content_router)
api_router.include_router(bookings_router)
api_router.include_router(payments_router)
