import logging

from fastapi import FastAPI

from teenhealth.api.routes.router import api_router
from teenhealth.core.errors import ServiceError, service_error_handler, unhandled_error_handler
from teenhealth.core.firebase import init_firebase
from teenhealth.services.logger import configure_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Adolescent Health Backend")

app.add_exception_handler(ServiceError, service_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)


@app.on_event("startup")
def startup():
    """Configure logging and initialize Firebase Admin at app startup."""
    configure_logging()
    # Reads credentials path from FIREBASE_CREDENTIALS
    init_firebase()
    logger.info("Adolescent Health Backend started")


@app.get("/")
async def root():
    return {"message": "Adolescent Health Backend is running"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# Include API routers
app.include_router(api_router)
