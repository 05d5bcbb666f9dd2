"""Mental health support routes."""
from fastapi import APIRouter, Body, Depends

from teenhealth.api.deps import get_current_user, get_mental_health_service
from teenhealth.models.appointment import TherapistSessionIn
from teenhealth.models.content import SelfAssessment
from teenhealth.services.mental_health_service import MentalHealthService

router = APIRouter(prefix="/mental-health", tags=["mental_health"])


@router.get("/resources")
def get_mental_health_resources(
    mental_health: MentalHealthService = Depends(get_mental_health_service),
):
    return {"resources": mental_health.resources()}


@router.post("/assessments", status_code=201)
def submit_self_assessment(
    payload: SelfAssessment = Body(...),
    user=Depends(get_current_user),
    mental_health: MentalHealthService = Depends(get_mental_health_service),
):
    mental_health.submit_self_assessment(user["id"], payload.model_dump())
    return {"message": "Self-assessment submitted successfully"}


@router.post("/sessions", status_code=201)
def book_session(
    payload: TherapistSessionIn = Body(...),
    user=Depends(get_current_user),
    mental_health: MentalHealthService = Depends(get_mental_health_service),
):
    return {"session": mental_health.book_session(user["id"], payload.model_dump(exclude_none=True))}
