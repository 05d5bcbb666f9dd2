"""Symptom checker route. Public: no account needed."""
from fastapi import APIRouter, Body

from teenhealth.models.symptom import SymptomRecommendations, SymptomSubmission
from teenhealth.services import symptom_checker

router = APIRouter(prefix="/symptoms", tags=["symptoms"])


@router.post("/", response_model=SymptomRecommendations)
async def submit_symptoms(payload: SymptomSubmission = Body(...)):
    return {"recommendations": symptom_checker.recommend(payload.symptoms)}
