"""Health dashboard routes (sleep, exercise, water intake, ...)."""
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder

from teenhealth.api.deps import ensure_owner, get_current_user, get_health_service
from teenhealth.models.health_data import FitnessActivity, HealthMetrics
from teenhealth.services.health_service import HealthService

router = APIRouter(tags=["health"])


@router.get("/health-metrics/{user_id}")
def get_health_metrics(
    user_id: str,
    user=Depends(get_current_user),
    health: HealthService = Depends(get_health_service),
):
    ensure_owner(user, user_id)
    return {"healthMetrics": health.get_metrics(user_id)}


@router.put("/health-metrics/{user_id}")
def update_health_metrics(
    user_id: str,
    payload: HealthMetrics = Body(...),
    user=Depends(get_current_user),
    health: HealthService = Depends(get_health_service),
):
    """Merge into the user's metrics record, creating it on first write (201)."""
    ensure_owner(user, user_id)
    result = health.update_metrics(user_id, payload.model_dump(exclude_none=True))
    if result.created:
        return JSONResponse(status_code=201, content=jsonable_encoder({"newMetrics": result.record}))
    return {"updatedMetrics": result.record}


@router.get("/nutrition-plan/{user_id}")
def get_nutrition_plan(
    user_id: str,
    user=Depends(get_current_user),
    health: HealthService = Depends(get_health_service),
):
    ensure_owner(user, user_id)
    return {"nutritionPlan": health.nutrition_plan(user_id)}


@router.post("/fitness-activities/{user_id}", status_code=201)
def log_fitness_activity(
    user_id: str,
    payload: FitnessActivity = Body(...),
    user=Depends(get_current_user),
    health: HealthService = Depends(get_health_service),
):
    ensure_owner(user, user_id)
    return {"loggedActivity": health.log_fitness_activity(user_id, payload.model_dump(exclude_none=True))}
