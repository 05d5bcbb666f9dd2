"""Pydantic models for the health dashboard and fitness log."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class HealthMetrics(BaseModel):
    # Unknown metric fields are stored as-is
    model_config = ConfigDict(extra="allow")

    sleep_hours: Optional[float] = Field(None, ge=0, le=24)
    exercise_minutes: Optional[int] = Field(None, ge=0)
    water_intake_ml: Optional[int] = Field(None, ge=0)
    daily_steps: Optional[int] = Field(None, ge=0)
    mood: Optional[str] = None
    notes: Optional[str] = None


class FitnessActivity(BaseModel):
    model_config = ConfigDict(extra="allow")

    activity: str = Field(..., min_length=1, description="e.g. running, swimming")
    duration_minutes: int = Field(..., gt=0)
    calories_burned: Optional[int] = Field(None, ge=0)
    date: Optional[str] = None
