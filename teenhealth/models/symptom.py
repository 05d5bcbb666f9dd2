from pydantic import BaseModel
from typing import List


class SymptomSubmission(BaseModel):
    symptoms: List[str]


class SymptomRecommendations(BaseModel):
    recommendations: List[str]
