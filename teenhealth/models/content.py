from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict


class SelfAssessment(BaseModel):
    # Questionnaire answers keyed by question id
    model_config = ConfigDict(extra="allow")

    answers: Dict[str, Any]


class Feedback(BaseModel):
    model_config = ConfigDict(extra="allow")

    rating: int = Field(5, ge=1, le=5)
    comments: str = ""
