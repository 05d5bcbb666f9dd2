from pydantic import BaseModel, Field


class GuardianAccessRequest(BaseModel):
    adolescentId: str = Field(..., min_length=1, description="Account id of the adolescent")
