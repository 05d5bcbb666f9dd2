"""Guardian access routes."""
from fastapi import APIRouter, Body, Depends

from teenhealth.api.deps import get_guardian_service, require_role
from teenhealth.models.guardian import GuardianAccessRequest
from teenhealth.services.guardian_service import GuardianService

router = APIRouter(prefix="/guardian-access", tags=["guardian"])


@router.post("/")
def request_guardian_access(
    payload: GuardianAccessRequest = Body(...),
    user=Depends(require_role(["guardian"])),
    guardians: GuardianService = Depends(get_guardian_service),
):
    """Grant the calling guardian access if the adolescent's record names them."""
    grant = guardians.request_access(payload.adolescentId, user["id"])
    return {"message": "Access granted", "grant": grant}
