"""Authentication and account routes.

Login returns a bearer token; every protected route expects it in the
``Authorization: Bearer <token>`` header.
"""
from fastapi import APIRouter, Body, Depends

from teenhealth.api.deps import get_account_service, get_bearer_token, get_current_user
from teenhealth.models.account import Account, LoginRequest, RegisterRequest, SettingsUpdate, TokenResponse
from teenhealth.services.account_service import AccountService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201)
def register_user(
    payload: RegisterRequest = Body(...),
    accounts: AccountService = Depends(get_account_service),
):
    accounts.register(payload.email, payload.password, payload.role)
    return {"message": "User created successfully"}


@router.post("/login", response_model=TokenResponse)
def login_user(
    payload: LoginRequest = Body(...),
    accounts: AccountService = Depends(get_account_service),
):
    token = accounts.login(payload.email, payload.password)
    return TokenResponse(token=token)


@router.post("/logout")
def logout_user(
    token: str = Depends(get_bearer_token),
    accounts: AccountService = Depends(get_account_service),
):
    accounts.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=Account)
def get_me(user=Depends(get_current_user)):
    """Logged-in account; 401 when there is no valid session."""
    return user


@router.put("/users/{user_id}/settings")
def update_user_settings(
    user_id: str,
    payload: SettingsUpdate = Body(...),
    user=Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
):
    updated = accounts.update_settings(user_id, user["id"], payload.settings)
    return {"message": "Account settings updated", "updatedUser": updated}
