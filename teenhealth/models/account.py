"""Pydantic models for accounts and sessions."""
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Any, Dict, Literal, Optional

Role = Literal["adolescent", "guardian"]


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: Role = "adolescent"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class Account(BaseModel):
    """Account as returned to clients (never carries the password hash)."""
    model_config = ConfigDict(extra="allow")

    id: str
    email: EmailStr
    role: Role = "adolescent"
    displayName: Optional[str] = None


class SettingsUpdate(BaseModel):
    settings: Dict[str, Any]
