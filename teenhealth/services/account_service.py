"""Account registration, login and session tokens.

Accounts live in the ``Users`` collection with a pbkdf2 password hash.
Sessions are stateless HS256 tokens; logout records the token's ``jti``
in ``RevokedTokens`` so the token is refused afterwards.
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from teenhealth.core.config import Settings
from teenhealth.core.errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from teenhealth.services.record_store import Collections, RecordStore, eq

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Only these top-level fields can be changed from account settings
ALLOWED_SETTINGS = frozenset({
    "displayName",
    "notifications",
    "theme",
    "language",
    "timezone",
    "phone",
    "dateOfBirth",
    "avatarUrl",
})


def hash_password(password):
    if not isinstance(password, (str, bytes)):
        raise TypeError("Password must be a string or bytes.")
    return pwd_context.hash(password)


def verify_password(plain_password, password_hash):
    if not password_hash:
        return False
    return pwd_context.verify(plain_password, password_hash)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def public_account(record: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if k != "password_hash"}


class AccountService:
    def __init__(self, store: RecordStore, settings: Settings):
        self.store = store
        self.settings = settings

    def register(self, email: str, password: str, role: str = "adolescent") -> Dict[str, Any]:
        email = normalize_email(email)
        if self.store.exists(Collections.USERS, eq("email", email)):
            raise ConflictError("User already exists")

        record = self.store.insert(
            Collections.USERS,
            {
                "email": email,
                "password_hash": hash_password(password),
                "role": role,
                "createdAt": datetime.now(timezone.utc),
            },
        )
        logger.info("Registered %s account %s", role, record["id"])
        return public_account(record)

    def login(self, email: str, password: str) -> str:
        account = self.store.find_first(
            Collections.USERS, eq("email", normalize_email(email)), not_found="User not found"
        )
        if not verify_password(password, account.get("password_hash")):
            raise UnauthorizedError("Invalid credentials")
        return self.create_access_token({"sub": account["id"], "role": account.get("role")})

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        to_encode = data.copy()
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode.update({
            "exp": datetime.now(timezone.utc) + expires_delta,
            "jti": uuid.uuid4().hex,
        })
        return jwt.encode(to_encode, self.settings.JWT_SECRET_KEY, algorithm=self.settings.JWT_ALGORITHM)

    def decode_token(self, token: str) -> dict:
        try:
            payload = jwt.decode(token, self.settings.JWT_SECRET_KEY, algorithms=[self.settings.JWT_ALGORITHM])
        except JWTError as exc:
            raise UnauthorizedError("User not logged in") from exc
        if not payload.get("sub") or not payload.get("jti"):
            raise UnauthorizedError("User not logged in")
        return payload

    def authenticate(self, token: str) -> Dict[str, Any]:
        """Resolve a bearer token to its account, refusing revoked tokens."""
        payload = self.decode_token(token)
        if self.store.exists(Collections.REVOKED_TOKENS, eq("jti", payload["jti"])):
            raise UnauthorizedError("User not logged in")
        try:
            account = self.store.get(Collections.USERS, payload["sub"])
        except NotFoundError as exc:
            raise UnauthorizedError("User not logged in") from exc
        return public_account(account)

    def logout(self, token: str) -> None:
        payload = self.decode_token(token)
        self.store.insert(
            Collections.REVOKED_TOKENS,
            {
                "jti": payload["jti"],
                "userId": payload["sub"],
                "expiresAt": datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            },
        )

    def update_settings(self, user_id: str, requester_id: str, settings: Dict[str, Any]) -> Dict[str, Any]:
        if user_id != requester_id:
            raise ForbiddenError("Cannot update another user's settings")
        if not settings:
            raise BadRequestError("No settings provided")
        blocked = sorted(k for k in settings if k not in ALLOWED_SETTINGS)
        if blocked:
            raise BadRequestError(f"Cannot change {', '.join(blocked)} from account settings")

        updated = self.store.update(Collections.USERS, user_id, settings, not_found="User not found")
        return public_account(updated)
