"""Request and response payloads for the password endpoints.

Field names follow the provider's JSON keys.
"""

from pydantic import BaseModel, ConfigDict


class SignUpNewUserRequest(BaseModel):
    """Request body for accounts:signUp."""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str
    returnSecureToken: bool = True


class VerifyPasswordRequest(BaseModel):
    """Request body for accounts:signInWithPassword."""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str
    returnSecureToken: bool = True


class AuthResult(BaseModel):
    """Fields shared by every successful password operation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    idToken: str
    refreshToken: str
    localId: str
    email: str
    # Sent as a decimal string, e.g. "3600"
    expiresIn: int
    kind: str | None = None


class SignUpNewUserResponse(AuthResult):
    """Successful accounts:signUp response."""


class VerifyPasswordResponse(AuthResult):
    """Successful accounts:signInWithPassword response."""

    registered: bool
    displayName: str = ""
