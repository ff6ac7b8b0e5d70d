"""Error classification for Firebase Identity Toolkit responses.

The provider reports business-rule rejections as a non-2xx response with an
envelope of the form::

    {"error": {"code": 400, "message": "WEAK_PASSWORD : Password should be ...",
               "errors": [...]}}

The message starts with a machine-readable code, optionally followed by
`` : `` and a human-readable detail. This module maps that code onto
`FirebaseAuthMessageType` and defines the exceptions raised by the service.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class FirebaseAuthMessageType(str, Enum):
    """Normalized failure reasons derived from upstream error codes."""

    EmailExists = "EMAIL_EXISTS"
    WeakPassword = "WEAK_PASSWORD"
    InvalidEmail = "INVALID_EMAIL"
    MissingPassword = "MISSING_PASSWORD"
    MissingEmail = "MISSING_EMAIL"
    EmailNotFound = "EMAIL_NOT_FOUND"
    InvalidPassword = "INVALID_PASSWORD"
    UserDisabled = "USER_DISABLED"
    OperationNotAllowed = "OPERATION_NOT_ALLOWED"
    TooManyAttemptsTryLater = "TOO_MANY_ATTEMPTS_TRY_LATER"
    InvalidLoginCredentials = "INVALID_LOGIN_CREDENTIALS"
    Unknown = "UNKNOWN"


_MESSAGE_TYPES_BY_CODE: dict[str, FirebaseAuthMessageType] = {
    member.value: member
    for member in FirebaseAuthMessageType
    if member is not FirebaseAuthMessageType.Unknown
}


def extract_error_code(message: Any) -> str:
    """Return the leading code of an upstream error message.

    Args:
        message: Raw ``error.message`` value, e.g. ``"WEAK_PASSWORD : ..."``

    Returns:
        The code portion, or an empty string if it cannot be read
    """
    if not isinstance(message, str):
        return ""
    return message.split(":", 1)[0].strip()


def classify_error_message(message: Any) -> FirebaseAuthMessageType:
    """Map an upstream error message to a FirebaseAuthMessageType.

    Never raises: unrecognized or unreadable messages map to Unknown.
    """
    return _MESSAGE_TYPES_BY_CODE.get(
        extract_error_code(message), FirebaseAuthMessageType.Unknown
    )


class FirebaseAuthError(BaseModel):
    """Classified error payload returned by the provider."""

    model_config = ConfigDict(frozen=True)

    messageType: FirebaseAuthMessageType
    message: str
    code: int | None = None


def parse_error_response(payload: Any, fallback: str = "") -> FirebaseAuthError:
    """Build a FirebaseAuthError from a decoded error envelope.

    Missing or malformed keys do not fail; the message falls back to
    ``fallback`` (typically the raw response text) and classifies as Unknown.

    Args:
        payload: Decoded JSON body of a non-2xx response
        fallback: Message to use when the envelope carries none

    Returns:
        FirebaseAuthError with the classified message type
    """
    error = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(error, dict):
        error = {}

    message = error.get("message")
    if not isinstance(message, str):
        message = fallback

    code = error.get("code")
    if not isinstance(code, int) or isinstance(code, bool):
        code = None

    return FirebaseAuthError(
        messageType=classify_error_message(message),
        message=message,
        code=code,
    )


class FirebaseError(Exception):
    """Base class for all exceptions raised by the client."""


class FirebaseAuthException(FirebaseError):
    """Raised when the provider rejects a request with an error envelope."""

    def __init__(self, error: FirebaseAuthError, status_code: int | None = None):
        super().__init__(error.message or error.messageType.value)
        self.error = error
        self.status_code = status_code

    @property
    def message_type(self) -> FirebaseAuthMessageType:
        return self.error.messageType


class FirebaseTransportException(FirebaseError):
    """Raised when the request never produced an HTTP response."""


class FirebaseDecodeException(FirebaseError):
    """Raised when a successful response is missing an expected field."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
