"""Async client for Firebase email/password authentication."""

from fbauth.config import FirebaseAuthOptions, Settings, get_settings
from fbauth.errors import (
    FirebaseAuthError,
    FirebaseAuthException,
    FirebaseAuthMessageType,
    FirebaseDecodeException,
    FirebaseError,
    FirebaseTransportException,
    classify_error_message,
)
from fbauth.payloads import (
    AuthResult,
    SignUpNewUserRequest,
    SignUpNewUserResponse,
    VerifyPasswordRequest,
    VerifyPasswordResponse,
)
from fbauth.service import FirebaseAuthService

__all__ = [
    "AuthResult",
    "FirebaseAuthError",
    "FirebaseAuthException",
    "FirebaseAuthMessageType",
    "FirebaseAuthOptions",
    "FirebaseAuthService",
    "FirebaseDecodeException",
    "FirebaseError",
    "FirebaseTransportException",
    "Settings",
    "SignUpNewUserRequest",
    "SignUpNewUserResponse",
    "VerifyPasswordRequest",
    "VerifyPasswordResponse",
    "classify_error_message",
    "get_settings",
]
