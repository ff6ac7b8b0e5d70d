"""Firebase password authentication service.

Wraps the Identity Toolkit REST endpoints used for email/password accounts:

- ``accounts:signUp`` creates a new user
- ``accounts:signInWithPassword`` verifies an existing user's password

Each call is a single independent POST; the service keeps no state besides
its read-only options and the HTTP client.
"""

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from result import Err, Ok, Result

from fbauth.config import FirebaseAuthOptions
from fbauth.errors import (
    FirebaseAuthError,
    FirebaseAuthException,
    FirebaseDecodeException,
    FirebaseTransportException,
    parse_error_response,
)
from fbauth.payloads import (
    SignUpNewUserRequest,
    SignUpNewUserResponse,
    VerifyPasswordRequest,
    VerifyPasswordResponse,
)
from fbauth.utils.logging import get_logger

logger = get_logger(__name__)

SIGN_UP_ENDPOINT = "accounts:signUp"
VERIFY_PASSWORD_ENDPOINT = "accounts:signInWithPassword"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class FirebaseAuthService:
    """Client for Firebase email/password authentication."""

    def __init__(
        self,
        options: FirebaseAuthOptions | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            options: API key and endpoint configuration. Built from settings
                when omitted.
            client: Optional HTTP client to borrow. When omitted the service
                creates its own and closes it in ``aclose``.
        """
        self.options = options or FirebaseAuthOptions.from_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.options.timeout)

    async def __aenter__(self) -> "FirebaseAuthService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    async def sign_up_new_user(
        self, request: SignUpNewUserRequest
    ) -> SignUpNewUserResponse:
        """Create a new email/password account.

        Args:
            request: Email and password for the new account

        Returns:
            Tokens and identifiers for the created account

        Raises:
            FirebaseAuthException: The provider rejected the request
            FirebaseTransportException: The request could not be delivered
            FirebaseDecodeException: The success body was missing a field
        """
        return await self._send(SIGN_UP_ENDPOINT, request, SignUpNewUserResponse)

    async def verify_password(
        self, request: VerifyPasswordRequest
    ) -> VerifyPasswordResponse:
        """Sign in an existing account with its password.

        Args:
            request: Email and password to verify

        Returns:
            Tokens and identifiers for the account, including ``registered``

        Raises:
            FirebaseAuthException: The provider rejected the request
            FirebaseTransportException: The request could not be delivered
            FirebaseDecodeException: The success body was missing a field
        """
        return await self._send(
            VERIFY_PASSWORD_ENDPOINT, request, VerifyPasswordResponse
        )

    def _url(self, endpoint: str) -> str:
        return f"{self.options.base_url.rstrip('/')}/{endpoint}"

    async def _send(
        self, endpoint: str, request: BaseModel, model: type[ResponseT]
    ) -> ResponseT:
        """Run one exchange: POST, classify a rejection, decode a success."""
        response = await self._post(endpoint, request)

        result = self._read(endpoint, response)
        if result.is_err():
            raise FirebaseAuthException(result.unwrap_err(), response.status_code)

        return self._decode(endpoint, model, result.unwrap(), response.status_code)

    async def _post(self, endpoint: str, request: BaseModel) -> httpx.Response:
        """POST a request body and return the fully read response.

        Raises:
            FirebaseTransportException: On network-level failures
            FirebaseDecodeException: If the body cannot be content-decoded
        """
        try:
            return await self._client.post(
                self._url(endpoint),
                params={"key": self.options.api_key},
                json=request.model_dump(),
            )
        except httpx.DecodingError as e:
            logger.warning(f"{endpoint} returned a body that could not be decoded")
            raise FirebaseDecodeException(
                f"{endpoint} returned an undecodable body: {e}"
            ) from e
        except httpx.TransportError as e:
            logger.error(f"Transport failure calling {endpoint}: {e!r}")
            raise FirebaseTransportException(
                f"Request to {endpoint} failed: {e}"
            ) from e

    def _read(
        self, endpoint: str, response: httpx.Response
    ) -> Result[dict, FirebaseAuthError]:
        """Split a response into success body or classified provider error.

        Returns:
            Ok with the decoded success body, or Err with the classified
            provider error

        Raises:
            FirebaseDecodeException: If a success body is not a JSON object
        """
        if not response.is_success:
            try:
                payload = response.json()
            except ValueError:
                payload = None

            error = parse_error_response(payload, fallback=response.text)
            if error.code is None:
                error = error.model_copy(update={"code": response.status_code})
            logger.warning(
                f"{endpoint} rejected with status {response.status_code}: "
                f"{error.messageType.name}"
            )
            return Err(error)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"{endpoint} returned a non-JSON success body")
            raise FirebaseDecodeException(
                f"{endpoint} returned a non-JSON body", response.status_code
            ) from e

        if not isinstance(payload, dict):
            logger.warning(f"{endpoint} returned a non-object success body")
            raise FirebaseDecodeException(
                f"{endpoint} returned a non-object body", response.status_code
            )

        return Ok(payload)

    def _decode(
        self,
        endpoint: str,
        model: type[ResponseT],
        payload: dict,
        status_code: int,
    ) -> ResponseT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            logger.warning(f"{endpoint} response failed validation: {fields}")
            raise FirebaseDecodeException(
                f"{endpoint} response is missing or has invalid fields: {fields}",
                status_code,
            ) from e
