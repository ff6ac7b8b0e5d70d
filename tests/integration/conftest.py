"""Fixtures for tests that call the live Identity Toolkit API.

Requires FIREBASE_WEB_API_KEY plus the known accounts below, either in the
environment or in .env.integration:

    FBAUTH_IT_KNOWN_VALID_EMAIL / FBAUTH_IT_KNOWN_VALID_PASSWORD
    FBAUTH_IT_KNOWN_DISABLED_EMAIL / FBAUTH_IT_KNOWN_DISABLED_PASSWORD

The disabled account must be disabled in the Firebase console.
"""

import time
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from pydantic_settings import BaseSettings, SettingsConfigDict

from fbauth.config import FirebaseAuthOptions, get_settings
from fbauth.service import FirebaseAuthService


class IntegrationSettings(BaseSettings):
    """Known accounts in the Firebase project used for integration tests."""

    model_config = SettingsConfigDict(
        env_prefix="FBAUTH_IT_",
        env_file=".env.integration",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    known_valid_email: str = ""
    known_valid_password: str = ""
    known_disabled_email: str = ""
    known_disabled_password: str = ""


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    if get_settings().firebase_web_api_key:
        return
    skip = pytest.mark.skip(reason="FIREBASE_WEB_API_KEY is not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def integration_settings() -> IntegrationSettings:
    return IntegrationSettings()


@pytest.fixture
def known_valid(integration_settings: IntegrationSettings) -> tuple[str, str]:
    if not integration_settings.known_valid_email:
        pytest.skip("FBAUTH_IT_KNOWN_VALID_EMAIL is not set")
    return (
        integration_settings.known_valid_email,
        integration_settings.known_valid_password,
    )


@pytest.fixture
def known_disabled(integration_settings: IntegrationSettings) -> tuple[str, str]:
    if not integration_settings.known_disabled_email:
        pytest.skip("FBAUTH_IT_KNOWN_DISABLED_EMAIL is not set")
    return (
        integration_settings.known_disabled_email,
        integration_settings.known_disabled_password,
    )


@pytest.fixture
def fresh_email() -> str:
    """An address that has never been registered."""
    return f"{time.time_ns()}@validdomain.com"


@pytest_asyncio.fixture
async def service() -> AsyncIterator[FirebaseAuthService]:
    async with FirebaseAuthService(FirebaseAuthOptions.from_settings()) as service:
        yield service
